"""Bundled template resources: key decoding, extraction, catalog and validation."""

from ag_csharp.templates.catalog import (
    CATEGORY_SUMMARIES,
    Catalog,
    CatalogEntry,
    load_catalog,
)
from ag_csharp.templates.extractor import (
    ExtractionResult,
    backup_agent_dir,
    backup_path_for,
    extract_templates,
    install_templates,
)
from ag_csharp.templates.keys import (
    RESOURCE_PREFIX,
    DecodedPath,
    MalformedResourceKeyError,
    TemplateCategory,
    TemplateError,
    decode_resource_key,
    encode_resource_key,
)
from ag_csharp.templates.store import (
    MappingResourceStore,
    PackageResourceStore,
    ResourceStore,
    default_store,
)
from ag_csharp.templates.validation import ValidationReport, validate_agent_dir

__all__ = [
    "CATEGORY_SUMMARIES",
    "RESOURCE_PREFIX",
    "Catalog",
    "CatalogEntry",
    "DecodedPath",
    "ExtractionResult",
    "MalformedResourceKeyError",
    "MappingResourceStore",
    "PackageResourceStore",
    "ResourceStore",
    "TemplateCategory",
    "TemplateError",
    "ValidationReport",
    "backup_agent_dir",
    "backup_path_for",
    "decode_resource_key",
    "default_store",
    "encode_resource_key",
    "extract_templates",
    "install_templates",
    "load_catalog",
    "validate_agent_dir",
]
