"""Extract C# backend rules, skills and workflows into a project's `.agent` folder."""

from ag_csharp.config import Settings, load_settings
from ag_csharp.templates import (
    Catalog,
    CatalogEntry,
    DecodedPath,
    ExtractionResult,
    MalformedResourceKeyError,
    MappingResourceStore,
    PackageResourceStore,
    ResourceStore,
    TemplateCategory,
    TemplateError,
    ValidationReport,
    backup_agent_dir,
    decode_resource_key,
    default_store,
    extract_templates,
    install_templates,
    load_catalog,
    validate_agent_dir,
)

__version__ = "1.0.0"

__all__ = [
    "Catalog",
    "CatalogEntry",
    "DecodedPath",
    "ExtractionResult",
    "MalformedResourceKeyError",
    "MappingResourceStore",
    "PackageResourceStore",
    "ResourceStore",
    "Settings",
    "TemplateCategory",
    "TemplateError",
    "ValidationReport",
    "__version__",
    "backup_agent_dir",
    "decode_resource_key",
    "default_store",
    "extract_templates",
    "install_templates",
    "load_catalog",
    "load_settings",
    "validate_agent_dir",
]
