from ag_csharp.config.settings import LOG_LEVELS, Settings, load_settings

__all__ = ["LOG_LEVELS", "Settings", "load_settings"]
