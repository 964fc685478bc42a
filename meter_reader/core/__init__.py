from .config import ConfigurationError, Settings, get_settings

__all__ = [
    "ConfigurationError",
    "Settings",
    "get_settings",
]
