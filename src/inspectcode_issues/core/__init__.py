from .config_loader import AppConfig, ConfigError, ConfigLoader, ReaderConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "ConfigLoader",
    "ReaderConfig",
]
