from .settings import Settings, get_settings
from .log_setup import LOG_FORMAT, setup_logging

__all__ = ["Settings", "get_settings", "setup_logging", "LOG_FORMAT"]
