"""
Logging setup shared by the entry point and the demo app.
"""

import logging

from textual.logging import TextualHandler

from ..exceptions.base import wrap_exception
from ..exceptions.config import ConfigError
from .settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@wrap_exception(ConfigError, user_hint="Check that POLICY_PICKER_LOG_FILE is writable.")
def setup_logging(settings: Settings) -> logging.Handler:
    """Attach one handler to the root logger and return it.

    Textual owns the terminal while the picker runs, so records go to the
    log file when one is configured and to Textual's devtools log otherwise.
    """
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(settings.log_file), mode="a")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.addHandler(handler)
    return handler
