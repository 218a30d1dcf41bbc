# src/wavesim_core/log_config.py
import logging
import sys

# Name given to the handler installed here, so repeated calls replace it without
# touching handlers that other code attached to the root logger.
_HANDLER_NAME = "wavesim-console"


def setup_logging(level=logging.INFO, stream=None):
    """
    Sends log records to stderr (or `stream`) with a timestamped format.

    stdout is left to the command-line results. Calling this again changes the level
    and replaces the previously installed handler.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    logging.getLogger(__name__).debug("Logging configured at level %s.", logging.getLevelName(level))
