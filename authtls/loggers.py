import importlib.util
import logging
import os
import sys
import typing

if importlib.util.find_spec("pythonjsonlogger.json"):
    # Module was renamed: https://github.com/nhairs/python-json-logger/releases/tag/v3.1.0
    from pythonjsonlogger import json as jsonlogger
else:
    from pythonjsonlogger import jsonlogger

# This is the environment variable that controls the level of the authtls logger.
LOGGING_ENV_VAR = "AUTHTLS_LOGGING_LEVEL"
LOGGING_FMT_ENV_VAR = "AUTHTLS_LOGGING_FORMAT"
LOGGING_RICH_FMT_ENV_VAR = "AUTHTLS_RICH_TRACEBACKS"

logger = logging.getLogger("authtls")

# Stop propagation so that configuration is isolated to this file (so that it doesn't matter what the
# global Python root logger is set to).
logger.propagate = False


def set_authtls_log_properties(
    handler: typing.Optional[logging.Handler] = None,
    filter: typing.Optional[logging.Filter] = None,
    level: typing.Optional[int] = None,
):
    """
    Sets the authtls logger to the specified handler, filter, and level. If any of the parameters are None, then
    the corresponding property on the authtls logger will not be set.

    :param handler: logging.Handler to add to the authtls logger
    :param filter: logging.Filter to add to the authtls logger
    :param level: logging level to set the authtls logger to
    """
    global logger
    if handler is not None:
        logger.handlers.clear()
        logger.addHandler(handler)
    if filter is not None:
        logger.addFilter(filter)
    if level is not None:
        logger.setLevel(level)


def _get_env_logging_level(default_level: int = logging.WARNING) -> int:
    """
    Returns the logging level set in the environment variable, or logging.WARNING if the environment variable is not
    set.
    """
    return int(os.getenv(LOGGING_ENV_VAR, default_level))


def initialize_global_loggers():
    """
    Initializes the global loggers to the default configuration.
    """
    # Use Rich logging only when someone is watching.
    if sys.stderr.isatty() and is_rich_logging_enabled():
        try:
            upgrade_to_rich_logging()
            return
        except OSError as e:
            logger.warning(f"Failed to initialize rich logging: {e}")

    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt="[%(name)s] %(message)s")
    if os.environ.get(LOGGING_FMT_ENV_VAR, "json") == "json":
        formatter = jsonlogger.JsonFormatter(fmt="%(asctime)s %(name)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)

    set_authtls_log_properties(handler, None, _get_env_logging_level())


def is_rich_logging_enabled() -> bool:
    return os.environ.get(LOGGING_RICH_FMT_ENV_VAR) != "0"


def upgrade_to_rich_logging(log_level: typing.Optional[int] = logging.WARNING):
    import click
    from rich.console import Console
    from rich.logging import RichHandler

    import authtls

    try:
        width = os.get_terminal_size().columns
    except Exception as e:
        logger.debug(f"Failed to get terminal size: {e}")
        width = 80

    handler = RichHandler(
        tracebacks_suppress=[click, authtls],
        rich_tracebacks=True,
        omit_repeated_times=False,
        show_path=False,
        log_time_format="%H:%M:%S.%f",
        console=Console(width=width, stderr=True),
    )

    formatter = logging.Formatter(fmt="%(filename)s:%(lineno)d - %(message)s")
    handler.setFormatter(formatter)
    set_authtls_log_properties(handler, None, _get_env_logging_level(default_level=log_level))


def get_level_from_cli_verbosity(verbosity: int) -> int:
    """
    Converts a verbosity level from the CLI to a logging level.

    :param verbosity: verbosity level from the CLI
    :return: logging level
    """
    if verbosity == 0:
        return _get_env_logging_level(default_level=logging.CRITICAL)
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


# Default initialization
initialize_global_loggers()
