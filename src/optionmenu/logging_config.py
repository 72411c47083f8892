import logging
import os
import sys

LOG_LEVEL_ENV = "OPTIONMENU_LOG_LEVEL"


def configure_logging(default_level: int = logging.INFO) -> int:
    """Configure the root logger for command line use and return the level.

    Honours the OPTIONMENU_LOG_LEVEL env var if present. Records go to stderr
    so they never interleave with the menu frames written to stdout.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    return level
