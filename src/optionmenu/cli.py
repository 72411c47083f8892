from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import load_menu_config
from .console import Console
from .elements import Choice, Label
from .logging_config import configure_logging
from .options_ui import OptionsUI

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_demo_elements() -> List:
    """A small settings screen showing both element flavors and a blank line."""
    return [
        Label("Use up/down to move, left/right to change a value, escape to leave."),
        None,
        Choice(["Easy", "Normal", "Hard", "Nightmare"], value=1, pre_text="Difficulty: ",
               pre_value=" (", display_value=True, post_value=")"),
        Choice(["Off", "On"], pre_text="Subtitles: "),
        Choice(["English", "Deutsch", "Magyar", "Français"], pre_text="Language: "),
        Choice(["Small", "Medium", "Large"], value=1, pre_text="Text size: "),
        None,
        Label("Changes apply when the menu is closed."),
    ]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="optionmenu",
        description="optionmenu - interactive terminal menu demo",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a menu configuration YAML file to load instead of the defaults.",
    )
    parser.add_argument(
        "--max-elements",
        type=int,
        default=None,
        help="Show at most this many elements at once; below 1 shows all (overrides the config).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for records written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging (same as --log-level DEBUG).",
    )
    return parser.parse_args(argv)


def main(argv=None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else getattr(logging, args.log_level))

    config = load_menu_config(None if args.config_path is None else str(args.config_path))
    if args.max_elements is not None:
        config.scroll_settings = replace(config.scroll_settings, max_elements=args.max_elements)
    if config.title is None:
        config.title = "Settings"

    console = console or Console()
    elements = build_demo_elements()
    menu = OptionsUI.from_config(elements, config, console=console)
    result = menu.display(config.make_keybinds())
    logger.info("Demo menu closed with result %r", result)

    for element in elements:
        if isinstance(element, Choice):
            console.write_line(f"{element.pre_text}{element.choices[element.value]}")
    return 0
