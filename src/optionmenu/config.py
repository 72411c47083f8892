from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib.resources import files as resource_files
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigError
from .input.keybinds import Keybinds

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_LINES = 70
UNBOUNDED = -1


@dataclass
class CursorIcon:
    """Glyphs drawn around the focused and the unfocused lines."""

    icon: str = "  "
    icon_right: str = "  "
    selected_icon: str = "> "
    selected_icon_right: str = " <"

    def pair(self, focused: bool) -> tuple[str, str]:
        if focused:
            return self.selected_icon, self.selected_icon_right
        return self.icon, self.icon_right

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CursorIcon":
        defaults = cls()
        return cls(
            icon=str(d.get("icon", defaults.icon)),
            icon_right=str(d.get("icon_right", defaults.icon_right)),
            selected_icon=str(d.get("selected_icon", defaults.selected_icon)),
            selected_icon_right=str(d.get("selected_icon_right", defaults.selected_icon_right)),
        )


@dataclass
class ScrollIcon:
    """Indicators written above and below the visible window."""

    top_end_indicator: str = ""
    top_continue_indicator: str = "...\n"
    bottom_end_indicator: str = ""
    bottom_continue_indicator: str = "..."

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScrollIcon":
        defaults = cls()
        return cls(
            top_end_indicator=str(d.get("top_end_indicator", defaults.top_end_indicator)),
            top_continue_indicator=str(d.get("top_continue_indicator", defaults.top_continue_indicator)),
            bottom_end_indicator=str(d.get("bottom_end_indicator", defaults.bottom_end_indicator)),
            bottom_continue_indicator=str(d.get("bottom_continue_indicator", defaults.bottom_continue_indicator)),
        )


@dataclass
class ScrollSettings:
    """Scrolling behaviour of a menu.

    Attributes:
        max_elements: Maximum number of elements shown at once; -1 shows all.
        scroll_up_margin: Elements kept visible above the selection.
        scroll_down_margin: Elements kept visible below the selection.
        scroll_icon: Indicator glyphs.
    """

    max_elements: int = UNBOUNDED
    scroll_up_margin: int = 1
    scroll_down_margin: int = 1
    scroll_icon: ScrollIcon = field(default_factory=ScrollIcon)

    def __post_init__(self) -> None:
        self.normalize()

    @property
    def unbounded(self) -> bool:
        return self.max_elements == UNBOUNDED

    def normalize(self) -> "ScrollSettings":
        """Clamp the settings in place so the selection always stays visible.

        Anything below one visible row means "show everything". In a bounded
        window the margins may cover at most ``max_elements - 1`` rows.
        """
        if self.max_elements is None or int(self.max_elements) < 1:
            self.max_elements = UNBOUNDED
        self.max_elements = int(self.max_elements)
        self.scroll_up_margin = max(0, int(self.scroll_up_margin))
        self.scroll_down_margin = max(0, int(self.scroll_down_margin))
        if self.unbounded:
            return self

        room = self.max_elements - 1
        if self.scroll_up_margin + self.scroll_down_margin > room:
            up = min(self.scroll_up_margin, room)
            down = min(self.scroll_down_margin, room - up)
            logger.warning(
                "Scroll margins %d/%d do not fit in %d visible elements; using %d/%d",
                self.scroll_up_margin,
                self.scroll_down_margin,
                self.max_elements,
                up,
                down,
            )
            self.scroll_up_margin, self.scroll_down_margin = up, down
        return self

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScrollSettings":
        return cls(
            max_elements=d.get("max_elements", UNBOUNDED),
            scroll_up_margin=d.get("scroll_up_margin", 1),
            scroll_down_margin=d.get("scroll_down_margin", 1),
            scroll_icon=ScrollIcon.from_dict(d.get("scroll_icon") or {}),
        )


@dataclass
class MenuConfig:
    title: Optional[str] = None
    can_escape: bool = True
    pass_in_object: bool = True
    clear_lines: int = DEFAULT_CLEAR_LINES
    cursor_icon: CursorIcon = field(default_factory=CursorIcon)
    scroll_settings: ScrollSettings = field(default_factory=ScrollSettings)
    keybinds: Optional[List[List[str]]] = None

    @property
    def clear_screen_text(self) -> str:
        return "\n" * self.clear_lines

    def make_keybinds(self) -> Keybinds:
        if not self.keybinds:
            return Keybinds.default()
        return Keybinds.from_names(self.keybinds)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MenuConfig":
        """Create a config from a dict with validation and clamping."""
        if not isinstance(d, dict):
            raise ConfigError(f"Menu configuration must be a mapping, got {type(d).__name__}")
        keybinds = d.get("keybinds")
        if keybinds is not None:
            if not isinstance(keybinds, list):
                raise ConfigError("'keybinds' must be a list of key name lists")
            keybinds = [list(k) if isinstance(k, (list, tuple)) else [k] for k in keybinds]
        title = d.get("title")
        return cls(
            title=None if title is None else str(title),
            can_escape=bool(d.get("can_escape", True)),
            pass_in_object=bool(d.get("pass_in_object", True)),
            clear_lines=max(0, int(d.get("clear_lines", DEFAULT_CLEAR_LINES))),
            cursor_icon=CursorIcon.from_dict(d.get("cursor_icon") or {}),
            scroll_settings=ScrollSettings.from_dict(d.get("scroll_settings") or {}),
            keybinds=keybinds,
        )


def load_menu_config(path: Optional[str] = None) -> MenuConfig:
    """Load menu configuration from YAML.

    If path is None, loads the embedded default resource at
    optionmenu/data/defaults.yaml.
    """
    if path is None:
        data = resource_files("optionmenu.data").joinpath("defaults.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded menu config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded menu config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in menu config: {exc}") from exc
    config = MenuConfig.from_dict(raw)
    # Resolve key names early so a bad table fails at load time.
    config.make_keybinds()
    logger.info(
        "Menu config: max_elements=%s | can_escape=%s | custom keybinds=%s",
        config.scroll_settings.max_elements,
        config.can_escape,
        config.keybinds is not None,
    )
    return config


__all__ = [
    "CursorIcon",
    "ScrollIcon",
    "ScrollSettings",
    "MenuConfig",
    "load_menu_config",
    "UNBOUNDED",
    "DEFAULT_CLEAR_LINES",
]
