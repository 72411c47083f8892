"""Menu elements: the abstract contract and the bundled flavors."""
from .base import BaseUI
from .choice import Choice
from .label import Label

__all__ = ["BaseUI", "Choice", "Label"]
