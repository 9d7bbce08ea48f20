"""Configuration validators, one per cabinet domain."""

from .back_panel import BackPanelValidator
from .base import ValidationError, ValidationResult, ValidationWarning
from .carcass import CarcassValidator
from .drawers import DrawerValidator
from .predrills import PredrillValidator
from .shelves import ShelfValidator

__all__ = [
    "BackPanelValidator",
    "CarcassValidator",
    "DrawerValidator",
    "PredrillValidator",
    "ShelfValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
