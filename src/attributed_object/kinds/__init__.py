"""Named kind registry and config-driven kind definition."""

from .config import define_kind, define_kinds_from_config, load_kinds
from .registry import KindRegistry

__all__ = [
    "KindRegistry",
    "define_kind",
    "define_kinds_from_config",
    "load_kinds",
]
