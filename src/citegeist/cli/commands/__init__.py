"""CLI command implementations."""

from __future__ import annotations

from .convert import convert
from .show import dump, show


__all__ = ["convert", "dump", "show"]
