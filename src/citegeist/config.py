"""Settings controlling how bibliographies are normalized.

NormalizerSettings

`on_entry_error` (`"abort" | "skip"`)
: What to do when a single entry fails to normalize. `"abort"` stops the whole
  conversion with the entry's error (default). `"skip"` drops the entry,
  records an issue on the collected map and keeps going.

`missing_title` (`"error" | "empty"`)
: Entries without a `title` field either raise `MissingTitleError` (default)
  or receive an empty title so every record still carries the key.

`workers` (`int`)
: Number of threads used to normalize entries. Output is identical for any
  value; entries are always collected in source order.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


EntryErrorPolicy = Literal["abort", "skip"]
MissingTitlePolicy = Literal["error", "empty"]


class NormalizerSettings(BaseModel):
    """Conversion policy shared by the plugin entry point and the CLI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    on_entry_error: EntryErrorPolicy = Field(
        default="abort", description="Abort on the first failing entry or skip it"
    )
    missing_title: MissingTitlePolicy = Field(
        default="error", description="Raise or store an empty title when it is absent"
    )
    workers: int = Field(default=1, ge=1, description="Threads used for normalization")


DEFAULT_SETTINGS = NormalizerSettings()


__all__ = [
    "DEFAULT_SETTINGS",
    "EntryErrorPolicy",
    "MissingTitlePolicy",
    "NormalizerSettings",
]
