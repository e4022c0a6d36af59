"""ExtractConfig: immutable settings for one extraction run.

ExtractConfig is a frozen dataclass.  It selects which dissector namespace
is picked out of the capture and how the resulting records are written.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExtractConfig"]


@dataclass(frozen=True, slots=True)
class ExtractConfig:
    """Immutable configuration for namespace extraction.

    Attributes:
        namespace: Dissector namespace to pick, e.g. ``"pgsql"``.  An object
            is picked when its enclosing key equals this name, and
            ``"<namespace>."`` is stripped from field names inside it.
        strip_prefix: When False, field names are kept verbatim.
        indent: Indentation used when serializing records.
        output_suffix: Inserted before the extension of the derived output
            path (``capture.json`` -> ``capture.pgsql.json``).
    """

    namespace: str = "pgsql"
    strip_prefix: bool = True
    indent: int = 4
    output_suffix: str = "pgsql"

    def __post_init__(self) -> None:
        if not self.namespace:
            msg = "namespace must be a non-empty string"
            raise ValueError(msg)
        if "." in self.namespace:
            msg = f"namespace must not contain '.', got {self.namespace!r}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not self.output_suffix:
            msg = "output_suffix must be a non-empty string"
            raise ValueError(msg)
