"""Exception hierarchy for pgsql-extract.

Structural errors are fatal to the document being processed: a half-built
frame has no well-defined meaning, so nothing is recovered.

- ExtractError            base for everything raised by this package
  - StructureError        event stream violated a builder invariant
    - MissingKeyError     value-bearing event with no pending key
    - MissingFrameError   value-bearing event with no open frame, or a
                          named close with an empty frame stack
    - UnexpectedEventError  event kind the builder does not handle
  - SourceError           the tokenizer rejected the input document
  - SinkError             the serialized records could not be written
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgsql_extract.tree.events import Event

__all__ = [
    "ExtractError",
    "MissingFrameError",
    "MissingKeyError",
    "SinkError",
    "SourceError",
    "StructureError",
    "UnexpectedEventError",
]


class ExtractError(Exception):
    """Base class for all pgsql-extract errors."""


class StructureError(ExtractError):
    """The event stream is malformed or truncated.

    Attributes:
        event: The event that triggered the failure, when known.
    """

    def __init__(self, message: str, event: Event | None = None) -> None:
        super().__init__(message)
        self.event = event


class MissingKeyError(StructureError):
    pass


class MissingFrameError(StructureError):
    pass


class UnexpectedEventError(StructureError):
    pass


class SourceError(ExtractError):
    pass


class SinkError(ExtractError):
    pass
