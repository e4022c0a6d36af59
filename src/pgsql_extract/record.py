"""Record dataclass: the normalized output unit.

This module provides the immutable record type produced by RecordNormalizer
and its JSON-ready view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

__all__ = ["DataPair", "DataValue", "Record"]

DataValue = Union[str, bool, None, tuple["DataPair", ...]]
DataPair = tuple[str, DataValue]


def _pair_to_json(pair: DataPair) -> list[Any]:
    name, value = pair
    if isinstance(value, tuple):
        return [name, [_pair_to_json(p) for p in value]]
    return [name, value]


@dataclass(frozen=True, slots=True)
class Record:
    """One normalized protocol message.

    Attributes:
        type: Message type, from the first ``type`` field.  None when unset.
        length: Message length, from the first ``length`` field parsed as an
            integer.  None when absent, zero, or unparsable.
        frontend: True when the first ``frontend`` field is a non-zero
            number.  None (never False) otherwise.
        data: Every other field in arrival order as ``(name, value)`` pairs;
            nested objects are tuples of pairs.
    """

    type: str | None = None
    length: int | None = None
    frontend: bool | None = None
    data: tuple[DataPair, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape: unset fields omitted, pairs as 2-item lists.

        Key order is ``type``, ``frontend``, ``length``, ``data``.
        """
        out: dict[str, Any] = {}
        if self.type is not None:
            out["type"] = self.type
        if self.frontend is not None:
            out["frontend"] = self.frontend
        if self.length is not None:
            out["length"] = self.length
        out["data"] = [_pair_to_json(p) for p in self.data]
        return out
