"""Write constraint variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WriteAsRead:
    enabled: bool = True


@dataclass(frozen=True)
class UseEnumeratedValues:
    enabled: bool = True


@dataclass(frozen=True)
class WriteConstraintRange:
    """Only values in [minimum, maximum] may be written."""

    minimum: int
    maximum: int


WriteConstraint = Union[WriteAsRead, UseEnumeratedValues, WriteConstraintRange]
