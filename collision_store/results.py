# ==================================================
# collision_store/results.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    MISSING_INPUT    = "missing-input"
    UNKNOWN_STRATEGY = "unknown-strategy"
    TABLE_FULL       = "table-full"
    NODE_NOT_FOUND   = "node-not-found"


REASONS = {
    ErrorKind.MISSING_INPUT   : "Please enter data",
    ErrorKind.UNKNOWN_STRATEGY: "Unknown collision strategy",
    ErrorKind.TABLE_FULL      : "All storage nodes are full",
    ErrorKind.NODE_NOT_FOUND  : "Storage node not found",
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok = True


@dataclass(frozen=True)
class Failure:
    kind:    ErrorKind
    message: str = ""
    ok = False

    @classmethod
    def of(cls, kind: ErrorKind, detail: str | None = None) -> "Failure":
        msg = REASONS[kind] if not detail else f"{REASONS[kind]}: {detail}"
        return cls(kind, msg)


Result = Union[Ok[T], Failure]
