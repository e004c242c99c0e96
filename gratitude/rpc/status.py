# gratitude/rpc/status.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# =====================================================================
# STATUS CODES
# =====================================================================

class StatusCode(str, Enum):
    """Outcome codes shared by every RPC service and channel."""
    OK = "OK"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL = "INTERNAL"
    UNAVAILABLE = "UNAVAILABLE"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    UNIMPLEMENTED = "UNIMPLEMENTED"


# =====================================================================
# RESULTS
# =====================================================================

@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call carrying its response value."""
    value: T
    ok: ClassVar[bool] = True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    """Failed call. ``message`` is safe to show to the caller."""
    code: StatusCode
    message: str
    ok: ClassVar[bool] = False

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        return self


RpcResult = Union[Ok[T], Err]


def invalid_argument(message: str) -> Err:
    return Err(StatusCode.INVALID_ARGUMENT, message)


def internal(message: str = "internal error") -> Err:
    return Err(StatusCode.INTERNAL, message)
