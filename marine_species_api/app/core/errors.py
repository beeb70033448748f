"""
Result and error contract shared by the services and the call surface.

Services signal failures by raising one of the three ``ServiceError``
subclasses below.  The dispatcher turns every outcome into a value:
``Ok`` wraps a successful result and ``Err`` wraps the raised error.
Both serialise to the JSON shape clients expect::

    {"Ok": {...}}
    {"Err": {"NotFound": {"msg": "taxonomy with id=3 not found"}}}
    {"Err": {"ValidationFailed": {"content": "genus: must not be empty"}}}
    {"Err": "InvalidInput"}
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class ServiceError(Exception):
    """Base class for the closed set of service errors."""

    kind: str = "ServiceError"

    def to_wire(self) -> Union[str, Dict[str, Any]]:
        raise NotImplementedError


class ValidationFailed(ServiceError):
    """A required text field is empty or the record is too large to store."""

    kind = "ValidationFailed"

    def __init__(self, content: str) -> None:
        super().__init__(content)
        self.content = content

    def to_wire(self) -> Dict[str, Any]:
        return {self.kind: {"content": self.content}}


class InvalidInput(ServiceError):
    """Arguments are malformed or a referenced record does not exist."""

    kind = "InvalidInput"

    def __init__(self, reason: str = "") -> None:
        # ``reason`` is for logs only; the wire form carries no payload.
        super().__init__(reason or self.kind)
        self.reason = reason

    def to_wire(self) -> str:
        return self.kind


class NotFound(ServiceError):
    """No record exists for the requested identifier."""

    kind = "NotFound"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def to_wire(self) -> Dict[str, Any]:
        return {self.kind: {"msg": self.msg}}


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome of an operation."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def to_wire(self) -> Dict[str, Any]:
        return {"Ok": _dump(self.value)}


@dataclass(frozen=True)
class Err:
    """Failed outcome of an operation."""

    error: ServiceError

    @property
    def is_ok(self) -> bool:
        return False

    def to_wire(self) -> Dict[str, Any]:
        return {"Err": self.error.to_wire()}


Result = Union[Ok[T], Err]
