"""Tagged result values returned by the API layer.

Every remote operation resolves to either ``Ok(value)`` or ``Err(error)``.
Callers branch on the tag instead of catching exceptions; ``unwrap()`` is
available where raising is more convenient (CLI commands, scripts).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

from finagg.domain.shared.exceptions import DomainException

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a domain exception."""

    error: DomainException

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error

    def map(self, fn: Callable) -> Err:
        return self


Result = Union[Ok[T], Err]
