from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome of an upstream operation."""
    value: T


@dataclass(frozen=True)
class NetworkFailure:
    """The transport never completed; no HTTP response was obtained."""
    message: str = "Unknown network error"


@dataclass(frozen=True)
class UpstreamError:
    """Upstream answered with a non-success HTTP status."""
    status_code: int
    message: str = "Bad response"


@dataclass(frozen=True)
class UpstreamTimeout:
    """Upstream did not answer before the deadline; the call was cancelled."""
    message: str = "Upstream timed out"


@dataclass(frozen=True)
class UnknownFailure:
    """Anything else, including bodies that are not the expected JSON."""
    message: str = "Unknown error"


OperationError = Union[NetworkFailure, UpstreamError, UpstreamTimeout, UnknownFailure]

Result = Union[Success[T], OperationError]
