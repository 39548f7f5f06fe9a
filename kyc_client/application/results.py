"""
Result values for KYC calls.

``capture`` runs a client operation and returns the outcome as a value
instead of raising, for callers that branch on the failure kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

import requests

from kyc_client.domain.exceptions import WrongFieldsDataError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call."""

    value: T


@dataclass(frozen=True)
class ValidationFailure:
    """The service rejected request fields; ``payload`` is its error body."""

    payload: Any
    error: WrongFieldsDataError


@dataclass(frozen=True)
class TransportFailure:
    """Any other HTTP or network failure, kept as raised by the transport."""

    error: requests.RequestException

    @property
    def status_code(self) -> int | None:
        response = getattr(self.error, "response", None)
        return response.status_code if response is not None else None


KycResult = Union[Ok[T], ValidationFailure, TransportFailure]


def capture(call: Callable[..., T], *args: Any, **kwargs: Any) -> KycResult[T]:
    """Run ``call`` and fold service and transport failures into a result.

    Contract violations such as ``MissingSessionDataError`` and response
    decode errors still raise.

    Examples:
        >>> result = capture(client.get_status, "a@b.com")  # doctest: +SKIP
        >>> if isinstance(result, ValidationFailure): ...  # doctest: +SKIP
    """
    try:
        return Ok(call(*args, **kwargs))
    except WrongFieldsDataError as exc:
        return ValidationFailure(payload=exc.payload, error=exc)
    except ValueError:
        # requests.JSONDecodeError is also a RequestException.
        raise
    except requests.RequestException as exc:
        return TransportFailure(error=exc)
