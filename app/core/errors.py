"""Error taxonomy and tagged provider results."""

from dataclasses import dataclass, field


class RelayError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RelayError):
    """Raised when a required request field is missing or empty."""

    status_code = 400


class ProviderError(RelayError):
    """The external AI call failed (network, auth, quota, malformed reply)."""

    status_code = 500


@dataclass(frozen=True)
class Success:
    """Generated text returned by the provider."""

    text: str
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """A provider call that did not produce text."""

    error: ProviderError
    success: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return self.error.message


AIResponse = Success | Failure
