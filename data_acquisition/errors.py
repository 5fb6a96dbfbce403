"""
Acquisition error taxonomy.

Every failed provider call surfaces as exactly one AcquisitionError subclass.
error_category is a stable string callers can switch on to show one message.
"""

from typing import Optional


class AcquisitionError(Exception):
    """Base class for all data acquisition failures."""

    error_category = "acquisition_failed"

    def __init__(
        self,
        message: str,
        symbol: Optional[str] = None,
        context: Optional[str] = None
    ) -> None:
        self.message: str = message
        self.symbol: Optional[str] = symbol
        self.context: Optional[str] = context
        super().__init__(self.message)


class InvalidSymbolError(AcquisitionError):
    """Symbol failed syntactic validation; no request was made."""
    error_category = "invalid_symbol"


class ConfigurationError(AcquisitionError):
    """Credential pool is empty or otherwise unusable."""
    error_category = "configuration"


class TransportError(AcquisitionError):
    """Non-2xx status, network failure, timeout, or undecodable body. Never retried."""
    error_category = "transport"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        symbol: Optional[str] = None,
        context: Optional[str] = None
    ) -> None:
        self.status_code: Optional[int] = status_code
        super().__init__(message, symbol=symbol, context=context)


class ProviderError(AcquisitionError):
    """Provider explicitly rejected the request ('Error Message'). Never retried."""
    error_category = "provider_error"


class AllKeysRateLimitedError(AcquisitionError):
    """Every credential was tried and at least one hit the quota."""
    error_category = "all_keys_rate_limited"

    def __init__(
        self,
        message: str,
        attempts: int = 0,
        symbol: Optional[str] = None,
        context: Optional[str] = None
    ) -> None:
        self.attempts: int = attempts
        super().__init__(message, symbol=symbol, context=context)


class AllKeysSkippedError(AcquisitionError):
    """Every credential returned a non-quota advisory note."""
    error_category = "all_keys_skipped"

    def __init__(
        self,
        message: str,
        advisory: Optional[str] = None,
        symbol: Optional[str] = None,
        context: Optional[str] = None
    ) -> None:
        self.advisory: Optional[str] = advisory
        super().__init__(message, symbol=symbol, context=context)


class EmptyResultError(AcquisitionError):
    """Structurally successful response carrying no data for the symbol."""
    error_category = "empty_result"


class AcquisitionFailedError(AcquisitionError):
    """Rotation ended without success and without a more specific cause."""
    error_category = "acquisition_failed"


class RequestCancelledError(AcquisitionError):
    """Caller cancelled the rotation before it finished."""
    error_category = "cancelled"
