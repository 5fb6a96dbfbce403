"""
Key Rotation Client - runs one logical provider request across the credential pool.

Tokens are tried strictly in pool order, one at a time. The rotation is modelled as a
small state machine:

    TRYING(i) --SUCCESS--------------------------> SUCCEEDED
    TRYING(i) --HARD_ERROR / transport failure---> HARD_FAILED
    TRYING(i) --RATE_LIMITED / ADVISORY----------> TRYING(i+1), or EXHAUSTED past the last token

Only SUCCEEDED returns a value; every other terminal state raises exactly one
AcquisitionError.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeVar

import requests

from config.api_key_manager import CredentialPool
from config.settings import settings
from data_acquisition.errors import (
    AcquisitionError,
    AcquisitionFailedError,
    AllKeysRateLimitedError,
    AllKeysSkippedError,
    ConfigurationError,
    ProviderError,
    RequestCancelledError,
    TransportError,
)
from data_acquisition.http_utils import get_json
from data_acquisition.stock_data.response_classifier import (
    Classification,
    ResponseClassifier,
    ResponseKind,
    default_classifier,
)
from utils.logger import setup_logger

logger = setup_logger('key_rotation_client')

T = TypeVar('T')

RequestBuilder = Callable[[str], Dict[str, Any]]


class RotationState(Enum):
    TRYING = "trying"
    SUCCEEDED = "succeeded"
    HARD_FAILED = "hard_failed"
    EXHAUSTED = "exhausted"


@dataclass
class RotationRun:
    """Mutable bookkeeping for a single execute() call. Never shared across calls."""
    pool_size: int
    state: RotationState = RotationState.TRYING
    token_index: int = 0
    rate_limited: int = 0
    skipped: int = 0
    last_advisory: Optional[str] = None
    last_transport_error: Optional[TransportError] = None
    failure: Optional[AcquisitionError] = None
    payload: Optional[Dict[str, Any]] = None

    def advance(self, classification: Classification) -> RotationState:
        """Apply one attempt's classification and return the new state."""
        kind = classification.kind

        if kind is ResponseKind.SUCCESS:
            self.payload = classification.payload
            self.state = RotationState.SUCCEEDED
        elif kind is ResponseKind.HARD_ERROR:
            self.failure = ProviderError(classification.message or "Provider rejected the request")
            self.state = RotationState.HARD_FAILED
        else:
            if kind is ResponseKind.RATE_LIMITED:
                self.rate_limited += 1
            else:
                self.skipped += 1
            self.last_advisory = classification.message
            self._next_token()

        return self.state

    def fail_transport(self, error: TransportError) -> RotationState:
        self.last_transport_error = error
        self.failure = error
        self.state = RotationState.HARD_FAILED
        return self.state

    def _next_token(self):
        self.token_index += 1
        if self.token_index >= self.pool_size:
            self.state = RotationState.EXHAUSTED

    def exhaustion_error(self) -> AcquisitionError:
        """Single classified error for a pool that ran out without success."""
        if self.rate_limited > 0:
            return AllKeysRateLimitedError(
                f"API call frequency limit reached on all {self.pool_size} API key(s). "
                "Please try again later.",
                attempts=self.token_index
            )
        if self.skipped == self.pool_size:
            return AllKeysSkippedError(
                f"All {self.pool_size} API key(s) returned an advisory instead of data: "
                f"{self.last_advisory}",
                advisory=self.last_advisory
            )
        if self.last_transport_error is not None:
            return self.last_transport_error
        return AcquisitionFailedError("Failed to fetch data from the provider")


class KeyRotationClient:
    """Executes provider requests against an ordered CredentialPool."""

    def __init__(
        self,
        pool: CredentialPool,
        base_url: str = None,
        timeout: float = None,
        session: Optional[requests.Session] = None,
        classifier: Optional[ResponseClassifier] = None
    ) -> None:
        """
        Args:
            pool: Credential tokens, tried front to back
            base_url: Provider endpoint (defaults to settings)
            timeout: Per-attempt timeout in seconds (defaults to settings)
            session: Optional requests session (one is created if omitted)
            classifier: Optional ResponseClassifier override
        """
        self.pool = pool
        self.base_url = base_url or settings.ALPHAVANTAGE_BASE_URL
        self.timeout = timeout if timeout is not None else settings.ALPHAVANTAGE_TIMEOUT_SECONDS
        self.classifier = classifier or default_classifier
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "KeyRotationClient":
        return cls(settings.credential_pool)

    def execute(
        self,
        build_request: RequestBuilder,
        parse_success: Callable[[Dict[str, Any]], T],
        context: str,
        symbol: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> T:
        """
        Run one logical request, rotating credentials on quota/advisory responses.

        Args:
            build_request: token -> query params for one attempt
            parse_success: payload -> typed result; its exceptions propagate unretried
            context: Human-readable label for logs/errors (e.g. 'OVERVIEW AAPL')
            symbol: Symbol attached to raised errors
            cancel_event: Checked before every attempt

        Returns:
            Result of parse_success on the first SUCCESS payload

        Raises:
            ConfigurationError: the pool is empty
            TransportError: first non-2xx/undecodable/network failure
            ProviderError: first explicit provider rejection
            AllKeysRateLimitedError / AllKeysSkippedError: pool exhausted
            RequestCancelledError: cancel_event was set
        """
        if not self.pool:
            raise ConfigurationError(
                "Alpha Vantage API key is not configured (ALPHAVANTAGE_API_KEY is empty)",
                symbol=symbol, context=context
            )

        run = RotationRun(pool_size=len(self.pool))

        while run.state is RotationState.TRYING:
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError(f"{context} cancelled", symbol=symbol, context=context)

            token = self.pool.tokens[run.token_index]
            logger.info(
                f"Fetching {context} from Alpha Vantage "
                f"(key {run.token_index + 1}/{run.pool_size}: {settings.mask_api_key(token)})"
            )

            try:
                payload = get_json(
                    self.session,
                    self.base_url,
                    params=build_request(token),
                    timeout=self.timeout,
                    source_name="Alpha Vantage"
                )
            except TransportError as e:
                run.fail_transport(e)
                break

            classification = self.classifier.classify(payload)
            state = run.advance(classification)

            if classification.kind is ResponseKind.RATE_LIMITED:
                logger.warning(f"Alpha Vantage rate limit ({context}): {classification.message}")
            elif classification.kind is ResponseKind.AMBIGUOUS_ADVISORY:
                logger.warning(
                    f"Alpha Vantage notice ({context}), skipping key "
                    f"[{run.skipped}]: {classification.message}"
                )
            elif classification.kind is ResponseKind.HARD_ERROR:
                logger.error(f"Alpha Vantage API error ({context}): {classification.message}")

            if state is RotationState.EXHAUSTED:
                logger.warning(f"All Alpha Vantage keys exhausted for {context}.")

        if run.state is RotationState.SUCCEEDED:
            return parse_success(run.payload)

        error = run.failure if run.state is RotationState.HARD_FAILED else run.exhaustion_error()
        error.symbol = error.symbol or symbol
        error.context = error.context or context
        raise error
