"""
Response Classifier - decides what a raw provider payload means.

Alpha Vantage answers HTTP 200 for almost everything, so the body is the only signal
separating "stop now" from "try another credential". Precedence:

1. 'Error Message' present            -> HARD_ERROR (never retried)
2. advisory ('Note', 'Information') mentions the quota -> RATE_LIMITED
3. any other advisory                  -> AMBIGUOUS_ADVISORY (retried, may be key-specific)
4. otherwise                           -> SUCCESS (payload passed through unchanged)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from config import constants


class ResponseKind(Enum):
    HARD_ERROR = "hard_error"
    RATE_LIMITED = "rate_limited"
    AMBIGUOUS_ADVISORY = "ambiguous_advisory"
    SUCCESS = "success"


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one attempt's payload."""
    kind: ResponseKind
    message: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None

    @property
    def is_retryable(self) -> bool:
        return self.kind in (ResponseKind.RATE_LIMITED, ResponseKind.AMBIGUOUS_ADVISORY)


class ResponseClassifier:
    """Assigns each payload one of the four ResponseKind variants."""

    def __init__(
        self,
        error_field: str = constants.ERROR_MESSAGE_FIELD,
        advisory_fields=constants.ADVISORY_FIELDS,
        quota_keywords=constants.QUOTA_KEYWORDS
    ):
        self.error_field = error_field
        self.advisory_fields = tuple(advisory_fields)
        self.quota_keywords = tuple(k.lower() for k in quota_keywords)

    def is_quota_notice(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.quota_keywords)

    def classify(self, payload: Dict[str, Any]) -> Classification:
        error_message = payload.get(self.error_field)
        if error_message:
            return Classification(ResponseKind.HARD_ERROR, message=str(error_message))

        advisories = [
            str(payload[name]) for name in self.advisory_fields
            if payload.get(name)
        ]

        for advisory in advisories:
            if self.is_quota_notice(advisory):
                return Classification(ResponseKind.RATE_LIMITED, message=advisory)

        if advisories:
            return Classification(ResponseKind.AMBIGUOUS_ADVISORY, message=advisories[0])

        return Classification(ResponseKind.SUCCESS, payload=payload)


# Stateless; shared by every client that doesn't bring its own
default_classifier = ResponseClassifier()
