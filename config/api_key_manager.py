from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class CredentialPool:
    """
    Ordered, immutable pool of provider credential tokens.
    Parsed once from a comma-separated config/env value and never rotated in place;
    callers walk it front to back for every logical request.
    """

    tokens: Tuple[str, ...] = ()

    @classmethod
    def from_env_value(cls, raw_value: Optional[str]) -> "CredentialPool":
        """
        Build a pool from a raw env value.

        Args:
            raw_value: Raw string from environment/config (e.g., 'key1, key2')

        Returns:
            CredentialPool (empty if raw_value is missing or blank)
        """
        if not raw_value:
            return cls()

        # "key1, key2" -> ("key1", "key2"); blank entries are dropped
        return cls(tuple(k.strip() for k in raw_value.split(',') if k.strip()))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __bool__(self) -> bool:
        return len(self.tokens) > 0

    def __repr__(self) -> str:
        # Never leak raw tokens through repr()
        return f"CredentialPool(size={len(self.tokens)})"
