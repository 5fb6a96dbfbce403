"""
Configuration settings loader with secure API key management.
Loads environment variables from .env file and provides masked logging.
The Alpha Vantage credential pool is parsed once here and handed to clients explicitly.
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from . import constants
from .api_key_manager import CredentialPool

# Load environment variables from .env
project_root = Path(__file__).parent.parent
env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings with secure API key handling."""

    def __init__(self):
        # An empty pool is allowed here; the client refuses to use it on the first request.
        self._credential_pool = CredentialPool.from_env_value(os.getenv('ALPHAVANTAGE_API_KEY'))

        self.ALPHAVANTAGE_BASE_URL = os.getenv('ALPHAVANTAGE_BASE_URL', constants.ALPHAVANTAGE_BASE_URL)

        try:
            self.ALPHAVANTAGE_TIMEOUT_SECONDS = float(
                os.getenv('ALPHAVANTAGE_TIMEOUT_SECONDS', constants.ALPHAVANTAGE_TIMEOUT_SECONDS)
            )
        except ValueError:
            self.ALPHAVANTAGE_TIMEOUT_SECONDS = float(constants.ALPHAVANTAGE_TIMEOUT_SECONDS)

    @property
    def credential_pool(self) -> CredentialPool:
        return self._credential_pool

    def get_key_count(self) -> int:
        """Get number of Alpha Vantage keys configured."""
        return len(self._credential_pool)

    # --- Helpers ---

    @staticmethod
    def mask_api_key(api_key: str) -> str:
        """
        Mask API key for secure logging.
        Shows only first 4 and last 4 characters.

        Args:
            api_key: The API key to mask

        Returns:
            Masked API key (e.g., 'ltwM...I4ha')
        """
        if not api_key or len(api_key) < 8:
            return "****"
        return f"{api_key[:4]}...{api_key[-4:]}"


# Global settings instance
settings = Settings()
