"""
Configuration management for the partner desk core.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


class Config:
    """Configuration settings loaded from environment."""

    # Store defaults applied when callers leave fields blank
    UNKNOWN_PARTNER_NAME: str = os.getenv('UNKNOWN_PARTNER_NAME', 'Unknown Partner')
    DEFAULT_SEGMENT: str = os.getenv('DEFAULT_SEGMENT', 'SMB')
    DEFAULT_ACCOUNT_MANAGER: str = os.getenv('DEFAULT_ACCOUNT_MANAGER', 'You')
    DEFAULT_THREAD_ACTIVITY: str = os.getenv('DEFAULT_THREAD_ACTIVITY', 'Thread created')

    # Aggregation windows
    WEEKLY_WINDOW_DAYS: int = int(os.getenv('WEEKLY_WINDOW_DAYS', '7'))
    SILENT_PARTNER_DAYS: int = int(os.getenv('SILENT_PARTNER_DAYS', '14'))

    # Remote partner sync
    PARTNER_SYNC_URL: str = os.getenv('PARTNER_SYNC_URL', '')
    PARTNER_SYNC_API_KEY: str = os.getenv('PARTNER_SYNC_API_KEY', '')
    PARTNER_SYNC_TIMEOUT_SECONDS: float = float(os.getenv('PARTNER_SYNC_TIMEOUT_SECONDS', '10'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate that configuration needed for remote sync is present.

        The in-memory store runs without any of these; only the partner
        sync client needs them.

        Returns:
            List of missing configuration keys
        """
        missing = []
        if not cls.PARTNER_SYNC_URL:
            missing.append('PARTNER_SYNC_URL')
        if not cls.PARTNER_SYNC_API_KEY:
            missing.append('PARTNER_SYNC_API_KEY')
        return missing


# Singleton config instance
config = Config()
