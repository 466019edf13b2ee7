"""Runtime settings for the kvstore-lite command line.

Values come from environment variables at import time. The library
itself never reads these: ConcurrentMap takes everything it needs as
constructor or method arguments.
"""
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """CLI configuration."""

    # Store file used when --path is not given
    STORE_PATH: str = os.environ.get("KVSTORE_LITE_PATH", "store.bin")

    # Passed to logging.basicConfig by the CLI
    LOG_LEVEL: str = os.environ.get("KVSTORE_LITE_LOG_LEVEL", "WARNING").upper()


settings = Settings()
