from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DB_SEPARATOR = "|"

# Environment variable read by `MoneyKitConfig.from_env`
ENV_DB_SEPARATOR = "MONEYKIT_DB_SEPARATOR"


@dataclass(frozen=True)
class MoneyKitConfig:
    """Settings passed explicitly to the persistence codecs.

    Attributes:
        db_separator (str): Joins amount and currency code in database values,
            e.g. "2550|USD".
    """

    db_separator: str = DEFAULT_DB_SEPARATOR

    def __post_init__(self):
        # Raise: separator must be a non-empty string
        if not isinstance(self.db_separator, str) or not self.db_separator:
            raise ValueError(f"$db_separator must be a non-empty string, but provided value is: {self.db_separator!r}")

        # Raise: separator must not be confused with the amount or the code
        if any(ch.isalnum() or ch == "-" for ch in self.db_separator):
            raise ValueError(f"$db_separator must not contain letters, digits or '-', but provided value is: {self.db_separator!r}")

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> MoneyKitConfig:
        """Build config from environment variables, loading a `.env` file first.

        Variables already present in the environment win over the `.env` file.

        Args:
            dotenv_path: Explicit `.env` file. If None, `python-dotenv` searches
                for one starting from the current directory.

        Returns:
            MoneyKitConfig: Config with defaults for unset variables.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        db_separator = os.environ.get(ENV_DB_SEPARATOR, DEFAULT_DB_SEPARATOR)
        config = cls(db_separator=db_separator)
        logger.info(f"Loaded MoneyKitConfig from environment: $db_separator '{config.db_separator}'")
        return config
