import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load variables from .env into environment
load_dotenv()

# =========================
# SERVER CONFIG
# =========================
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# =========================
# TEAMWORK API
# =========================
PAGE_SIZE = 50


@dataclass(frozen=True)
class TeamworkConfig:
    api_key: Optional[str]
    base_url: Optional[str]

    @property
    def missing(self) -> list:
        missing = []
        if not self.api_key:
            missing.append("API_KEY")
        if not self.base_url:
            missing.append("BASE_URL")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def load_config() -> TeamworkConfig:
    """
    Read Teamwork credentials from the environment.

    Not validated here: a missing value is reported by the request
    handler as a server configuration error.
    """
    base_url = _first_env("BASE_URL", "TEAMWORK_BASE_URL")
    return TeamworkConfig(
        api_key=_first_env("API_KEY", "TEAMWORK_API_KEY"),
        base_url=base_url.rstrip("/") if base_url else None,
    )
