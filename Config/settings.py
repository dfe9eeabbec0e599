from typing import Optional, Tuple
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
import os


DEFAULT_ALLOWED_ORIGINS = (
    "https://trailmed.app",
    "https://trailed.co.uk",
)


class Settings(BaseModel):
    """Read-only configuration, built once when the app starts."""

    model_config = ConfigDict(frozen=True)

    airtable_pat: Optional[str] = None
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    airtable_api_url: str = "https://api.airtable.com/v0"
    airtable_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        origins = os.getenv("ALLOWED_ORIGINS")
        if not origins:
            allowed_origins = DEFAULT_ALLOWED_ORIGINS
        else:
            allowed_origins = tuple(o.strip() for o in origins.split(",") if o.strip())

        timeout = os.getenv("AIRTABLE_TIMEOUT")

        return cls(
            airtable_pat=os.getenv("AIRTABLE_PAT") or None,
            allowed_origins=allowed_origins,
            airtable_api_url=os.getenv("AIRTABLE_API_URL", "https://api.airtable.com/v0").rstrip("/"),
            airtable_timeout=float(timeout) if timeout else None,
        )
