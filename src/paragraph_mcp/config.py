# src/paragraph_mcp/config.py
from dataclasses import dataclass, field
from typing import Optional
import os

DEFAULT_API_BASE_URL = "https://public.api.paragraph.com/api"


def mask_secret(value: Optional[str]) -> str:
    """Reduce a secret to a short prefix so it can be logged."""
    if not value:
        return "<not set>"
    return f"{value[:4]}****"


@dataclass
class ParagraphConfig:
    """Paragraph API configuration"""
    # Credentials
    api_key: Optional[str] = None
    base_url: str = DEFAULT_API_BASE_URL

    # Publication identity (auto-discovered when not set)
    publication_id: Optional[str] = None
    publication_slug: Optional[str] = None

    # Transport
    timeout: float = 30.0
    user_agent: str = field(default="paragraph-mcp/1.0.0")

    def __post_init__(self):
        self.base_url = (self.base_url or DEFAULT_API_BASE_URL).rstrip("/")
        if self.timeout <= 0:
            raise ValueError("PARAGRAPH_TIMEOUT must be a positive number of seconds")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_environment(cls) -> "ParagraphConfig":
        """Build the configuration from PARAGRAPH_* environment variables."""
        return cls(
            api_key=os.getenv("PARAGRAPH_API_KEY") or None,
            base_url=os.getenv("PARAGRAPH_API_BASE_URL", DEFAULT_API_BASE_URL),
            publication_id=os.getenv("PARAGRAPH_PUBLICATION_ID") or None,
            publication_slug=os.getenv("PARAGRAPH_PUBLICATION_SLUG") or None,
            timeout=float(os.getenv("PARAGRAPH_TIMEOUT", "30")),
        )

    def describe(self) -> dict:
        """Loggable view of the configuration (the API key is masked)."""
        return {
            "api_key": mask_secret(self.api_key),
            "base_url": self.base_url,
            "publication_id": self.publication_id,
            "publication_slug": self.publication_slug,
            "timeout": self.timeout,
        }


TOOLS_MODES = ("hybrid", "search_only")


def get_tools_mode() -> str:
    """Read TOOLS_MODE; unknown values fall back to hybrid."""
    mode = os.getenv("TOOLS_MODE", "hybrid").strip().lower()
    return mode if mode in TOOLS_MODES else "hybrid"
