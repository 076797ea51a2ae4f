import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    """Runtime configuration shared by the web app, the CLI and scripts."""

    openai_api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    caption_language: str = "en"
    summary_max_tokens: int = 300
    transcript_max_tokens: int = 2000
    request_timeout: float = 20.0
    database_url: str = "sqlite:///app.db"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables
        load_dotenv()
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            model=os.getenv("OPENAI_MODEL", cls.model),
            caption_language=os.getenv("CAPTION_LANGUAGE", cls.caption_language),
            summary_max_tokens=int(os.getenv("SUMMARY_MAX_TOKENS", cls.summary_max_tokens)),
            transcript_max_tokens=int(os.getenv("TRANSCRIPT_MAX_TOKENS", cls.transcript_max_tokens)),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", cls.request_timeout)),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
