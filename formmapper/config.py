from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Extraction
    html_parser: str = "lxml"  # BeautifulSoup tree builder

    @field_validator("html_parser")
    @classmethod
    def validate_html_parser(cls, v: str) -> str:
        """Only allow tree builders that recover from malformed markup."""
        allowed = {"lxml", "html.parser"}
        if v not in allowed:
            raise ValueError(f"html_parser must be one of {sorted(allowed)}")
        return v

    # Final document rendering
    document_indent: int = 2

    # Sessions (in-memory, one mapping state per browser)
    session_cookie_name: str = "session_id"
    max_sessions: int = 1000

    # Pasted page source limit (characters), saved form pages are large
    max_page_source_length: int = 10_000_000

    # Frontend
    frontend_url: str = "http://localhost:3000"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
