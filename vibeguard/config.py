"""
VibeGuard Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
The AI logic audit is enabled only when GROQ_API_KEY is set; without it the
service runs in SAST-only mode.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── AI audit ──
    groq_api_key: str = Field(
        default="", description="Groq API key for the AI logic audit; empty disables it"
    )
    vibeguard_model: str = Field(
        default="moonshotai/kimi-k2-instruct-0905",
        description="Model identifier for Groq completions",
    )
    llm_timeout: int = Field(default=30, description="LLM request timeout in seconds")
    llm_max_retries: int = Field(default=3, description="Max LLM retry attempts")
    llm_temperature: float = Field(default=0.1, description="LLM temperature")
    llm_max_tokens: int = Field(default=2000, description="Completion token cap per audit")
    ai_audit_max_chars: int = Field(
        default=8000, description="Code longer than this is truncated before the AI audit"
    )

    # ── Scanning ──
    max_code_length: int = Field(
        default=50_000, description="Max source length accepted by the API (characters)"
    )
    min_code_length: int = Field(
        default=5, description="Min non-blank source length accepted by the API"
    )

    # ── Cache ──
    cache_ttl_seconds: int = Field(
        default=3600, description="Time-to-live for cached local scan results"
    )
    cache_max_entries: int = Field(
        default=1024, description="Max cached scan results before LRU eviction"
    )

    # ── Server ──
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def ai_audit_enabled(self) -> bool:
        return bool(self.groq_api_key.strip())


# Singleton instance — imported by other modules
settings = Settings()
