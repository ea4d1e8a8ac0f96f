from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Search provider
    search_provider: str = "google"  # google | brave
    google_api_key: str = ""
    search_engine_id: str = ""
    brave_api_key: str = ""
    search_language: str = "lang_ja"
    search_max_results_per_query: int = 5
    search_timeout_seconds: float = 5.0
    search_max_parallel_requests: int = 1  # 1 keeps queries strictly sequential

    # Completion (OpenAI-compatible)
    llm_api_key: str = ""
    llm_base_url: str = "https://api.openai.com/v1"
    default_model: str = "gpt-4-turbo"
    synthesis_temperature: float = 0.1
    synthesis_max_tokens: int = 4000

    # App
    cors_origins: str = "http://localhost:3000"
    app_log_level: str = "INFO"
    noisy_log_level: str = "WARNING"
    log_dir: str = "logs"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings once."""
    return Settings()
