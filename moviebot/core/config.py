from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    discord_token: str

    tmdb_api_key: str
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"
    tmdb_language: str = "en-US"

    movie_forum_channel_id: int | None = None

    overseerr_url: str | None = None
    overseerr_api_key: str | None = None
    overseerr_timeout_secs: int = 10

    database_url_async: str = "sqlite+aiosqlite:///data/movies.db"
    database_url_sync: str = "sqlite:///data/movies.db"

    environment: str = "development"
    watch_party_threshold: int | None = None
    bully_cooldown_minutes: int = 30

    language: str = "en"

    @model_validator(mode="after")
    def validate_tokens(self) -> "Settings":
        """Validate that tokens are set and not placeholder values."""
        if self.tmdb_api_key in ("your_tmdb_api_key_here", "PUT_YOUR_TMDB_KEY_HERE", ""):
            raise ValueError(
                "TMDB_API_KEY is not properly configured. "
                "Get your API key from https://www.themoviedb.org/settings/api"
            )
        if self.discord_token in ("your_bot_token_here", ""):
            raise ValueError(
                "DISCORD_TOKEN is not properly configured. "
                "Create a bot in the Discord developer portal"
            )
        if self.watch_party_threshold is None:
            # one interested user is enough to try the flow outside production
            self.watch_party_threshold = 3 if self.environment == "production" else 1
        return self

    @property
    def overseerr_configured(self) -> bool:
        return bool(self.overseerr_url and self.overseerr_api_key)


settings = Settings()
