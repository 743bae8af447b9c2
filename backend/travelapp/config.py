from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Database (database_url wins when set)
    database_url: str = ""
    db_dialect: str = "postgresql+asyncpg"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "travelapp"
    db_password: str = "travelapp"
    db_name: str = "travel_app"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_heartbeat_interval_seconds: int = 60

    # Auth
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Longdo Map place search
    longdo_api_key: str = ""
    place_search_url: str = "https://api.longdo.com/POIService/json/search"
    place_search_default_radius: int = 200

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-5-20250929"

    recommendation_max_tokens: int = 1500

    # Wikimedia Commons image search
    wikimedia_api_url: str = "https://commons.wikimedia.org/w/api.php"
    image_search_qualifiers: str = "Thailand,Bangkok"
    image_placeholder_url: str = "https://via.placeholder.com/300x200?text=No+Image"
    http_user_agent: str = "TravelApp/1.0 (travel recommendation backend)"

    # Server
    port: int = 3000
    cors_origins: str = "*"

    # Scheduler
    scheduler_enabled: bool = True

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_dialect,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def image_search_qualifier_list(self) -> list[str]:
        return [q.strip() for q in self.image_search_qualifiers.split(",") if q.strip()]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
