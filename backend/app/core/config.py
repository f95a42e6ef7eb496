from pydantic_settings import BaseSettings
from typing import List
import json


class Settings(BaseSettings):
    # Application
    app_name: str = "Presale API"
    debug: bool = False
    api_prefix: str = "/api"

    # Database (Tortoise ORM format), read from DATABASE_URL
    database_url: str = ""
    # Tables are managed by aerich migrations in production
    generate_schemas: bool = False

    @property
    def cleaned_database_url(self) -> str:
        """Strip problematic query parameters like sslmode from database_url."""
        url = self.database_url
        if "?" in url:
            base, query = url.split("?", 1)
            params = query.split("&")
            # Filter out sslmode and ssl_mode
            filtered_params = [p for p in params if not p.startswith(("sslmode=", "ssl_mode="))]
            if filtered_params:
                return f"{base}?{'&'.join(filtered_params)}"
            return base
        return url

    @property
    def tortoise_config(self) -> dict:
        """Tortoise ORM configuration."""
        return {
            "connections": {
                "default": self.cleaned_database_url,
            },
            "apps": {
                "models": {
                    "models": ["app.models.presale", "aerich.models"],
                    "default_connection": "default",
                },
            },
        }

    # CORS
    cors_origins: str = '["http://localhost:3000","http://localhost:5173"]'

    @property
    def cors_origins_list(self) -> List[str]:
        return json.loads(self.cors_origins)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()

# Module-level config for the aerich CLI
TORTOISE_ORM = settings.tortoise_config
