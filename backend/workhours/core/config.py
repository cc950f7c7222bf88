from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    # Local single-user store; any SQLAlchemy URL works.
    database_url: str = "sqlite:///./workhours.db"
    # Timezone used to decide which calendar day a report belongs to.
    # Examples: "America/Sao_Paulo", "Europe/London", or "local" to use system tz.
    timezone: str = "local"
    log_level: str = "INFO"

    @field_validator("timezone", mode="before")
    @classmethod
    def _empty_to_local(cls, v):
        if v in ("", None, "null", "None"):
            return "local"
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v or "INFO").strip().upper()

    class Config:
        env_file = ".env"


settings = Settings()
