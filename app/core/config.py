from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import ConfigurationError, MissingCredentialError

class Settings(BaseSettings):
    APP_NAME: str = "Wins Coach API"
    APP_ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8787
    LOG_LEVEL: str = "INFO"

    ROUTELLM_API_KEY: str
    ROUTELLM_BASE_URL: str = "https://routellm.abacus.ai/v1"
    ROUTELLM_MODEL: str = "gpt-4.1-mini"
    ROUTELLM_TIMEOUT_SECONDS: float | None = None

    CORS_ORIGINS: list[str] = ["*"]
    MAX_BODY_BYTES: int = 1024 * 1024

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

def load_settings(**overrides) -> Settings:
    """
    Build the process-wide settings once at startup.
    Raises MissingCredentialError when the upstream credential is absent or empty,
    ConfigurationError for any other invalid setting.
    """
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        message = f"Invalid configuration: {', '.join(fields)}"
        if "ROUTELLM_API_KEY" in fields:
            raise MissingCredentialError(message) from e
        raise ConfigurationError(message) from e
    if not settings.ROUTELLM_API_KEY.strip():
        raise MissingCredentialError("Invalid configuration: ROUTELLM_API_KEY is empty")
    return settings
