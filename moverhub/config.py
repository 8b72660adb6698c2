from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Guards /debug/* when set. Send: X-API-Key: <key>
    API_KEY: str | None = None

    # Load the demo movers into the store on startup
    SEED_DEMO: bool = True

    # --- Behaviour switches ---
    # GET /movers on an empty store answers 404 instead of []
    EMPTY_LIST_IS_ERROR: bool = True
    # Apply the review-time 0..5 rating check when creating a mover too
    VALIDATE_RATING_ON_CREATE: bool = False


settings = Settings()
