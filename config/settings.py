from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Ownership registry boundary
    REGISTRY_TIMEOUT_SECONDS: float = 5.0

    # Re-invoke the registry transfer on an already fulfilled order instead of rejecting it
    ALLOW_REFULFILL: bool = False

    # Run the full invariant audit after every successful mutation (slow on large books)
    VERIFY_INVARIANTS: bool = False


settings = Settings()
