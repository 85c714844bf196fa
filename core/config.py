from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    FIREBASE_SERVICE_ACCOUNT_KEY: str | None = None
    FIREBASE_SERVICE_ACCOUNT_PATH: str = "serviceAccountKey.json"

    ENVIRONMENT: str = Field(default="development", validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"))
    HOST: str = "0.0.0.0"
    PORT: int = 5001
    LOG_LEVEL: str = "INFO"

    DEFAULT_PARTICIPANTS: list[str] = ["user1", "user2", "admin"]
    INIT_DESCRIPTION: str = "Test project created via API"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    class Config:
        env_file = ".env"

settings = Settings()
