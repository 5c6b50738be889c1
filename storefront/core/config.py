from typing import List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    DATABASE_URL: str = Field(
        "sqlite:///./storefront.db",
        validation_alias=AliasChoices("DATABASE_URL", "MONGODB_URI"),
    )
    SECRET_KEY: str = Field(
        "supersecretkey_change_me_in_production",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 1 week

    # Server
    PORT: int = 8000
    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        origins = ["http://localhost:3000"]
        if self.FRONTEND_URL:
            origins.append(self.FRONTEND_URL)
        return origins

    class Config:
        env_file = ".env"
        extra = "ignore"
