from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    # Application
    APP_NAME: str = "MTS Blog Server"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Database (MongoDB)
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "mtsBlogDB"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Security
    BCRYPT_ROUNDS: int = 10
    DEFAULT_USER_ROLE: Optional[Literal["user", "admin"]] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
