from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # Database
    database_url: Optional[str] = None

    # Server
    port: int = 4000

    # Security
    jwt_secret: str = "SUPER_SECRET_KEY"  # weak fallback when JWT_SECRET is unset
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 240

    # App
    app_name: str = "Biblioteca Escolar API"
    debug: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"
