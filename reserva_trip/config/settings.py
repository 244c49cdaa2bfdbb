# reserva_trip/config/settings.py
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # App Info
    app_name: str = "Reserva Trip API"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]

    # Database - DATABASE_URL tiene prioridad sobre las partes DB_*
    database_url: Optional[str] = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "reserva_trip"
    db_pool_size: int = 10
    db_pool_recycle: int = 300
    auto_create_tables: bool = False

    # Cliente HTTP
    api_base_url: str = "http://localhost:3000/api"
    api_timeout: float = 30.0

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def sqlalchemy_url(self) -> str:
        """URL de conexión final para el engine"""
        if self.database_url:
            return self.database_url

        credentials = self.db_user
        if self.db_password:
            credentials = f"{credentials}:{self.db_password}"
        host = self.db_host
        if self.db_port:
            host = f"{host}:{self.db_port}"
        return f"{self.db_driver}://{credentials}@{host}/{self.db_name}"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'


settings = Settings()
