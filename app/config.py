from decimal import Decimal
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "local"
    log_level: str = "INFO"

    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_db: str = "peaqbodycare"
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # full URL override, e.g. sqlite:// for tests
    sqlalchemy_url: Optional[str] = None

    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: int = 30

    secret_key: str = "change-me"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # only these accounts get the admin role at registration
    admin_emails: List[str] = []

    whatsapp_base_url: str = "https://wa.me"
    whatsapp_number: str = "27796989762"

    shipping_fee: Decimal = Decimal("50.00")
    verify_subtotal: bool = False
    enforce_status_transitions: bool = False

    images_dir: str = "images"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @property
    def database_url(self):
        if self.sqlalchemy_url:
            return self.sqlalchemy_url
        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
