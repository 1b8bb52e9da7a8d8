from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""

    # Spreadsheet
    spreadsheet_id: str = Field(
        default="1pLFOyh7xDoPAAmKUq1aiqHK5yOTC4rE8cYTR6BaLY-o",
        env="SPREADSHEET_ID",
    )
    users_range: str = Field(default="usuarios!A:C", env="USERS_RANGE")
    orders_range: str = Field(default="pedidos!A:C", env="ORDERS_RANGE")

    # Google service account (env takes precedence over the key file)
    google_private_key: str = Field(default="", env="GOOGLE_PRIVATE_KEY")
    google_private_key_id: str = Field(default="", env="GOOGLE_PRIVATE_KEY_ID")
    google_project_id: str = Field(default="", env="GOOGLE_PROJECT_ID")
    google_client_email: str = Field(default="", env="GOOGLE_CLIENT_EMAIL")
    google_client_id: str = Field(default="", env="GOOGLE_CLIENT_ID")
    google_client_x509_cert_url: str = Field(default="", env="GOOGLE_CLIENT_X509_CERT_URL")
    service_account_file: str = Field(default="service-account-key.json", env="SERVICE_ACCOUNT_FILE")

    # Auth
    # Fixed literal of the original deployment; override it in production.
    jwt_secret_key: str = Field(default="secretkey", env="JWT_SECRET_KEY")
    releaser_role: str = Field(default="releaser", env="RELEASER_ROLE")
    packer_role: str = Field(default="packer", env="PACKER_ROLE")

    # Orders
    initial_order_status: str = Field(default="to be packed", env="INITIAL_ORDER_STATUS")

    # Server
    static_dir: str = Field(default="static", env="STATIC_DIR")
    host: str = Field(default="0.0.0.0", env="HOST")
    port: int = Field(default=3000, env="PORT")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
