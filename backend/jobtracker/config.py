from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )
    
    # Database
    database_url: str
    
    # Auth
    secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_ttl_minutes: int = 60  # Fixed validity window, no refresh
    bcrypt_rounds: int = 12
    
    # App
    allowed_origins: str = ""  # Comma-separated extra CORS origins
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
