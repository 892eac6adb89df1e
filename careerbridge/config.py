from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./careerbridge.db"
    secret_key: str = "replace-with-a-long-random-secret-key"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    cors_allow_origins: str = "http://localhost:3000"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Staged uploads land in <upload_root>/uploads and <upload_root>/user_uploads
    upload_root: str = "./public"
    # Prefix for resolved file URLs, e.g. "https://api.example.com"
    public_base_url: str = ""

    # Upload and request guards
    max_upload_mb: int = 50
    blob_chunk_size_bytes: int = 255 * 1024
    rate_limit_auth_per_min: int = 20

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
