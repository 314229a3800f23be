"""Configuration and settings"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # OpenAI API
    openai_api_key: str = Field(default="")
    openai_model: str = Field(default="gpt-3.5-turbo")
    openai_temperature: float = Field(default=0.7)
    openai_max_tokens: int = Field(default=2000)
    openai_regeneration_max_tokens: int = Field(default=3000)
    openai_timeout_seconds: float = Field(default=60.0)
    # Hero background images
    openai_image_model: str = Field(default="dall-e-3")
    openai_image_size: str = Field(default="1024x1024")

    # Supabase
    supabase_url: str = Field(default="")
    supabase_key: str = Field(default="")
    # Service role key bypasses row level security; used for public lead capture
    supabase_service_role_key: str = Field(default="")

    # Admin metrics; the endpoint is closed until this is set
    admin_api_key: str = Field(default="")

    # Frontend
    frontend_url: str = Field(default="http://localhost:3000")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # API Configuration
    api_title: str = "LaunchGen API"
    api_version: str = "0.1.0"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
