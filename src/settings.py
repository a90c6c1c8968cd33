import os
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Semester Planner AI")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # client side: where the generation pipeline sends prompts
    AI_API_BASE_URL: str = Field(default="http://localhost:3001")
    AI_API_TIMEOUT: float = Field(default=60.0)
    AI_API_TOKEN: str | None = None

    # relay side: upstream model + optional bearer check
    AI_PROVIDER: str = Field(default="gemini")
    RELAY_AUTH_TOKEN: str | None = None
    RELAY_CONFIG_PATH: str = Field(default="src/relay/config.yaml")
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash")
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    # reminder mail relay
    SMTP_HOST: str = Field(default="smtp.gmail.com")
    SMTP_PORT: int = Field(default=587)
    SMTP_USER: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_TIMEOUT: float = Field(default=30.0)
    RECIPIENT_EMAIL: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
