# Advisory/core/config.py
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    APP_ENV: str = Field("dev")
    LOG_LEVEL: str = Field("INFO")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    FEATHERLESS_API_KEY: Optional[str] = Field(None)
    FEATHERLESS_URL: str = Field("https://api.featherless.ai/v1/chat/completions")
    FEATHERLESS_MODEL: str = Field("deepseek-ai/DeepSeek-V3-0324")
    FEATHERLESS_TIMEOUT: float = Field(30.0)

    SYSTEM_PROMPT_PATH: str = Field("prompts/system_prompt.txt")
    SYSTEM_PROMPT_ENABLED: bool = Field(True)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
