from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")

	# OpenRouter fallback configuration (optional)
	openrouter_api_key: str | None = Field(default=None, validation_alias="OPENROUTER_API_KEY")
	openrouter_model: str = Field(default="openai/gpt-4o", validation_alias="OPENROUTER_MODEL")
	openrouter_base_url: str = Field(default="https://openrouter.ai/api/v1/chat/completions", validation_alias="OPENROUTER_BASE_URL")
	openrouter_referer: str = Field(default="https://localhost", validation_alias="OPENROUTER_HTTP_REFERER")
	openrouter_title: str = Field(default="German Level Quiz", validation_alias="OPENROUTER_TITLE")

	# Feedback rephrasing; the deterministic text is used whenever this is off or fails
	rephrase_enabled: bool = Field(default=True, validation_alias="REPHRASE_ENABLED")
	rephrase_timeout_seconds: float = Field(default=15.0, validation_alias="REPHRASE_TIMEOUT_SECONDS")
	rephrase_max_tokens: int = Field(default=300, validation_alias="REPHRASE_MAX_TOKENS")
	rephrase_temperature: float = Field(default=0.7, validation_alias="REPHRASE_TEMPERATURE")
	# 0 disables thinking so the whole token budget goes to the rewritten text
	rephrase_thinking_budget: int | None = Field(default=0, validation_alias="REPHRASE_THINKING_BUDGET")

	# Admin stats are open unless a key is configured
	admin_api_key: str | None = Field(default=None, validation_alias="ADMIN_API_KEY")

	# Comma-separated list; empty means same-origin only
	cors_origins: str = Field(default="", validation_alias="CORS_ORIGINS")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=8000, validation_alias="PORT")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
