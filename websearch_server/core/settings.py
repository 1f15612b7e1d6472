"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps port, upstream endpoint and scraping selectors tunable without code changes.
"""

# --- Purpose: robust settings with env-file support and safe handling of extra keys.
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",          # <-- prevents crashes if extra env vars exist
    )

    # API host/port
    host: str = Field(default="0.0.0.0", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=3000, description="Port for FastAPI/Uvicorn (env PORT)")
    log_level: str = Field(default="INFO", description="Minimum level for the loguru sink")

    # CORS
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Allowed origins for browser-based MCP clients"
    )

    # --- Protocol endpoint ---
    mcp_path: str = Field(default="/mcp", description="Single HTTP path carrying JSON-RPC payloads")
    server_name: str = Field(default="web-search")
    server_version: str = Field(default="0.1.0")

    # --- Upstream search page ---
    search_endpoint: str = Field(
        default="https://www.google.com/search",
        description="Results page fetched with ?q=<query>"
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        description="Desktop browser identity sent with every fetch"
    )
    fetch_timeout: float = Field(default=10.0, description="Seconds before the upstream fetch gives up")

    # --- Result sizing ---
    default_limit: int = Field(default=5, description="Results returned when the caller sends no limit")
    max_limit: int = Field(default=10, description="Hard server-side cap on results")

    # ---- Markup markers of the results page ----
    # Only the extractor reads these; a template change upstream is a config change here.
    result_container_selector: str = Field(default="div.g")
    result_title_selector: str = Field(default="h3")
    result_link_selector: str = Field(default="a")
    result_snippet_selector: str = Field(default=".VwiC3b")

settings = Settings()
