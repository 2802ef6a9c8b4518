from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "BingoBoard"
    debug: bool = False

    anthropic_api_key: str = ""

    # Vision model used to read card photos
    scan_model: str = "claude-sonnet-4-20250514"
    scan_max_tokens: int = 1024
    scan_max_retries: int = 2

    min_grid_size: int = 2
    max_grid_rows: int = 10
    max_grid_cols: int = 10

    default_rows: int = 5
    default_cols: int = 5
    default_center_free: bool = True

    recent_calls_limit: int = 5


settings = Settings()


# =============================================================================
# MANUAL ENTRY TOKENS
# =============================================================================

# Cell text that denotes a free space in a manually entered grid
# (compared after strip + upper)
FREE_TOKENS = frozenset({"FREE", "F", "", "0"})

# Text written into entry grids for free cells
FREE_LABEL = "FREE"
