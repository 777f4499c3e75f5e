"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_PRIORITY env var → Settings.MAX_PRIORITY)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Task validation ─────────────────────────────────────────
    MIN_EXECUTION_TIME: int = 1
    MAX_EXECUTION_TIME: int = 20
    MIN_PRIORITY: int = 1              # least urgent
    MAX_PRIORITY: int = 10             # most urgent

    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "sjf"
    TIE_BREAK: str = "heap"            # "heap" (unstable) or "arrival" (stable by task id)
    MAX_FAST_FORWARD_TICKS: int = 10_000

    # ── Driver ──────────────────────────────────────────────────
    TICK_INTERVAL: float = 1.0         # seconds of wall clock per simulated time unit

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
