"""Settings read from the environment."""
import os

_origins_env = os.getenv("ALLOWED_ORIGINS", "")
ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()] if _origins_env else ["*"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
