# ENV vars for server behaviour and simulated delays
import os
from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = [
        o.strip()
        for o in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
        if o.strip()
    ]
    # Stand-ins for the unimplemented generation step
    GENERATION_DELAY_SECONDS = _float_env("GENERATION_DELAY_SECONDS", 2.0)
    FORM_DELAY_SECONDS = _float_env("FORM_DELAY_SECONDS", 3.0)
