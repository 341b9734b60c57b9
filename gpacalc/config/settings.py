from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


CREDIT_HOUR_OPTIONS = (1, 2, 3, 4)


def _credit_hours_option(value: str, fallback: int = 3) -> int:
    try:
        hours = int(value)
    except ValueError:
        return fallback
    return hours if hours in CREDIT_HOUR_OPTIONS else fallback


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    web_mode: bool = os.getenv("GPACALC_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = os.getenv("GPACALC_LOG_LEVEL", "INFO").upper()

    default_credit_hours: int = _credit_hours_option(os.getenv("GPACALC_DEFAULT_CREDIT_HOURS", "3"))

    cors_allowed_origins: tuple[str, ...] = _split_csv(
        os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )


settings = Settings()
