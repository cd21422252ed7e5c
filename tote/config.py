import logging
import os

from dotenv import load_dotenv

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_log_level() -> int:
    """
    Читает LOG_LEVEL из .env / окружения.
    Форматы:
      LOG_LEVEL=INFO
      LOG_LEVEL=debug
    По умолчанию: INFO.
    """
    load_dotenv()
    raw = os.getenv("LOG_LEVEL", "").strip().upper()
    if not raw:
        return logging.INFO

    if raw not in _LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL должен быть одним из: {', '.join(_LOG_LEVELS)}. Получено: '{raw}'")
    return getattr(logging, raw)
