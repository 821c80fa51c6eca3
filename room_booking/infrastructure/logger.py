import json
import sys
from typing import Any

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class ConsoleLogger:
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, min_level: str = "INFO"):
        self._min_level = LEVELS[min_level.upper()]

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, kwargs)

    def _log(self, level: str, message: str, context: dict) -> None:
        if LEVELS[level] < self._min_level:
            return
        # Предупреждения и ошибки идут в stderr
        stream = sys.stderr if LEVELS[level] >= LEVELS["WARNING"] else sys.stdout
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2),
                file=stream,
                flush=True,
            )
