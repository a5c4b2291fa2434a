"""Rich console logging for skill backends and build scripts."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import ClassVar

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

DEFAULT_FORMAT = "[bold blue]%(name)s[/bold blue] - %(message)s"


@dataclass
class LoggerConfig:
    """Configuration for rich logger options."""

    show_time: bool = True
    show_path: bool = False
    rich_tracebacks: bool = True
    console: Console | None = None


class SkillLogger:
    """Logger factory sharing one RichHandler per console and level.

    Request handlers and manifest build scripts usually create several
    loggers; they all write through the same cached handler.
    """

    _THEME = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red on white bold",
            "repr.str": "magenta",
            "repr.number": "bright_blue",
        }
    )

    _handlers: ClassVar[dict[tuple, RichHandler]] = {}
    _consoles: ClassVar[dict[str, Console]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_logger(
        cls,
        name: str,
        level: int | None = None,
        config: LoggerConfig | None = None,
        format_string: str = DEFAULT_FORMAT,
    ) -> logging.Logger:
        """Return a logger writing through a cached RichHandler.

        Args:
            name: Logger name (typically __name__ from calling module)
            level: Optional log level override, defaults to LOG_LEVEL env var or INFO
            config: Optional LoggerConfig instance for rich formatting options
            format_string: Format string for the handler

        Environment Variables:
            LOG_LEVEL: Sets default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            RICH_NO_COLOR: Set to disable colored output
        """
        if level is None:
            level = cls.level_from_env()
        config = config or LoggerConfig()

        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            logger.addHandler(cls._handler(config, level, format_string))
        return logger

    @staticmethod
    def level_from_env(default: int = logging.INFO) -> int:
        env_level = os.getenv("LOG_LEVEL", "").upper()
        level = logging.getLevelName(env_level) if env_level else default
        return level if isinstance(level, int) else default

    @classmethod
    def _handler(cls, config: LoggerConfig, level: int, format_string: str) -> RichHandler:
        console = cls._console(config)
        key = (id(console), level, format_string, config.show_time, config.show_path, config.rich_tracebacks)
        with cls._lock:
            if key not in cls._handlers:
                handler = RichHandler(
                    console=console,
                    show_time=config.show_time,
                    show_path=config.show_path,
                    rich_tracebacks=config.rich_tracebacks,
                    tracebacks_show_locals=level <= logging.DEBUG,
                    markup=True,
                )
                handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="[%X]"))
                cls._handlers[key] = handler
            return cls._handlers[key]

    @classmethod
    def _console(cls, config: LoggerConfig) -> Console:
        if config.console is not None:
            return config.console
        no_color = os.getenv("RICH_NO_COLOR") is not None
        key = f"default_{no_color}"
        with cls._lock:
            if key not in cls._consoles:
                cls._consoles[key] = Console(theme=cls._THEME, stderr=True, no_color=no_color)
            return cls._consoles[key]

    @classmethod
    def clear_cache(cls) -> None:
        """Drop cached handlers and consoles; loggers keep the handlers already attached."""
        with cls._lock:
            cls._handlers.clear()
            cls._consoles.clear()

    @classmethod
    def cache_stats(cls) -> dict[str, int]:
        with cls._lock:
            return {"handlers_cached": len(cls._handlers), "consoles_cached": len(cls._consoles)}
