from __future__ import annotations
import sys
from typing import Union
from loguru import logger
from .config import settings

class AppLogger:
    """Single loguru setup shared by the Lambda and the local API."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        logger.remove()
        logger.configure(extra={"module": "app"})

        # Lambda has no writable log dir; CloudWatch picks up stdout
        if settings.log_json:
            logger.add(sys.stdout, serialize=True, level=settings.log_level)
        else:
            logger.add(
                sys.stdout,
                colorize=False,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} | {message}",
                level=settings.log_level,
            )

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        return logger.bind(module=name if name else "app")

app_logger = AppLogger()

def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)
