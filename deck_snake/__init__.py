# deck_snake/__init__.py
from deck_snake.config import AppConfig
from deck_snake.errors import ConfigurationError

__version__ = "0.1.0"
