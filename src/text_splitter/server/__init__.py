"""Server integration package (optional extras required)."""

from .config import ServerRuntimeConfig
from .main import create_app

__all__ = ["ServerRuntimeConfig", "create_app"]
