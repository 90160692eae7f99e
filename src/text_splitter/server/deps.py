"""FastAPI dependency injection helpers."""

from __future__ import annotations

from .config import ServerRuntimeConfig


class ServerState:
    """Shared server state, set when the app is created."""

    def __init__(self) -> None:
        self.config = ServerRuntimeConfig()


server_state = ServerState()


def get_config() -> ServerRuntimeConfig:
    return server_state.config
