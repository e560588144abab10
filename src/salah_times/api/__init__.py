"""Web API layer."""

from salah_times.api.app import create_app
from salah_times.api.dependencies import get_app_state

__all__ = ["create_app", "get_app_state"]
