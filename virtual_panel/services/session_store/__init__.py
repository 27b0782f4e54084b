from .app_reducer import app_reducer
from .app_store import AppStore

__all__ = [
    "app_reducer",
    "AppStore",
]
