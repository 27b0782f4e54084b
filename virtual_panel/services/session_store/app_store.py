"""
Session Store

Holds the current AppState for one client and applies actions through app_reducer.
The store is passed explicitly to whatever needs it; there is no module-level instance.
"""
from typing import Callable, List, Optional, Union

from loguru import logger

from virtual_panel.schemas.session_state import AppState, SessionAction, parse_action
from virtual_panel.services.session_store.app_reducer import app_reducer

Listener = Callable[[AppState], None]


class AppStore:
    """
    Owner of one session's state.

    Args:
        initial_state: Starting state; a fresh AppState when omitted
    """

    def __init__(self, initial_state: Optional[AppState] = None):
        self._state = initial_state or AppState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Union[SessionAction, dict]) -> AppState:
        """
        Apply an action (model or raw `{"type", "payload"}` dict) and notify listeners.

        Returns:
            AppState: The new state
        """
        if isinstance(action, dict):
            action = parse_action(action)

        self._state = app_reducer(self._state, action)
        logger.debug(f"Session action applied: {action.type}")

        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
