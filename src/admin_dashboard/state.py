"""Holder for the state the admin view renders from."""

from __future__ import annotations

from admin_dashboard.models import ViewState


class ViewStateContainer:
    """Single-writer holder; the loader replaces the whole ViewState, readers take snapshots."""

    def __init__(self, initial: ViewState | None = None) -> None:
        self._state = initial or ViewState.empty()

    def current(self) -> ViewState:
        return self._state

    def replace(self, new_state: ViewState) -> None:
        if not isinstance(new_state, ViewState):
            raise TypeError(f"Expected ViewState, got {type(new_state).__name__}")
        self._state = new_state
