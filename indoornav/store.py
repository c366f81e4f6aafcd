"""NavigationStore — shared UI state with change subscriptions.

Each display surface holds a reference to the same store and subscribes to
change notifications.  The routing engine stays a plain collaborator: the
store passes it everything a query needs and keeps the result.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel

from indoornav import config
from indoornav.loader import load_floor_plan
from indoornav.models.floorplan import FloorPlan
from indoornav.models.route import Route, UserQuery
from indoornav.routing.access import parse_clock
from indoornav.routing.engine import RoutingEngine
from indoornav.routing.errors import RoutingError
from indoornav.seed_data import sample_floor_plan
from indoornav.settings import (
    ConfigManager,
    configure_logging,
    time_filtered_routing,
    walking_speed,
)

logger = logging.getLogger(__name__)

Listener = Callable[["AppState"], None]


class AppState(BaseModel):
    """Snapshot of what the UI is showing."""

    current_time: str = "00:00"
    """HH:MM"""

    selected_room: Optional[str] = None
    target_room: Optional[str] = None
    current_route: Optional[Route] = None
    is_navigating: bool = False
    show_time_settings: bool = False
    error_message: Optional[str] = None


def _now_hhmm() -> str:
    return datetime.now().strftime("%H:%M")


class NavigationStore:
    """Observable application state bound to a routing engine.

    Parameters
    ----------
    engine:
        The routing engine queries are sent to.
    current_time:
        Initial ``HH:MM`` clock; defaults to the local time.
    """

    def __init__(self, engine: RoutingEngine, current_time: str | None = None) -> None:
        self.engine = engine
        self._state = AppState(current_time=current_time or _now_hhmm())
        self._listeners: list[Listener] = []

    @classmethod
    def from_config(cls, project_path: str | Path = ".") -> NavigationStore:
        """Build a store from the layered project configuration."""
        settings = ConfigManager().load_config(project_path)
        configure_logging(settings["INDOORNAV_LOG_LEVEL"])

        plan_file = settings.get("INDOORNAV_FLOOR_PLAN", "")
        if plan_file:
            plan_path = Path(plan_file)
            if not plan_path.is_absolute():
                plan_path = Path(project_path) / plan_path
            floor_plan = load_floor_plan(plan_path)
        else:
            floor_plan = sample_floor_plan()

        engine = RoutingEngine(
            floor_plan,
            walking_speed=walking_speed(settings),
            time_filtered=time_filtered_routing(settings),
        )
        return cls(engine)

    @property
    def state(self) -> AppState:
        """A copy of the current state."""
        return self._state.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def _update(self, **changes: object) -> None:
        self._state = self._state.model_copy(update=changes)
        self._notify()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_current_time(self, value: str) -> None:
        parse_clock(value)  # rejects malformed input before it is stored
        self._update(current_time=value)

    def set_selected_room(self, room_id: str | None) -> None:
        self._update(selected_room=room_id)

    def set_target_room(self, room_id: str | None) -> None:
        self._update(target_room=room_id)

    def toggle_time_settings(self) -> None:
        self._update(show_time_settings=not self._state.show_time_settings)

    def find_route(self, query: UserQuery) -> Route | None:
        """Route *query* and publish the result.

        Routing failures are turned into a neutral message; internal ids
        never reach ``error_message``.
        """
        clock = query.current_time or self._state.current_time
        at = parse_clock(clock) if self.engine.time_filtered else None

        try:
            route = self.engine.plan_route(query.from_room, query.to_room, at)
        except RoutingError as exc:
            logger.info("Route %s -> %s failed: %s", query.from_room, query.to_room, exc.reason)
            self._update(
                current_route=None,
                is_navigating=False,
                error_message=config.NO_ROUTE_MESSAGE,
            )
            return None

        self._update(
            current_route=route,
            is_navigating=True,
            selected_room=None,
            target_room=None,
            error_message=None,
        )
        return route

    def clear_route(self) -> None:
        self._update(
            current_route=None,
            is_navigating=False,
            selected_room=None,
            target_room=None,
            error_message=None,
        )

    def update_floor_plan(self, floor_plan: FloorPlan) -> None:
        """Swap in a new floor plan; any displayed route is dropped."""
        self.engine.update_graph(floor_plan)
        self._update(current_route=None, is_navigating=False)
