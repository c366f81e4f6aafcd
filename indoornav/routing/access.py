"""Accessibility evaluation for gates and paths at a point in time.

Used by the display layer to colour gates, and by the routing engine when
a query is issued with an explicit time.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Union

from indoornav.models.floorplan import Gate, Path, TimeWindow

logger = logging.getLogger(__name__)


def parse_hhmm(value: str) -> time:
    """Parse an ``HH:MM`` string into a :class:`datetime.time`.

    ``24:00`` is accepted and treated as the end of the day.
    """
    hours, minutes = value.strip().split(":", 1)
    h, m = int(hours), int(minutes)
    if h == 24 and m == 0:
        return time.max
    return time(h, m)


def parse_clock(value: str, on: date | None = None) -> datetime:
    """Combine an ``HH:MM`` clock string with *on* (default today)."""
    return datetime.combine(on or date.today(), parse_hhmm(value))


def day_of_week(at: datetime) -> int:
    """Day number with 0 = Sunday ... 6 = Saturday."""
    return (at.weekday() + 1) % 7


def in_window(window: TimeWindow, at: datetime) -> bool:
    """True if *at* falls in ``[start, end)`` on one of the window's days."""
    if window.days_of_week and day_of_week(at) not in window.days_of_week:
        return False
    return parse_hhmm(window.start) <= at.time() < parse_hhmm(window.end)


def _restricted_after(threshold: str | None, at: datetime) -> bool:
    return threshold is not None and at.time() >= parse_hhmm(threshold)


def is_gate_available(
    gate: Gate,
    at: datetime,
    direction: str | None = None,
) -> bool:
    """Decide whether *gate* can be passed at *at*.

    Parameters
    ----------
    gate:
        The gate to evaluate.
    at:
        Evaluation instant (local time).
    direction:
        Optional traversal direction, ``'in'`` or ``'out'``.  Only checked
        when the gate's access rule lists allowed directions.
    """
    if not gate.is_open:
        return False

    if gate.time_restrictions is not None:
        tr = gate.time_restrictions
        if not tr.open_time <= at.hour < tr.close_time:
            return False

    if gate.opening_hours is not None:
        start = parse_hhmm(gate.opening_hours.start)
        end = parse_hhmm(gate.opening_hours.end)
        if not start <= at.time() < end:
            return False

    rules = gate.access_rules
    if rules is None:
        return True

    if _restricted_after(rules.restricted_after, at):
        return False
    if rules.restricted_before is not None and at.time() < parse_hhmm(rules.restricted_before):
        return False
    if rules.windows and not any(in_window(w, at) for w in rules.windows):
        return False
    if direction and rules.allowed_directions:
        allowed = set(rules.allowed_directions)
        if direction not in allowed and "both" not in allowed:
            return False

    return True


def is_path_available(path: Path, at: datetime) -> bool:
    """Decide whether *path* can be walked at *at*."""
    if path.is_blocked:
        return False

    rules = path.access_rules
    if rules is None:
        return True

    if _restricted_after(rules.restricted_after, at):
        return False
    if rules.allowed_times and not any(in_window(w, at) for w in rules.allowed_times):
        return False
    return True


def gate_status(gate: Gate, at: datetime) -> str:
    """Return ``'open'`` or ``'closed'`` for map colouring."""
    return "open" if is_gate_available(gate, at) else "closed"


def has_time_rule(item: Union[Gate, Path]) -> bool:
    """True if *item* carries any time-of-day restriction."""
    rules = item.access_rules
    if rules is not None and (
        rules.time_dependent
        or rules.restricted_after
        or getattr(rules, "windows", None)
        or getattr(rules, "allowed_times", None)
    ):
        return True
    if isinstance(item, Gate):
        return item.time_restrictions is not None or item.opening_hours is not None
    return False


class AccessibilityEvaluator:
    """Evaluate gates and paths against a single point in time.

    Parameters
    ----------
    at:
        Default evaluation instant.  ``None`` means "now" at each call.
    """

    def __init__(self, at: datetime | None = None) -> None:
        self.at = at

    def _instant(self, at: datetime | None) -> datetime:
        return at or self.at or datetime.now()

    def is_available(
        self,
        item: Union[Gate, Path],
        at: datetime | None = None,
        direction: str | None = None,
    ) -> bool:
        """Dispatch on gate vs. path."""
        when = self._instant(at)
        if isinstance(item, Gate):
            return is_gate_available(item, when, direction)
        if isinstance(item, Path):
            return is_path_available(item, when)
        raise TypeError(f"Cannot evaluate accessibility of {type(item).__name__}")

    def unavailable_gates(self, gates: list[Gate], at: datetime | None = None) -> list[str]:
        """Ids of gates that cannot be passed at the evaluation instant."""
        when = self._instant(at)
        closed = [g.id for g in gates if not is_gate_available(g, when)]
        logger.debug("%d of %d gates unavailable at %s", len(closed), len(gates), when)
        return closed
