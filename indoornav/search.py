"""Room search and filtering over an in-memory room list.

All functions are pure: they never mutate the list they are given.
"""

from __future__ import annotations

from typing import Iterable

from indoornav.models.floorplan import Room


def search_rooms(rooms: list[Room], query: str) -> list[Room]:
    """Case-insensitive substring match over room name, id and type.

    A blank query returns every room.
    """
    term = query.strip().lower()
    if not term:
        return list(rooms)
    return [
        room for room in rooms
        if term in room.name.lower()
        or term in room.id.lower()
        or term in room.type.lower()
    ]


def filter_rooms_by_type(rooms: list[Room], types: Iterable[str]) -> list[Room]:
    """Keep rooms whose type is in *types*; an empty selection keeps all."""
    wanted = set(types)
    if not wanted:
        return list(rooms)
    return [room for room in rooms if room.type in wanted]


def sort_rooms_by_name(rooms: list[Room]) -> list[Room]:
    return sorted(rooms, key=lambda r: r.name.lower())


def sort_rooms_by_type(rooms: list[Room]) -> list[Room]:
    return sorted(rooms, key=lambda r: (r.type, r.name.lower()))
