"""
Mapping from internal EventLog objects to canonical public JSON events.

The internal engine emits GameEvent objects where:
- event_type is event_log.EventType
- player_name is optional
- details is a flat dict of keyword arguments

This module produces stable, JSONL-friendly dicts with consistent
event_type strings and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from worldcup.board import Board
from worldcup.event_log import EventType, GameEvent


def _square_name(board: Board, position: Optional[int]) -> Optional[str]:
    if position is None:
        return None
    return board.square_at(position).name


def map_event(board: Board, event: GameEvent) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Args:
        board: Board instance (for resolving square names)
        event: internal event object

    Returns:
        dict with keys: event_type (str), player_name (optional), and event-specific fields
    """
    d = event.details

    base: Dict[str, Any] = {"event_type": event.event_type.value}
    if event.player_name is not None:
        base["player_name"] = event.player_name

    if event.event_type == EventType.DICE_ROLL:
        base.update(values=d.get("values", []), total=d.get("total"))
        return base

    if event.event_type == EventType.MOVE:
        to_pos = d.get("to_position")
        base.update(
            from_position=d.get("from_position"),
            to_position=to_pos,
            fields=d.get("fields"),
            square_name=_square_name(board, to_pos),
        )
        return base

    if event.event_type in (EventType.PASS_SQUARE, EventType.LAND):
        position = d.get("position")
        base.update(
            position=position,
            square_name=d.get("square") or _square_name(board, position),
            funds_after=d.get("funds_after"),
        )
        return base

    if event.event_type == EventType.SUSPENDED_TURN:
        base.update(remaining=d.get("remaining"))
        return base

    if event.event_type == EventType.ROUND_START:
        base.update(round_number=d.get("round"), players_left=d.get("players_left"))
        return base

    if event.event_type == EventType.GAME_START:
        players = d.get("players") or []
        base.update(
            player_names=players,
            num_players=len(players),
            starting_balance=d.get("starting_balance"),
            rounds=d.get("rounds"),
        )
        return base

    if event.event_type == EventType.GAME_END:
        base.update(
            winner_name=event.player_name,
            rounds_played=d.get("rounds_played"),
            winner_funds=d.get("funds"),
        )
        return base

    if event.event_type == EventType.BANKRUPTCY:
        base.update(square_name=d.get("square"))
        return base

    if event.event_type == EventType.ELIMINATION:
        base.update(round_number=d.get("round"))
        return base

    # Default: echo raw fields
    base.update(d)
    return base


def map_events(board: Board, events: Iterable[GameEvent]) -> List[Dict[str, Any]]:
    """Map a sequence of GameEvent objects, numbering them in order."""
    mapped: List[Dict[str, Any]] = []
    for idx, ev in enumerate(events):
        mev = map_event(board, ev)
        mev["seq"] = idx
        mapped.append(mev)
    return mapped
