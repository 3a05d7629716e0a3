"""Mob walking along the map path and sprite animation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from brawldefender.entities import Mob

_FRAME_WIDTH = 128
_LAST_FRAME_LEFT = 896
_FINAL_X = -30


@dataclass(frozen=True)
class _Leg:
    axis: str
    forward: bool
    target: int
    gap_sign: int
    turn_to: float


_LEGS = (
    _Leg("x", True, 315, 1, 90.0),
    _Leg("y", True, 315, 1, 0.0),
    _Leg("x", True, 950, 1, -90.0),
    _Leg("y", False, 190, -1, 0.0),
    _Leg("x", True, 1465, 1, 90.0),
    _Leg("y", True, 440, 1, 0.0),
    _Leg("x", True, 1705, 1, 90.0),
    _Leg("y", True, 820, 1, 180.0),
    _Leg("x", False, 1100, -1, -90.0),
    _Leg("y", False, 835, -1, 180.0),
)


def _walk_leg(mob: Mob, stage: int, leg: _Leg) -> None:
    target = leg.target + leg.gap_sign * mob.move_gap
    value = getattr(mob.pos, leg.axis)
    if leg.forward:
        if value <= target:
            setattr(mob.pos, leg.axis, value + mob.speed)
            return
    elif value >= target:
        setattr(mob.pos, leg.axis, value - mob.speed)
        return
    mob.rotation = leg.turn_to
    mob.move_stade = stage + 1


def move_mob(mob: Mob) -> None:
    """Move ``mob`` one step along the path, turning at each corner."""
    for stage, leg in enumerate(_LEGS):
        if mob.move_stade == stage:
            _walk_leg(mob, stage, leg)
    if mob.move_stade == len(_LEGS) and mob.pos.x >= _FINAL_X:
        mob.pos.x -= mob.speed


def animate_mob(mob: Mob) -> None:
    """Show the next frame of the mob's sprite sheet, wrapping at the end."""
    if mob.rect.left >= _LAST_FRAME_LEFT:
        mob.rect.left = 0
    else:
        mob.rect.left += _FRAME_WIDTH


def advance_mobs(mobs: Iterable[Mob], elapsed_ms: int) -> None:
    """Update every mob for the game clock reading ``elapsed_ms``.

    Each mob's own age is measured from its spawn time; a mob moves when its
    age is a multiple of 10 ms and changes frame on multiples of 100 ms.
    """
    for mob in mobs:
        age = elapsed_ms - mob.spawned_ms
        if age % 10 == 0:
            move_mob(mob)
        if age % 100 == 0:
            animate_mob(mob)