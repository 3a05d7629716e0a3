"""In-game state: the bank, lives, tower emplacements, the market and mobs."""

from __future__ import annotations

import random

from brawldefender.entities import (
    TIERS,
    TOWER_STATS,
    Button,
    Mob,
    Tower,
    Vec2,
    make_emplacement,
    make_selection_button,
    spawn_mob,
)
from brawldefender.mobs import advance_mobs
from brawldefender.strtools import nbr_len, power

EMPLACEMENT_POSITIONS = (
    (128, 256),
    (512, 128),
    (770, 128),
    (1208, 256),
    (1664, 256),
    (1536, 640),
    (1250, 640),
    (512, 512),
    (815, 512),
    (730, 880),
    (325, 880),
)

SELECTION_POSITIONS = (
    ("tier1", (20, 510)),
    ("tier2", (20, 635)),
    ("tier3", (20, 750)),
    ("tier4", (20, 880)),
)

START_BANK = 200
START_LIVES = 3
TOWER_SIZE = 128
SHOT_RANGE_SQUARED = 102400
_NO_TARGET_DISTANCE = 1000000
SHOT_INTERVAL_MS = 1000
SPAWN_INTERVAL_MS = 5000
MORE_MOBS_INTERVAL_MS = 25000
_MARKET_MAX_X = 190
_MARKET_MIN_Y = 490

# Checked in order; the last divisor of the digit count wins.
_MONEY_X_BY_DIVISOR = ((1, 1740), (2, 1700), (3, 1660), (4, 1620), (5, 1580), (6, 1560))


def distance_between(pos1: Vec2, pos2: Vec2) -> int:
    """Squared distance between two points, truncated to whole pixels."""
    dx = int(pos1.x) - int(pos2.x)
    dy = int(pos1.y) - int(pos2.y)
    return power(dx, 2) + power(dy, 2)


class GameState:
    """Everything that changes while a game is being played."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.buttons: list[Button] = [
            make_emplacement(Vec2(x, y)) for x, y in EMPLACEMENT_POSITIONS
        ] + [make_selection_button(tier, Vec2(x, y)) for tier, (x, y) in SELECTION_POSITIONS]
        self.towers: list[Tower] = [Tower() for _ in EMPLACEMENT_POSITIONS]
        self.mobs: list[Mob] = []
        self.bank = START_BANK
        self.lives = START_LIVES
        self.mobs_counter = 1
        self.show_market = False
        self.remind_index = 0
        self.remind_coo = Vec2(0, 0)
        self.is_a_tow = False
        self.should_reset = False
        self.money_pos = Vec2(1620, 20)
        self.heart_pos = Vec2(self.money_pos.x + 180, self.money_pos.y + 120)
        self.now_ms = 0
        self.spawn_clock_ms = 0
        self.more_mobs_clock_ms = 0

    def _rng(self, rng: random.Random | None) -> random.Random:
        return rng if rng is not None else self.rng

    def is_an_emplacement(self, x: float, y: float) -> bool:
        """Tell whether the point lies on an emplacement with no tower."""
        return any(
            not tower.is_existing and button.contains(x, y)
            for tower, button in zip(self.towers, self.buttons)
        )

    def tower_at(self, x: float, y: float) -> int | None:
        """Index of the built tower covering the point, or None."""
        for index, tower in enumerate(self.towers):
            if (
                tower.is_existing
                and tower.pos.x <= x <= tower.pos.x + TOWER_SIZE
                and tower.pos.y <= y <= tower.pos.y + TOWER_SIZE
            ):
                return index
        return None

    def select_emplacement(self, index: int) -> bool:
        """Open the market for the free emplacement ``index``."""
        button = self.buttons[index]
        if button.name != "emplacement" or not self.is_an_emplacement(
            button.pos.x, button.pos.y
        ):
            return False
        self.show_market = True
        self.remind_coo = button.pos.copy()
        self.remind_index = index
        return True

    def buy_tower(self, tier: str) -> bool:
        """Build a ``tier`` tower on the selected emplacement if affordable."""
        try:
            price = TOWER_STATS[tier].price
        except KeyError:
            raise ValueError(f"unknown tower tier {tier!r}") from None
        if not self.show_market or self.bank < price:
            return False
        tower = self.towers[self.remind_index]
        tower.place(tier, self.remind_coo)
        self.is_a_tow = True
        self.show_market = False
        self.bank -= tower.price
        return True

    def handle_click(self, x: float, y: float) -> None:
        """Apply a mouse press at the point."""
        for index, button in enumerate(self.buttons):
            if not button.contains(x, y):
                button.set_hovered(False)
                continue
            button.set_hovered(True)
            if button.name == "emplacement":
                self.select_emplacement(index)
            elif button.name in TIERS:
                self.buy_tower(button.name)
        if (
            self.show_market
            and (x > _MARKET_MAX_X or y < _MARKET_MIN_Y)
            and not self.is_an_emplacement(x, y)
        ):
            self.show_market = False

    def close_market(self) -> None:
        self.show_market = False

    def sell_tower_at(self, x: float, y: float) -> int:
        """Sell the tower under the point for half its price; return the refund."""
        index = self.tower_at(x, y)
        if index is None:
            return 0
        refund = self.towers[index].price // 2
        self.bank += refund
        self.towers[index] = Tower(last_shot_ms=self.now_ms)
        return refund

    def add_mobs(self, count: int, rng: random.Random | None = None) -> None:
        """Drop dead and escaped mobs, costing a life per escape, then spawn ``count``."""
        for mob in self.mobs:
            if mob.pos.x < 0 and mob.pos.y > 500:
                mob.hp = -5
                self.lives -= 1
        self.mobs = [mob for mob in self.mobs if mob.hp > 0]
        source = self._rng(rng)
        for _ in range(count):
            mob = spawn_mob(source)
            mob.spawned_ms = self.now_ms
            self.mobs.append(mob)

    def update_mobs(self, now_ms: int, rng: random.Random | None = None) -> None:
        """Spawn waves once a tower exists and move every mob."""
        self.now_ms = now_ms
        if self.is_a_tow and now_ms - self.spawn_clock_ms >= SPAWN_INTERVAL_MS:
            self.add_mobs(self.mobs_counter, rng)
            self.spawn_clock_ms = now_ms
        if self.is_a_tow and now_ms - self.more_mobs_clock_ms >= MORE_MOBS_INTERVAL_MS:
            self.mobs_counter += 1
            self.more_mobs_clock_ms = now_ms
        if self.mobs:
            advance_mobs(self.mobs, now_ms)

    def nearest_mob(self, tower: Tower) -> Mob | None:
        """The closest mob within the tower's reach, or None."""
        nearest = None
        shortest = _NO_TARGET_DISTANCE
        for mob in self.mobs:
            distance = distance_between(tower.pos, mob.pos)
            if distance <= SHOT_RANGE_SQUARED and distance < shortest:
                shortest = distance
                nearest = mob
        return nearest

    def tower_shots(self, now_ms: int, rng: random.Random | None = None) -> None:
        """Let every tower aim and, once a second, hit its target."""
        self.now_ms = now_ms
        for tower in self.towers:
            if not tower.is_existing:
                continue
            tower.mob_focused = self.nearest_mob(tower)
            if now_ms - tower.last_shot_ms >= SHOT_INTERVAL_MS:
                self._hit(tower, rng)
                tower.last_shot_ms = now_ms

    def _hit(self, tower: Tower, rng: random.Random | None) -> None:
        mob = tower.mob_focused
        if mob is None:
            return
        mob.hp -= tower.dps
        if mob.hp <= 0:
            self.bank += mob.drops
            self.add_mobs(0, rng)

    def money_text(self) -> str:
        return str(self.bank)

    def money_x(self) -> int:
        """Horizontal position of the money text for the current bank."""
        digits = nbr_len(self.bank)
        x = int(self.money_pos.x)
        for divisor, candidate in _MONEY_X_BY_DIVISOR:
            if digits % divisor == 0:
                x = candidate
        self.money_pos.x = x
        return x

    def lives_text(self) -> str:
        return chr(ord("0") + self.lives)

    def is_lost(self) -> bool:
        return self.lives <= 0