"""Game entities: buttons, towers and mobs, with their factory functions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

PRESSED_SOUND = "music_sounds/button_pressed.ogg"
TOWER_SOUND = "music_sounds/tower_setup.ogg"

TIERS = ("tier1", "tier2", "tier3", "tier4")

_MENU_BUTTON_RECTS = {
    "play": (350, 170),
    "resume": (350, 170),
    "quit": (350, 170),
    "scoreboard": (350, 170),
    "play_again": (350, 170),
    "settings": (225, 155),
    "back": (350, 170),
    "volume": (200, 155),
    "restart": (350, 170),
}

_SELECTION_RECTS = {
    "tier1": (128, 120),
    "tier2": (128, 100),
    "tier3": (128, 128),
    "tier4": (128, 128),
}


@dataclass(frozen=True)
class TowerStats:
    """Damage, price and image of one tower tier."""

    dps: int
    price: int
    image: str


TOWER_STATS = {
    "tier1": TowerStats(100, 100, "png/tier1_loaded.png"),
    "tier2": TowerStats(250, 250, "png/tier2_loaded.png"),
    "tier3": TowerStats(300, 500, "png/tier3.png"),
    "tier4": TowerStats(500, 700, "png/tier4.png"),
}


@dataclass(frozen=True)
class MobStats:
    """Hit points, reward, whole-pixel speed and image of one mob tier."""

    hp: int
    drops: int
    speed: int
    image: str


MOB_STATS = {
    "tier1": MobStats(400, 25, 2, "png/mob_tier1.png"),
    "tier2": MobStats(650, 30, 2, "png/mob_tier2.png"),
    "tier3": MobStats(1300, 40, 1, "png/mob_tier3.png"),
    "tier4": MobStats(1700, 60, 1, "png/mob_tier4.png"),
}

_TOWER_ROTATIONS = {
    (512, 128): 180.0,
    (770, 128): 180.0,
    (1250, 640): 180.0,
    (1664, 256): -90.0,
    (1536, 640): 90.0,
}

MOB_SPAWN_X = -80 + 64
MOB_SPAWN_Y = 20 + 64


@dataclass
class Vec2:
    """A 2D position or scale."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass
class Rect:
    """An integer rectangle, used for hit boxes and sprite-sheet frames."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Button:
    """A clickable area with a normal and a hovered image and a click sound."""

    name: str
    pos: Vec2
    rect: Rect
    image: str
    hover_image: str
    sound: str
    resize: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    hovered: bool = False

    def contains(self, x: float, y: float) -> bool:
        """Tell whether the point lies inside the button, edges included."""
        return (
            self.pos.x <= x <= self.pos.x + self.rect.width
            and self.pos.y <= y <= self.pos.y + self.rect.height
        )

    def set_hovered(self, hovered: bool) -> None:
        self.hovered = hovered

    @property
    def current_image(self) -> str:
        return self.hover_image if self.hovered else self.image


@dataclass
class Tower:
    """A tower slot; it exists only once a tier has been placed on it."""

    type: str | None = None
    level: int = 1
    price: int = 0
    dps: int = 0
    shot_range: int = 350
    pos: Vec2 = field(default_factory=Vec2)
    resize: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    is_existing: bool = False
    image: str | None = None
    mob_focused: Mob | None = None
    last_shot_ms: int = 0

    def place(self, tier: str, pos: Vec2) -> None:
        """Build a tower of ``tier`` at ``pos``."""
        try:
            stats = TOWER_STATS[tier]
        except KeyError:
            raise ValueError(f"unknown tower tier {tier!r}") from None
        self.type = tier
        self.dps = stats.dps
        self.price = stats.price
        self.image = stats.image
        self.is_existing = True
        self.pos = pos.copy()

    def rotation(self) -> float:
        """Angle in degrees that turns the tower towards the path."""
        return _TOWER_ROTATIONS.get((self.pos.x, self.pos.y), 0.0)


@dataclass
class Mob:
    """An enemy walking along the path."""

    type: str
    hp: int
    drops: int
    speed: int
    image: str
    move_gap: int
    pos: Vec2
    move_stade: int = 0
    rotation: float = 0.0
    rect: Rect = field(default_factory=lambda: Rect(0, 0, 128, 128))
    resize: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    spawned_ms: int = 0


def make_button(name: str, pos: Vec2) -> Button:
    """Create one of the menu buttons by name."""
    try:
        width, height = _MENU_BUTTON_RECTS[name]
    except KeyError:
        raise ValueError(f"unknown button {name!r}") from None
    return Button(
        name=name,
        pos=pos.copy(),
        rect=Rect(0, 0, width, height),
        image=f"png/{name}.png",
        hover_image=f"png/tr_{name}.png",
        sound=PRESSED_SOUND,
    )


def make_emplacement(pos: Vec2) -> Button:
    """Create an empty tower emplacement at ``pos``."""
    return Button(
        name="emplacement",
        pos=pos.copy(),
        rect=Rect(0, 0, 128, 128),
        image="png/tower_emplacement.png",
        hover_image="png/tr_tower_emplacement.png",
        sound=PRESSED_SOUND,
    )


def make_selection_button(tier: str, pos: Vec2) -> Button:
    """Create the market button that buys a tower of ``tier``."""
    try:
        width, height = _SELECTION_RECTS[tier]
    except KeyError:
        raise ValueError(f"unknown tower tier {tier!r}") from None
    return Button(
        name=tier,
        pos=pos.copy(),
        rect=Rect(0, 0, width, height),
        image=f"png/{tier}_btn.png",
        hover_image=f"png/tr_{tier}_btn.png",
        sound=TOWER_SOUND,
        resize=Vec2(0.8, 0.8),
    )


def random_mob_type(rng: random.Random) -> str:
    """Draw a mob tier; stronger tiers are rarer."""
    draw = rng.randrange(11)
    if draw == 10:
        return "tier4"
    if draw >= 8:
        return "tier3"
    if draw > 4:
        return "tier2"
    return "tier1"


def make_mob(tier: str, move_gap: int, y_offset: int) -> Mob:
    """Create a mob of ``tier`` at the path entrance, ``y_offset`` pixels down."""
    try:
        stats = MOB_STATS[tier]
    except KeyError:
        raise ValueError(f"unknown mob tier {tier!r}") from None
    return Mob(
        type=tier,
        hp=stats.hp,
        drops=stats.drops,
        speed=stats.speed,
        image=stats.image,
        move_gap=move_gap,
        pos=Vec2(MOB_SPAWN_X, MOB_SPAWN_Y + y_offset),
    )


def spawn_mob(rng: random.Random) -> Mob:
    """Create a mob with a random tier, path offset and entry height."""
    move_gap = rng.randrange(130)
    tier = random_mob_type(rng)
    y_offset = rng.randrange(100)
    return make_mob(tier, move_gap, y_offset)