"""Menus, their buttons and the session state that menu clicks change."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from brawldefender.entities import Button, Vec2, make_button
from brawldefender.game import GameState

GAME_MENU_IMAGE = "png/game_menu.png"
GAME_TITLE_IMAGE = "png/game_menu_text.png"
SIGN_IMAGE = "png/big_sign.png"
SETTINGS_TITLE_IMAGE = "png/settings_text.png"
PAUSE_TITLE_IMAGE = "png/pause.png"
ENDGAME_TITLE_IMAGE = "png/you_lost.png"
MAP_IMAGE = "png/map.png"
MENU_MUSIC = "music_sounds/game_menu_music.ogg"
GAME_MUSIC = "music_sounds/main_music.ogg"

_SIGN_POS = (330, 5)


@dataclass
class Menu:
    """A full-screen menu: a background, a title and a row of buttons."""

    name: str
    buttons: list[Button]
    image: str
    title_image: str
    name_pos: Vec2
    menu_pos: Vec2 = field(default_factory=Vec2)
    music: str | None = None
    is_active: bool = False
    background: str | None = None

    def button_at(self, x: float, y: float) -> Button | None:
        """The first button covering the point, or None."""
        return next((button for button in self.buttons if button.contains(x, y)), None)

    def hover(self, x: float, y: float) -> Button | None:
        """Highlight the buttons under the point and return the first of them."""
        for button in self.buttons:
            button.set_hovered(button.contains(x, y))
        return self.button_at(x, y)


class Action(enum.Enum):
    """What a button press asks the rest of the program to do."""

    CLICK_SOUND = "click_sound"
    CLOSE_MENU = "close_menu"
    QUIT = "quit"
    START_GAME = "start_game"
    TOGGLE_MUTE = "toggle_mute"
    RESET = "reset"
    OPEN_SETTINGS = "open_settings"


def _buttons(*specs: tuple[str, tuple[int, int]]) -> list[Button]:
    return [make_button(name, Vec2(x, y)) for name, (x, y) in specs]


def build_menus() -> dict[str, Menu]:
    """Create the game, settings, pause and end-of-game menus, in that order."""
    game = Menu(
        name="game",
        buttons=_buttons(("play", (200, 240)), ("quit", (1220, 680)), ("settings", (125, 800))),
        image=GAME_MENU_IMAGE,
        title_image=GAME_TITLE_IMAGE,
        name_pos=Vec2(1270, 5),
        music=MENU_MUSIC,
        is_active=True,
    )
    settings = Menu(
        name="settings",
        buttons=_buttons(("back", (1050, 700)), ("quit", (550, 690)), ("volume", (600, 425))),
        image=SIGN_IMAGE,
        title_image=SETTINGS_TITLE_IMAGE,
        name_pos=Vec2(730, 150),
        menu_pos=Vec2(*_SIGN_POS),
    )
    pause = Menu(
        name="pause",
        buttons=_buttons(("resume", (1050, 700)), ("quit", (550, 690)), ("restart", (800, 500))),
        image=SIGN_IMAGE,
        title_image=PAUSE_TITLE_IMAGE,
        name_pos=Vec2(770, 150),
        menu_pos=Vec2(*_SIGN_POS),
    )
    endgame = Menu(
        name="endgame",
        buttons=_buttons(
            ("scoreboard", (1050, 700)), ("quit", (550, 690)), ("play_again", (800, 500))
        ),
        image=SIGN_IMAGE,
        title_image=ENDGAME_TITLE_IMAGE,
        name_pos=Vec2(730, 150),
        menu_pos=Vec2(*_SIGN_POS),
    )
    return {menu.name: menu for menu in (game, settings, pause, endgame)}


def volume_images(is_muted: bool) -> tuple[str, str]:
    """Normal and hovered images of the volume button for the mute state."""
    if is_muted:
        return "png/mute.png", "png/tr_mute.png"
    return "png/volume.png", "png/tr_volume.png"


class Session:
    """The whole program state: menus, the current game, sound and window."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.is_muted = False
        self.window_open = True
        self._build()

    def _build(self) -> None:
        self.menus = build_menus()
        self.game = GameState(self.rng)
        self.is_in_game = False
        self.current_music = self.menus["game"].music
        self._apply_sound()

    def _apply_sound(self) -> None:
        self.music_playing = not self.is_muted
        volume = next(b for b in self.menus["settings"].buttons if b.name == "volume")
        volume.image, volume.hover_image = volume_images(self.is_muted)

    def open_menu(self, name: str) -> Menu:
        """Activate the menu ``name`` and choose the background behind it."""
        try:
            menu = self.menus[name]
        except KeyError:
            raise ValueError(f"unknown menu {name!r}") from None
        menu.is_active = True
        if name == "settings" and not self.is_in_game:
            menu.background = self.menus["game"].image
        else:
            menu.background = MAP_IMAGE
        return menu

    def press(self, menu: Menu, button_name: str) -> list[Action]:
        """Apply a click on the button ``button_name`` of ``menu``."""
        if all(button.name != button_name for button in menu.buttons):
            raise ValueError(f"menu {menu.name!r} has no button {button_name!r}")
        actions: list[Action] = []
        if not self.is_muted:
            actions.append(Action.CLICK_SOUND)
        if button_name in ("play", "resume", "back"):
            menu.is_active = False
            actions.append(Action.CLOSE_MENU)
        if button_name == "quit":
            self.window_open = False
            actions.append(Action.QUIT)
        if button_name == "play":
            self.is_in_game = True
            actions.append(Action.START_GAME)
        if button_name == "volume":
            self.toggle_mute()
            actions.append(Action.TOGGLE_MUTE)
        if button_name in ("play_again", "restart"):
            menu.is_active = False
            self.game.should_reset = True
            actions.append(Action.RESET)
        if button_name == "settings":
            self.open_menu("settings")
            actions.append(Action.OPEN_SETTINGS)
        return actions

    def toggle_mute(self) -> bool:
        """Switch the sound on or off; return the new mute state."""
        self.is_muted = not self.is_muted
        self._apply_sound()
        return self.is_muted

    def reset(self) -> None:
        """Start over from the title menu with a fresh game; sound stays as set."""
        self._build()