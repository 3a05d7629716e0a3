"""The game window: drawing, input handling and the main loops."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from brawldefender.entities import Button, Mob, Tower
from brawldefender.game import GameState
from brawldefender.menus import GAME_MUSIC, MAP_IMAGE, Action, Menu, Session
from brawldefender.strtools import extract_str

HELP_PATH = "src/h_gestion.txt"
WINDOW_TITLE = "Brawl Defender"
WINDOW_SIZE = (1920, 1080)
FRAMERATE = 400
FONT_PATH = "font/bs_font.ttf"
FONT_SIZE = 70
COIN_IMAGE = "png/coin.png"
HEART_IMAGE = "png/heart.png"
MARKET_IMAGE = "png/select_a_tower.png"
COIN_POS = (1800, 10)
MARKET_POS = (10, 450)
LIVES_TEXT_SHIFT = 80
TEXT_COLOR = (255, 255, 255)
RANGE_COLOR = (255, 0, 0, 100)
ERROR_EXIT = 84

_BACKDROP_MENUS = ("settings", "pause", "endgame")
_TOWER_HALF = 64
_RANGE_ORIGIN_RATIO = 1.25


def wants_help(argv: Sequence[str]) -> bool:
    """Tell whether the last command-line argument asks for help."""
    return bool(argv) and argv[-1] == "-h"


class App:
    """Runs the title menu and the game in a window until it is closed."""

    def __init__(self, session: Session | None = None, frame_limit: int | None = None) -> None:
        self.session = session if session is not None else Session()
        self.frame_limit = frame_limit
        self._frames = 0
        self._images: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}
        self._playing_track: str | None = None
        self._clock_game: GameState | None = None
        self._clock_origin = 0
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None

    def run(self) -> int:
        """Open the window and play until it closes; return the frames shown."""
        self._frames = 0
        if not self._running():
            return 0
        pygame.init()
        try:
            self._screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            self._clock = pygame.time.Clock()
            self._font = self._load_font()
            self._sync_music()
            while self._running():
                title = self.session.menus["game"]
                if self.session.is_in_game:
                    self._game_loop()
                elif title.is_active:
                    self._menu_loop(title)
                else:
                    title.is_active = True
            return self._frames
        finally:
            self._stop_music()
            self._images.clear()
            self._sounds.clear()
            pygame.quit()

    # -- loop control -------------------------------------------------

    def _running(self) -> bool:
        if not self.session.window_open:
            return False
        return self.frame_limit is None or self._frames < self.frame_limit

    def _present(self) -> None:
        pygame.display.flip()
        self._frames += 1
        if self._clock is not None:
            self._clock.tick(FRAMERATE)

    # -- assets -------------------------------------------------------

    def _load_font(self) -> pygame.font.Font:
        try:
            return pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (pygame.error, OSError):
            return pygame.font.Font(None, FONT_SIZE)

    def _image(self, path: str | None) -> pygame.Surface | None:
        if path is None:
            return None
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(path).convert_alpha()
            except (pygame.error, OSError):
                self._images[path] = None
        return self._images[path]

    def _play_sound(self, path: str) -> None:
        if self.session.is_muted or not pygame.mixer.get_init():
            return
        if path not in self._sounds:
            try:
                self._sounds[path] = pygame.mixer.Sound(path)
            except (pygame.error, OSError):
                self._sounds[path] = None
        sound = self._sounds[path]
        if sound is not None:
            sound.play()

    def _sync_music(self) -> None:
        """Play the session's current track, or pause it when muted."""
        if not pygame.mixer.get_init():
            return
        track = self.session.current_music
        try:
            if not self.session.music_playing or track is None:
                pygame.mixer.music.pause()
                return
            if track != self._playing_track:
                pygame.mixer.music.load(track)
                pygame.mixer.music.play(loops=-1)
                self._playing_track = track
            else:
                pygame.mixer.music.unpause()
        except (pygame.error, OSError):
            self._playing_track = None

    def _stop_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self._playing_track = None

    # -- drawing ------------------------------------------------------

    def _blit(self, path: str | None, pos: tuple[float, float], scale=(1.0, 1.0)) -> None:
        image = self._image(path)
        if image is None or self._screen is None:
            return
        if scale != (1.0, 1.0):
            width = max(1, round(image.get_width() * scale[0]))
            height = max(1, round(image.get_height() * scale[1]))
            image = pygame.transform.scale(image, (width, height))
        self._screen.blit(image, pos)

    def _draw_button(self, button: Button) -> None:
        self._blit(
            button.current_image,
            (button.pos.x, button.pos.y),
            (button.resize.x, button.resize.y),
        )

    def _draw_centered(self, image: pygame.Surface, center: tuple[float, float], angle: float) -> None:
        if self._screen is None:
            return
        if angle:
            image = pygame.transform.rotate(image, -angle)
        self._screen.blit(image, image.get_rect(center=center))

    def _draw_tower(self, tower: Tower) -> None:
        image = self._image(tower.image)
        if image is not None:
            center = (tower.pos.x + _TOWER_HALF, tower.pos.y + _TOWER_HALF)
            self._draw_centered(image, center, tower.rotation())

    def _draw_range(self, tower: Tower) -> None:
        if self._screen is None:
            return
        radius = tower.shot_range
        overlay = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(overlay, RANGE_COLOR, (radius, radius), radius)
        offset = radius / _RANGE_ORIGIN_RATIO
        self._screen.blit(overlay, (tower.pos.x - offset, tower.pos.y - offset))

    def _draw_mob(self, mob: Mob) -> None:
        sheet = self._image(mob.image)
        if sheet is None:
            return
        try:
            frame = sheet.subsurface(
                pygame.Rect(mob.rect.left, mob.rect.top, mob.rect.width, mob.rect.height)
            )
        except ValueError:
            return
        self._draw_centered(frame, (mob.pos.x, mob.pos.y), mob.rotation)

    def _draw_text(self, text: str, pos: tuple[float, float]) -> None:
        if self._font is None or self._screen is None:
            return
        self._screen.blit(self._font.render(text, True, TEXT_COLOR), pos)

    def _draw_menu(self, menu: Menu) -> None:
        if self._screen is None:
            return
        self._screen.fill((0, 0, 0))
        if menu.name in _BACKDROP_MENUS:
            self._blit(menu.background, (0, 0))
        self._blit(menu.image, (menu.menu_pos.x, menu.menu_pos.y))
        self._blit(menu.title_image, (menu.name_pos.x, menu.name_pos.y))
        for button in menu.buttons:
            self._draw_button(button)
        self._present()

    def _draw_game(self) -> None:
        if self._screen is None:
            return
        game = self.session.game
        self._screen.fill((0, 0, 0))
        self._blit(MAP_IMAGE, (0, 0))
        slots = len(game.towers)
        for button in game.buttons[:slots]:
            index = game.tower_at(button.pos.x, button.pos.y)
            if index is not None:
                self._draw_tower(game.towers[index])
            else:
                self._draw_button(button)
        if game.show_market:
            self._blit(MARKET_IMAGE, MARKET_POS)
            for button in game.buttons[slots:]:
                self._draw_button(button)
        self._draw_text(game.money_text(), (game.money_x(), game.money_pos.y))
        self._blit(COIN_IMAGE, COIN_POS)
        self._draw_text(
            game.lives_text(), (game.heart_pos.x - LIVES_TEXT_SHIFT, game.heart_pos.y)
        )
        self._blit(HEART_IMAGE, (game.heart_pos.x, game.heart_pos.y))
        for mob in game.mobs:
            self._draw_mob(mob)
        mouse_x, mouse_y = pygame.mouse.get_pos()
        hovered = game.tower_at(mouse_x, mouse_y)
        if hovered is not None:
            self._draw_range(game.towers[hovered])
        self._present()

    # -- menus --------------------------------------------------------

    def _menu_loop(self, menu: Menu) -> None:
        menu.is_active = True
        while menu.is_active and self._running():
            self._draw_menu(menu)
            for event in pygame.event.get():
                self._menu_event(menu, event)
                if not menu.is_active or not self.session.window_open:
                    break
        if self.session.game.should_reset:
            self.session.reset()
            self._sync_music()

    def _menu_event(self, menu: Menu, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.session.window_open = False
            return
        if event.type == pygame.MOUSEMOTION:
            menu.hover(*event.pos)
            return
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        button = menu.hover(*event.pos)
        if button is None:
            return
        actions = self.session.press(menu, button.name)
        if Action.CLICK_SOUND in actions:
            self._play_sound(button.sound)
        if Action.TOGGLE_MUTE in actions:
            self._sync_music()
        if Action.OPEN_SETTINGS in actions:
            self._menu_loop(self.session.menus["settings"])

    # -- game ---------------------------------------------------------

    def _game_now(self) -> int:
        game = self.session.game
        if self._clock_game is not game:
            self._clock_game = game
            self._clock_origin = pygame.time.get_ticks()
        return pygame.time.get_ticks() - self._clock_origin

    def _game_loop(self) -> None:
        self.session.current_music = GAME_MUSIC
        self._sync_music()
        while self.session.is_in_game and self._running():
            self._draw_game()
            for event in pygame.event.get():
                self._game_event(event)
                if not self.session.is_in_game or not self.session.window_open:
                    break
            if not self.session.is_in_game:
                break
            game = self.session.game
            now = self._game_now()
            game.update_mobs(now)
            game.tower_shots(now)
            if game.is_lost():
                self._menu_loop(self.session.open_menu("endgame"))

    def _game_event(self, event: pygame.event.Event) -> None:
        game = self.session.game
        if event.type == pygame.QUIT:
            self.session.window_open = False
        elif event.type == pygame.MOUSEMOTION:
            for button in game.buttons:
                button.set_hovered(button.contains(*event.pos))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._game_click(*event.pos)
        elif event.type == pygame.KEYDOWN:
            self._game_key(event.key)

    def _game_click(self, x: float, y: float) -> None:
        game = self.session.game
        target = next((button for button in game.buttons if button.contains(x, y)), None)
        bank, market, index = game.bank, game.show_market, game.remind_index
        game.handle_click(x, y)
        opened = game.show_market and (not market or game.remind_index != index)
        if target is not None and (game.bank < bank or opened):
            self._play_sound(target.sound)

    def _game_key(self, key: int) -> None:
        game = self.session.game
        if key == pygame.K_ESCAPE:
            if game.show_market:
                game.close_market()
            else:
                self._menu_loop(self.session.open_menu("settings"))
        elif key == pygame.K_SPACE:
            self._menu_loop(self.session.open_menu("pause"))
        elif key == pygame.K_s:
            game.sell_tower_at(*pygame.mouse.get_pos())


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game, or print the help text when the last argument is -h."""
    args = list(sys.argv[1:] if argv is None else argv)
    if wants_help(args):
        try:
            text = extract_str(HELP_PATH)
        except OSError as error:
            sys.stderr.write(f"cannot read help: {error}\n")
            return ERROR_EXIT
        sys.stdout.write(text + "\n")
        return 0
    App().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())