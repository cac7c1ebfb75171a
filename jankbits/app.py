"""The game application: ties screens, menus, assets and input together."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from jankbits.assets import ResourceHandles
from jankbits.audio import AudioPlayer, music
from jankbits.flow import GameFlow
from jankbits.launcher import Launchpad
from jankbits.menus import Transition, credits_menu, main_menu, pause_menu, settings_menu
from jankbits.movement import MovementController, Vec2, apply_movement, player_intent, screen_wrap
from jankbits.animation import PlayerAnimation, PlayerAnimationState
from jankbits.splash import SplashScreen
from jankbits.states import Key, Menu, Screen

TITLE = "Jank N Bits"
LEVEL_MUSIC = "audio/music/Fluffing A Duck.ogg"
WINDOW_SIZE = (1280, 720)


@dataclass
class InputEvent:
    """A key going down or up, or a click at a point."""

    key: Optional[Key] = None
    down: bool = True
    click: Optional[tuple[float, float]] = None


class Game:
    """Headless game state, advanced one frame at a time by ``step``."""

    def __init__(self, dev: bool = False, rng: Optional[random.Random] = None) -> None:
        self.dev = dev
        self.debug_ui = False
        self.handles = ResourceHandles()
        self.resources: dict[str, object] = {}
        self.handles.request(LEVEL_MUSIC, lambda h: self.resources.setdefault("level_music", h))
        self.flow = GameFlow(resources_done=self.handles.is_all_done)
        self.splash = SplashScreen()
        self.launchpad = Launchpad(rng)
        self.pressed: set[Key] = set()
        self.volume = 1.0
        self.audio: list[AudioPlayer] = []
        self.player_position = Vec2()
        self.player_controller = MovementController()
        self.player_animation = PlayerAnimation()
        self.window = Vec2(*WINDOW_SIZE)
        self._screen = self.flow.screen

    @property
    def running(self) -> bool:
        return not self.flow.exit_requested

    def widgets(self) -> list:
        menu = self.flow.menu
        if menu is Menu.MAIN:
            return main_menu(self.handles.is_all_done)
        if menu is Menu.PAUSE:
            return pause_menu()
        if menu is Menu.CREDITS:
            return credits_menu()
        if menu is Menu.SETTINGS:
            return settings_menu(self.flow.screen, self.volume)
        return []

    def _click(self, point) -> None:
        for widget in self.widgets():
            hit = getattr(widget, "hit", None)
            if hit and hit(point):
                self._apply(widget.action())
                return

    def _apply(self, transition: Optional[Transition]) -> None:
        if transition and transition.volume is not None:
            self.volume = transition.volume
            for player in self.audio:
                player.sink_volume = self.volume * player.volume
        self.flow.apply(transition)

    def _enter(self, screen: Screen) -> None:
        if screen is Screen.GAMEPLAY:
            self.player_position = Vec2()
            self.player_animation = PlayerAnimation()
            self.audio.append(music(self.resources.get("level_music", LEVEL_MUSIC)))
        elif screen is Screen.LAUNCHPAD:
            self.launchpad = Launchpad()

    def step(self, events: Iterable[InputEvent], delta_secs: float) -> None:
        """Handle this frame's input events and advance by ``delta_secs``."""
        just: set[Key] = set()
        for event in events:
            if event.click is not None:
                self._click(event.click)
            elif event.key is not None:
                if event.down:
                    if event.key not in self.pressed:
                        just.add(event.key)
                    self.pressed.add(event.key)
                else:
                    self.pressed.discard(event.key)
        for key in just:
            if self.dev and key is Key.BACKQUOTE:
                self.debug_ui = not self.debug_ui
            self.flow.handle_key(key)

        self.handles.poll(lambda handle: True)
        screen = self.flow.screen
        if screen is Screen.SPLASH:
            self.flow.apply(Transition(screen=self.splash.update(delta_secs)))
        elif not self.flow.paused:
            if screen is Screen.GAMEPLAY:
                self.player_animation.update_timer(delta_secs)
                intent = player_intent(self.pressed)
                self.player_controller.intent = intent
                self.player_animation.update_state(
                    PlayerAnimationState.IDLING if intent == Vec2.ZERO else PlayerAnimationState.WALKING
                )
                self.player_position = screen_wrap(
                    apply_movement(self.player_position, self.player_controller, delta_secs),
                    self.window,
                )
            elif screen is Screen.LAUNCHPAD:
                self.launchpad.update(self.pressed, just, delta_secs)
        self.flow.update(delta_secs)
        if self.flow.screen is not self._screen:
            if self._screen is Screen.GAMEPLAY:
                self.audio.clear()
            self._screen = self.flow.screen
            self._enter(self._screen)

    def run(self) -> None:
        """Open a window and run until exit."""
        import pygame

        keymap = {
            pygame.K_w: Key.W, pygame.K_a: Key.A, pygame.K_s: Key.S, pygame.K_d: Key.D,
            pygame.K_UP: Key.UP, pygame.K_DOWN: Key.DOWN, pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT, pygame.K_SPACE: Key.SPACE,
            pygame.K_ESCAPE: Key.ESCAPE, pygame.K_p: Key.P, pygame.K_BACKQUOTE: Key.BACKQUOTE,
        }
        pygame.init()
        surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        try:
            while self.running:
                delta = clock.tick(60) / 1000.0
                events = []
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.flow.exit_requested = True
                    elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in keymap:
                        events.append(InputEvent(keymap[event.key], event.type == pygame.KEYDOWN))
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        events.append(InputEvent(click=event.pos))
                self.step(events, delta)
                self._draw(pygame, surface)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _draw(self, pygame, surface) -> None:
        surface.fill((0, 0, 0))
        w, h = surface.get_size()
        if self.flow.screen is Screen.LAUNCHPAD:
            for projectile in self.launchpad.projectiles:
                pos = projectile.position
                pygame.draw.circle(surface, (255, 128, 0), (w / 2 + pos.x, h / 2 - pos.y), 6)
            for firework in self.launchpad.fireworks:
                for p in firework.particles:
                    pygame.draw.circle(surface, (255, 220, 120),
                                       (w / 2 + p.position.x, h / 2 - p.position.y), 2)
        elif self.flow.screen is Screen.GAMEPLAY:
            pos = self.player_position
            pygame.draw.rect(surface, (230, 200, 60), (w / 2 + pos.x - 16, h / 2 - pos.y - 16, 32, 32))
        y = 40.0
        font = pygame.font.Font(None, 36)
        for widget in self.widgets():
            text = font.render(widget.text, True, (236, 236, 236))
            if hasattr(widget, "hit"):
                widget.position = ((w - widget.width) / 2, y)
                rgb = tuple(widget.background.rgba8[:3])
                pygame.draw.rect(surface, rgb, (*widget.position, widget.width, widget.height))
                y += widget.height + 20
            else:
                y += 40
            surface.blit(text, ((w - text.get_width()) / 2, y - 30))


def main(argv=None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="jankbits", description=TITLE)
    parser.add_argument("--dev", action="store_true", help="enable development tools")
    args = parser.parse_args(argv)
    Game(dev=args.dev).run()
    return 0