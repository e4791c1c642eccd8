"""Main menu, the screens it opens and the program entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from snakegrid.graphics import Graphics
from snakegrid.logic import Logic
from snakegrid.music import Music
from snakegrid.settings import FPS, GRID, HIGHLIGHT_COLOR, TEXT_COLOR, WINDOW_TITLE

NO_ITEM = -1
MUSIC_BUTTON = -2
PLAY = 0
HOW_TO_PLAY = 1
EXIT = 2

MENU_ITEMS = ("PLAY", "HOW TO PLAY", "EXIT")

_ITEM_X = 200
_ITEM_Y = 300
_ITEM_SPACING = 60
_ITEM_WIDTH = 200
_ITEM_HEIGHT = 40

_LOGO_POS = (200, 50)
_BACK_RECT = pygame.Rect(10, 10, 30, 30)
_FRAME_WAIT_MS = 16

# Rows below this line hold the score display rather than the field.
_FIELD_BOTTOM = 540

_WALL_COLOR = (90, 60, 30)
_HEAD_COLOR = (40, 200, 40)
_BODY_COLOR = (20, 140, 20)
_APPLE_COLOR = (220, 30, 30)


def _inside(rect: pygame.Rect, x: int, y: int) -> bool:
    """Hit test that counts the right and bottom edges as inside."""
    return rect.x <= x <= rect.right and rect.y <= y <= rect.bottom


class Menu:
    """The start menu: play, instructions, exit and a music switch."""

    def __init__(self, graphics: Graphics, music: Optional[Music] = None):
        self.graphics = graphics
        self.music = music
        self.items = list(MENU_ITEMS)
        self.item_rects = [
            pygame.Rect(_ITEM_X, _ITEM_Y + i * _ITEM_SPACING, _ITEM_WIDTH, _ITEM_HEIGHT)
            for i in range(len(self.items))
        ]
        self.music_button = pygame.Rect(30, 30, 40, 40)
        self.selected_item = NO_ITEM
        self.music_enabled = True
        self._music_playing = False

    def item_at(self, x: int, y: int) -> int:
        """Index of the menu item under (x, y), MUSIC_BUTTON, or NO_ITEM."""
        for index, rect in enumerate(self.item_rects):
            if _inside(rect, x, y):
                return index
        if _inside(self.music_button, x, y):
            return MUSIC_BUTTON
        return NO_ITEM

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track the hovered item; return True once a choice has been made."""
        if event.type == pygame.QUIT:
            self.selected_item = EXIT
            return True
        if event.type == pygame.MOUSEMOTION:
            self.selected_item = self.item_at(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.selected_item != NO_ITEM
        return False

    def render_menu(self) -> None:
        """Draw the item labels, the hovered one highlighted, and show them."""
        for index, (label, rect) in enumerate(zip(self.items, self.item_rects)):
            color = HIGHLIGHT_COLOR if index == self.selected_item else TEXT_COLOR
            self.graphics.draw_text(label, rect.x, rect.y, color)
        self.graphics.present_scene()

    def show_menu(self) -> int:
        """Run the menu until something is clicked; return the choice."""
        while True:
            event = pygame.event.poll()
            while event.type != pygame.NOEVENT:
                if self.handle_event(event):
                    return self.selected_item
                event = pygame.event.poll()
            self.render_menu()
            pygame.time.wait(_FRAME_WAIT_MS)

    def _update_music(self, on_button, off_button) -> None:
        button = self.music_button
        if self.music_enabled:
            self.graphics.render_texture(on_button, button.x, button.y)
            if not self._music_playing and self.music is not None:
                self._music_playing = self.music.background_music()
        else:
            self.graphics.render_texture(off_button, button.x, button.y)
            if self.music is not None:
                self.music.stop()
            self._music_playing = False

    def _draw_back_button(self, back_button) -> None:
        if back_button is not None:
            self.graphics.blit_rect(back_button, _BACK_RECT, _BACK_RECT.x, _BACK_RECT.y)
        else:
            pygame.draw.rect(self.graphics.screen, TEXT_COLOR, _BACK_RECT, 2)

    @staticmethod
    def _wait_for_back() -> bool:
        """Block until the back button is clicked; False if quit was asked for."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return False
            if (
                event.type == pygame.MOUSEBUTTONDOWN
                and event.button == 1
                and _inside(_BACK_RECT, *event.pos)
            ):
                return True

    def _wall_layer(self, logic: Logic) -> pygame.Surface:
        screen = self.graphics.screen
        layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for y in range(0, min(_FIELD_BOTTOM, screen.get_height()), GRID):
            for x in range(0, screen.get_width(), GRID):
                if logic.impact(x, y):
                    layer.fill(_WALL_COLOR, pygame.Rect(x, y, GRID, GRID))
        return layer

    def _draw_game(self, logic: Logic, background, walls, back_button, game_over: bool) -> None:
        screen = self.graphics.screen
        self.graphics.prepare_scene(background)
        screen.blit(walls, (0, 0))
        if logic.apple is not None:
            screen.fill(_APPLE_COLOR, pygame.Rect(logic.apple.x, logic.apple.y, GRID, GRID))
        for index, segment in enumerate(logic.segments):
            color = _HEAD_COLOR if index == 0 else _BODY_COLOR
            screen.fill(color, pygame.Rect(segment.x, segment.y, GRID, GRID))
        self.graphics.draw_text(f"Score: {logic.score}", 20, _FIELD_BOTTOM + 10, TEXT_COLOR)
        self.graphics.draw_text(
            f"High score: {logic.high_score}", 400, _FIELD_BOTTOM + 10, TEXT_COLOR
        )
        if game_over:
            self.graphics.draw_text("GAME OVER", 320, 250, HIGHLIGHT_COLOR)
            self._draw_back_button(back_button)
        self.graphics.present_scene()

    def _play_game(self, background, back_button) -> bool:
        """Play one game; return False if the window was closed."""
        logic = Logic()
        if self.music is not None:
            logic.on_eat = lambda: self.music_enabled and self.music.snake_eating()
        walls = self._wall_layer(logic)
        clock = pygame.time.Clock()
        pending: list = []
        quit_requested = False
        while logic.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                pending.append(event)
            if logic.run_logic(pygame.time.get_ticks(), pending):
                pending.clear()
                head = logic.head
                if logic.impact(head.x, head.y) or logic.tail_bite():
                    if self.music is not None and self.music_enabled:
                        self.music.snake_collision()
                    break
            self._draw_game(logic, background, walls, back_button, game_over=False)
            clock.tick(FPS)
        if quit_requested:
            return False
        self._draw_game(logic, background, walls, back_button, game_over=True)
        return self._wait_for_back()

    def _how_to_play(self, instructions, back_button) -> bool:
        self.graphics.prepare_scene(instructions)
        self._draw_back_button(back_button)
        self.graphics.present_scene()
        return self._wait_for_back()

    def run_menu(self) -> None:
        """Show the menu and the screens it leads to until EXIT is chosen."""
        graphics = self.graphics
        background = graphics.load_texture("background_snake.jpg")
        logo = graphics.load_texture("logosnake.png")
        instructions = graphics.load_texture("HUONGDAN.png")
        back_button = graphics.load_texture("back.jpg")
        music_on = graphics.load_texture("musicon.png")
        music_off = graphics.load_texture("musicoff.png")

        running = True
        while running:
            graphics.prepare_scene(background)
            graphics.render_texture(logo, *_LOGO_POS)
            self._update_music(music_on, music_off)
            graphics.present_scene()

            choice = self.show_menu()
            if choice == MUSIC_BUTTON:
                self.music_enabled = not self.music_enabled
            elif choice == PLAY:
                running = self._play_game(background, back_button)
            elif choice == HOW_TO_PLAY:
                running = self._how_to_play(instructions, back_button)
            elif choice == EXIT:
                running = False
            self.selected_item = NO_ITEM


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run the menu."""
    parser = argparse.ArgumentParser(prog="snakegrid", description=WINDOW_TITLE)
    parser.parse_args(argv)

    graphics = Graphics()
    graphics.init()
    music = Music()
    try:
        Menu(graphics, music).run_menu()
    finally:
        music.close()
        graphics.quit()
    return 0