import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from snakegrid.graphics import Graphics
from snakegrid.menu import (
    EXIT,
    HOW_TO_PLAY,
    MUSIC_BUTTON,
    NO_ITEM,
    PLAY,
    Menu,
)
from snakegrid.settings import HIGHLIGHT_COLOR


@pytest.fixture
def graphics():
    g = Graphics()
    g.init()
    g.font_path = None
    pygame.event.clear()
    yield g
    g.quit()


@pytest.fixture
def menu(graphics):
    return Menu(graphics, None)


def _motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


def _click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button)


def test_items_match_source(menu):
    assert menu.items == ["PLAY", "HOW TO PLAY", "EXIT"]
    assert menu.selected_item == NO_ITEM


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (200, 300, PLAY),
        (400, 340, PLAY),
        (250, 370, HOW_TO_PLAY),
        (250, 430, EXIT),
        (30, 30, MUSIC_BUTTON),
        (70, 70, MUSIC_BUTTON),
        (100, 100, NO_ITEM),
        (401, 300, NO_ITEM),
    ],
)
def test_item_at(menu, x, y, expected):
    assert menu.item_at(x, y) == expected


def test_item_rects_are_stacked(menu):
    tops = [rect.y for rect in menu.item_rects]
    assert tops == sorted(tops)
    assert all(rect.x == menu.item_rects[0].x for rect in menu.item_rects)


def test_motion_selects_item(menu):
    assert menu.handle_event(_motion(250, 430)) is False
    assert menu.selected_item == EXIT
    menu.handle_event(_motion(5, 500))
    assert menu.selected_item == NO_ITEM


def test_click_without_selection_does_nothing(menu):
    assert menu.handle_event(_click(5, 500)) is False


def test_click_with_selection_finishes(menu):
    menu.handle_event(_motion(250, 370))
    assert menu.handle_event(_click(250, 370)) is True
    assert menu.selected_item == HOW_TO_PLAY


def test_right_click_is_ignored(menu):
    menu.handle_event(_motion(250, 370))
    assert menu.handle_event(_click(250, 370, button=3)) is False


def test_quit_chooses_exit(menu):
    assert menu.handle_event(pygame.event.Event(pygame.QUIT)) is True
    assert menu.selected_item == EXIT


def test_show_menu_returns_clicked_item(menu):
    pygame.event.post(_motion(220, 310))
    pygame.event.post(_click(220, 310))
    assert menu.show_menu() == PLAY


def test_show_menu_music_button(menu):
    pygame.event.post(_motion(40, 40))
    pygame.event.post(_click(40, 40))
    assert menu.show_menu() == MUSIC_BUTTON


def test_render_menu_highlights_selection(menu, graphics):
    graphics.screen.fill((0, 0, 0))
    menu.selected_item = PLAY
    menu.render_menu()
    rect = menu.item_rects[PLAY]
    colors = {
        tuple(graphics.screen.get_at((x, y)))[:3]
        for x in range(rect.x, rect.right)
        for y in range(rect.y, rect.bottom)
    }
    assert HIGHLIGHT_COLOR in colors


def test_run_menu_toggles_music_and_exits(menu):
    pygame.event.post(_motion(40, 40))
    pygame.event.post(_click(40, 40))
    pygame.event.post(_motion(250, 430))
    pygame.event.post(_click(250, 430))
    menu.run_menu()
    assert menu.music_enabled is False
    assert menu.selected_item == NO_ITEM


def test_run_menu_how_to_play_then_back(menu):
    pygame.event.post(_motion(250, 370))
    pygame.event.post(_click(250, 370))
    pygame.event.post(_click(20, 20))
    pygame.event.post(_motion(250, 430))
    pygame.event.post(_click(250, 430))
    menu.run_menu()
    assert menu.music_enabled is True
    assert pygame.event.peek(pygame.MOUSEBUTTONDOWN) is False


def test_run_menu_quit_during_instructions(menu):
    pygame.event.post(_motion(250, 370))
    pygame.event.post(_click(250, 370))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    menu.run_menu()
    assert menu.selected_item == NO_ITEM
    assert pygame.event.peek(pygame.QUIT) is False