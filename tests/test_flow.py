from jankbits.flow import GameFlow, workshop_layout
from jankbits.menus import Transition
from jankbits.states import Key, Menu, Screen


def test_title_opens_main_menu():
    flow = GameFlow()
    flow.set_screen(Screen.TITLE)
    assert flow.menu is Menu.MAIN


def test_leaving_title_closes_menu():
    flow = GameFlow()
    flow.set_screen(Screen.TITLE)
    flow.set_screen(Screen.WORKSHOP)
    assert flow.menu is Menu.NONE


def test_pause_and_resume():
    flow = GameFlow(screen=Screen.GAMEPLAY)
    flow.handle_key(Key.P)
    assert flow.paused and flow.menu is Menu.PAUSE
    flow.handle_key(Key.P)
    assert not flow.paused and flow.menu is Menu.NONE


def test_escape_pauses_then_closes():
    flow = GameFlow(screen=Screen.LAUNCHPAD)
    flow.handle_key(Key.ESCAPE)
    assert flow.paused
    flow.handle_key(Key.ESCAPE)
    assert flow.menu is Menu.NONE and not flow.paused


def test_exit_screen_unpauses():
    flow = GameFlow(screen=Screen.GAMEPLAY)
    flow.handle_key(Key.P)
    flow.apply(Transition(screen=Screen.TITLE))
    assert not flow.paused
    assert flow.menu is Menu.MAIN


def test_loading_waits_for_resources():
    state = {"done": False}
    flow = GameFlow(resources_done=lambda: state["done"], screen=Screen.LOADING)
    flow.update(0.1)
    assert flow.screen is Screen.LOADING
    state["done"] = True
    flow.update(0.1)
    assert flow.screen is Screen.GAMEPLAY


def test_splash_escape_goes_to_title():
    flow = GameFlow()
    flow.handle_key(Key.ESCAPE)
    assert flow.screen is Screen.TITLE


def test_exit_transition():
    flow = GameFlow()
    flow.apply(Transition(exit=True))
    assert flow.exit_requested


def test_workshop_layout_centred():
    layout = workshop_layout(1000, 800)
    sx, sy, sw, sh = layout["sidebar"]
    wx, wy, ww, wh = layout["workspace"]
    assert wx == sx + sw
    assert sx + (wx + ww - 1000) == 0 or abs((sx) - (1000 - wx - ww)) < 1e-9
    assert sh == wh == 512.0