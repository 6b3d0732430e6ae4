import pygame
import pytest

import app
from controls import RIGHT
from simulation import World


@pytest.fixture
def screen():
    pygame.init()
    yield pygame.Surface((app.WIDTH, app.HEIGHT))
    pygame.quit()


def test_renderer_draws_ground(screen, clock):
    world = World(clock=clock)
    app.Renderer(screen).draw(world)
    assert tuple(screen.get_at((5, app.HEIGHT - 1)))[:3] == app.COL_GROUND


def test_renderer_draws_end_overlay(screen, clock):
    world = World(clock=clock)
    world.run.won = True
    app.Renderer(screen).draw(world)
    # ground is darkened by the overlay
    assert tuple(screen.get_at((5, app.HEIGHT - 1)))[:3] != app.COL_GROUND


def test_renderer_does_not_touch_world(screen, clock):
    world = World(clock=clock)
    p = world.player
    before = (p.x, p.y, p.vx, p.vy, world.run.score, world.run.status)
    app.Renderer(screen).draw(world)
    assert (p.x, p.y, p.vx, p.vy, world.run.score, world.run.status) == before


def test_game_routes_key_events():
    game = app.Game()
    try:
        game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        assert game.input.held == {RIGHT}
        game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
        assert game.input.held == frozenset()
    finally:
        pygame.quit()


def test_escape_quits():
    game = app.Game()
    with pytest.raises(SystemExit):
        game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))


def test_main_rejects_bad_fps():
    with pytest.raises(SystemExit) as exc:
        app.main(["--fps", "0"])
    assert exc.value.code == 2


@pytest.mark.parametrize("base, scroll, span, expected", [
    (620, 100, 1260, 520),
    (0, 100, 1260, -100),
    (310, 1600, 1260, -30),
])
def test_parallax_keeps_sign_when_scrolled_past(base, scroll, span, expected):
    assert app.parallax_x(base, scroll, span) == pytest.approx(expected)
