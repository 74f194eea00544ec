import pytest

from artillery_game.core.game import Game
from artillery_game.core.session import GameSession
from artillery_game.core.terrain import Terrain, TerrainSettings


@pytest.fixture
def terrain_settings() -> TerrainSettings:
    """Provide deterministic terrain for gameplay tests."""

    return TerrainSettings(seed=1234)


@pytest.fixture
def game(terrain_settings: TerrainSettings) -> Game:
    return Game(settings=terrain_settings, seed=1234)


@pytest.fixture
def session(game: Game) -> GameSession:
    return GameSession(game)


@pytest.fixture
def flat_game(game: Game) -> Game:
    """A game whose ground is a flat plain at 800, with tanks re-seated on it."""

    flatten(game.terrain, 800.0)
    game.settle_tanks()
    return game


def flatten(terrain: Terrain, level: float) -> None:
    terrain.heights = [level] * terrain.segments
