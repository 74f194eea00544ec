"""Top-level package for the artillery duel."""

__version__ = "1.0.0"

from artillery_game.core import (
    Command,
    Game,
    GameSession,
    GameSnapshot,
    MatchPhase,
    Tank,
    Terrain,
    TerrainSettings,
    WeaponKind,
)

__all__ = [
    "Command",
    "Game",
    "GameSession",
    "GameSnapshot",
    "MatchPhase",
    "Tank",
    "Terrain",
    "TerrainSettings",
    "WeaponKind",
]

__all__.append("__version__")

try:
    from artillery_game.pygame import PygameArtillery, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameArtillery = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

__all__.extend(["PygameArtillery", "run_pygame"])
