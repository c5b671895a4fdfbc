"""Side-scrolling dino runner game package."""

from .app import RunnerApp
from .audio import CuePlayer, NullCuePlayer, SoundCuePlayer
from .config import DifficultyParameters, GameConfig, SocketInputConfig, SpriteCatalog, ViewportConfig
from .game import FrameReport, GamePhase, GameState, RunnerGame
from .input import KeyboardInput, SocketInput

__all__ = [
    "RunnerApp",
    "RunnerGame",
    "GameState",
    "GamePhase",
    "FrameReport",
    "GameConfig",
    "DifficultyParameters",
    "SpriteCatalog",
    "ViewportConfig",
    "SocketInputConfig",
    "CuePlayer",
    "NullCuePlayer",
    "SoundCuePlayer",
    "KeyboardInput",
    "SocketInput",
]
