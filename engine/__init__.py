"""
engine/
-------
Playback, session & recording layer.

    from engine import Player, create_player, Visualizer, Recorder, compare
"""

from engine.player   import (
    Player,
    PlayerState,
    PlayerSnapshot,
    create_player,
    delay_for_speed,
    DEFAULT_SPEED,
)
from engine.session  import Visualizer
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Player",
    "PlayerState",
    "PlayerSnapshot",
    "create_player",
    "delay_for_speed",
    "DEFAULT_SPEED",
    "Visualizer",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
