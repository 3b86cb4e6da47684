"""
session.py — Visualizer Session
================================
Everything one browser tab (or one terminal replay) needs: the current
array, the chosen algorithm, array size, speed, and the Player.

The control-panel gating lives here:

    can_start         algorithm selected and no playback active
    can_pause         playback active (running or paused)
    can_reset         not running, or paused
    can_modify_array  not running, or paused

Disallowed actions are silently ignored and return False; they are UI
no-ops, not errors.
"""

import logging
import random
from typing import Any, Dict, List, Optional

from algorithms import generate_steps, get_algorithm
from arrays import DEFAULT_ARRAY_SIZE, clamp_size, generate_random_array
from engine.player import DEFAULT_SPEED, Player, PlayerState, clamp_speed


logger = logging.getLogger(__name__)


class Visualizer:
    """
    Attributes:
        array_size         : Requested number of bars, within [10, 100].
        selected_algorithm : Registry key, or None until the user picks one.
        player             : The Player that owns the displayed array.
    """

    def __init__(
        self,
        array_size: int = DEFAULT_ARRAY_SIZE,
        speed: float = DEFAULT_SPEED,
        seed: Optional[int] = None,
    ):
        self.array_size:         int           = clamp_size(array_size)
        self.selected_algorithm: Optional[str] = None
        self._rng = random.Random(seed)
        self.player = Player(
            generate_random_array(self.array_size, rng=self._rng),
            speed=speed,
        )

    # ------------------------------------------------------------------
    # Gating
    # ------------------------------------------------------------------
    @property
    def can_start(self) -> bool:
        return bool(self.selected_algorithm) and not self.player.is_active

    @property
    def can_pause(self) -> bool:
        return self.player.is_active

    @property
    def can_reset(self) -> bool:
        return self.player.state != PlayerState.RUNNING

    @property
    def can_modify_array(self) -> bool:
        return self.player.state != PlayerState.RUNNING

    # ------------------------------------------------------------------
    # Array
    # ------------------------------------------------------------------
    @property
    def array(self) -> List[Any]:
        return self.player.working_array

    def generate_array(self) -> bool:
        """Replace the array with a fresh random one (cancels a paused run)."""
        if not self.can_modify_array:
            logger.debug("generate_array ignored: playback is running")
            return False
        return self.player.load(generate_random_array(self.array_size, rng=self._rng))

    def set_array_size(self, size: int) -> bool:
        if not self.can_modify_array:
            logger.debug("set_array_size ignored: playback is running")
            return False
        self.array_size = clamp_size(size)
        return self.generate_array()

    def load_array(self, values: List[Any]) -> bool:
        """Use caller-supplied values instead of a random array."""
        if not self.can_modify_array:
            return False
        return self.player.load(values)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def select_algorithm(self, algo_key: str) -> bool:
        if self.player.is_active:
            logger.debug("select_algorithm ignored: playback is active")
            return False
        self.selected_algorithm = algo_key
        return True

    def set_speed(self, speed: float) -> None:
        self.player.set_speed(clamp_speed(speed))

    def start(self) -> bool:
        if not self.can_start:
            return False
        steps = generate_steps(self.selected_algorithm, self.player.working_array)
        logger.info(
            "starting %s on %d elements (%d steps)",
            self.selected_algorithm, len(self.player.working_array), len(steps),
        )
        return self.player.start(steps)

    def pause(self) -> bool:
        return self.player.pause()

    def reset(self) -> bool:
        return self.player.reset()

    def tick(self, now: Optional[float] = None) -> bool:
        return self.player.tick(now)

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------
    def state(self) -> Dict[str, Any]:
        """Full visualization state as a JSON-ready dict."""
        info = get_algorithm(self.selected_algorithm) if self.selected_algorithm else None
        data = self.player.snapshot().to_dict()
        data.update({
            "arraySize":         self.array_size,
            "selectedAlgorithm": self.selected_algorithm,
            "algorithm":         info.to_dict() if info else None,
            "isAnimating":       self.player.is_active,
            "isPaused":          self.player.is_paused,
            "canStart":          self.can_start,
            "canPause":          self.can_pause,
            "canReset":          self.can_reset,
            "canModifyArray":    self.can_modify_array,
        })
        return data
