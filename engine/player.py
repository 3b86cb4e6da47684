"""
player.py — Step Replay Engine
===============================
The Player is the ONLY object that mutates the displayed array during a
run.  It takes a finished step list, applies one step per tick against
its own working copy of the array, and exposes a small
start/pause/reset/speed API.

State machine:
    IDLE       →  start(steps)          →  RUNNING
    COMPLETED  →  start(steps)          →  RUNNING
    RUNNING    →  pause()               →  PAUSED
    PAUSED     →  pause()               →  RUNNING
    PAUSED     →  reset()               →  IDLE
    COMPLETED  →  reset()               →  IDLE
    RUNNING    →  (steps exhausted)     →  COMPLETED

Anything else (start while RUNNING/PAUSED, reset while RUNNING, pause
while IDLE, …) is ignored and returns False.

Pacing:
  Every step boundary is a suspension point.  Status and speed are
  plain attributes read fresh at each boundary, so a pause / reset /
  speed change issued between two steps applies before the next one.
  Drive the player with tick() from a timer or poll loop, or hand the
  thread over to run().

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from algorithms.step import SortStep, StepKind, apply_step


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlayerState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# Speed (1 = slowest, 100 = fastest)
# ---------------------------------------------------------------------------
DEFAULT_SPEED      = 50
MIN_SPEED          = 1
MAX_SPEED          = 100
MIN_DELAY_MS       = 8
PAUSE_POLL_SECONDS = 0.1


def clamp_speed(speed: float) -> int:
    return int(max(MIN_SPEED, min(MAX_SPEED, speed)))


def delay_for_speed(speed: float) -> int:
    """Milliseconds between two steps: max(8, 105 - speed)."""
    return max(MIN_DELAY_MS, 105 - clamp_speed(speed))


# ---------------------------------------------------------------------------
# Read-only view handed to observers
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlayerSnapshot:
    working_array:       Tuple[Any, ...]
    highlighted_indices: Tuple[int, ...]
    highlight_kind:      Optional[StepKind]
    status:              PlayerState
    current_step_index:  int
    total_steps:         int
    speed:               int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":              list(self.working_array),
            "highlightedIndices": list(self.highlighted_indices),
            "highlightType":      self.highlight_kind.value if self.highlight_kind else "",
            "status":             self.status.value,
            "currentStep":        self.current_step_index,
            "totalSteps":         self.total_steps,
            "speed":              self.speed,
        }


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------
class Player:
    """
    Attributes:
        state          : Current PlayerState.
        current_idx    : Number of steps applied so far (= index of the next one).
        highlighted    : Indices of the most recently applied step.
        highlight_kind : Kind of the most recently applied step.
        on_step        : Optional callback(PlayerSnapshot) fired after every
                         applied step and on completion.
    """

    def __init__(
        self,
        array: Sequence[Any],
        speed: float = DEFAULT_SPEED,
        on_step: Optional[Callable[[PlayerSnapshot], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._array:         List[Any]          = list(array)
        self._steps:         List[SortStep]     = []
        self.current_idx:    int                = 0
        self.state:          PlayerState        = PlayerState.IDLE
        self.speed:          int                = clamp_speed(speed)
        self.highlighted:    Tuple[int, ...]    = ()
        self.highlight_kind: Optional[StepKind] = None
        self.on_step:        Optional[Callable[[PlayerSnapshot], None]] = on_step

        self._clock    = clock
        self._next_due = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, steps: Sequence[SortStep]) -> bool:
        """Begin replaying `steps` against the current working array."""
        if self.is_active:
            logger.debug("start ignored: playback already %s", self.state.value)
            return False
        self._steps       = list(steps)
        self.current_idx  = 0
        self._clear_highlight()
        self.state        = PlayerState.RUNNING
        self._next_due    = self._clock()
        logger.debug("playback started with %d steps", len(self._steps))
        return True

    def pause(self) -> bool:
        """Toggle RUNNING ↔ PAUSED."""
        if self.state == PlayerState.RUNNING:
            self.state = PlayerState.PAUSED
        elif self.state == PlayerState.PAUSED:
            self.state     = PlayerState.RUNNING
            self._next_due = self._clock()
        else:
            logger.debug("pause ignored: player is %s", self.state.value)
            return False
        logger.debug("playback %s at step %d", self.state.value, self.current_idx)
        return True

    def reset(self) -> bool:
        """
        Cancel the playback and go back to IDLE.

        Blocked while RUNNING; pause first.  The working array keeps
        whatever the last applied step left in it.
        """
        if self.state == PlayerState.RUNNING:
            logger.debug("reset ignored: pause the playback first")
            return False
        self._steps      = []
        self.current_idx = 0
        self._clear_highlight()
        self.state       = PlayerState.IDLE
        return True

    def load(self, array: Sequence[Any]) -> bool:
        """Swap in a new working array (cancels any paused playback)."""
        if self.state == PlayerState.RUNNING:
            logger.debug("load ignored: playback is running")
            return False
        self.reset()
        self._array = list(array)
        return True

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def advance(self) -> bool:
        """
        Apply exactly one step if RUNNING.  Returns True if a step was
        applied.  Once every step is consumed the next call completes
        the playback and returns False.
        """
        if self.state != PlayerState.RUNNING:
            return False
        if self.current_idx >= len(self._steps):
            self._complete()
            return False

        step = self._steps[self.current_idx]
        self.highlighted    = step.indices
        self.highlight_kind = step.kind
        apply_step(self._array, step)
        self.current_idx += 1
        self._notify()
        return True

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 10 ms, or on every UI poll).  If
        RUNNING and the inter-step delay has elapsed, applies one step.
        Returns True if a step was taken.
        """
        if self.state != PlayerState.RUNNING:
            return False
        now = self._clock() if now is None else now
        if now < self._next_due:
            return False
        applied = self.advance()
        self._next_due = now + self.delay_seconds
        return applied

    def run(self, sleep: Callable[[float], None] = time.sleep) -> PlayerSnapshot:
        """
        Blocking driver: apply steps with the current delay between them
        until the playback completes or is reset.  While PAUSED it polls
        every PAUSE_POLL_SECONDS without consuming steps.
        """
        while self.state in (PlayerState.RUNNING, PlayerState.PAUSED):
            if self.state == PlayerState.PAUSED:
                sleep(PAUSE_POLL_SECONDS)
                continue
            if self.advance():
                sleep(self.delay_seconds)
        return self.snapshot()

    def jump_to_end(self) -> None:
        """Apply every remaining step without pacing."""
        while self.state == PlayerState.RUNNING:
            self.advance()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: float) -> None:
        self.speed = clamp_speed(speed)

    @property
    def delay_ms(self) -> int:
        return delay_for_speed(self.speed)

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def working_array(self) -> List[Any]:
        return list(self._array)

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def is_active(self) -> bool:
        return self.state in (PlayerState.RUNNING, PlayerState.PAUSED)

    @property
    def is_running(self) -> bool:
        return self.state == PlayerState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state == PlayerState.PAUSED

    @property
    def is_finished(self) -> bool:
        return self.state == PlayerState.COMPLETED

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            working_array=tuple(self._array),
            highlighted_indices=tuple(self.highlighted),
            highlight_kind=self.highlight_kind,
            status=self.state,
            current_step_index=self.current_idx,
            total_steps=len(self._steps),
            speed=self.speed,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _complete(self) -> None:
        self.state          = PlayerState.COMPLETED
        self.highlighted    = tuple(range(len(self._array)))
        self.highlight_kind = StepKind.SORTED
        logger.debug("playback completed after %d steps", self.current_idx)
        self._notify()

    def _clear_highlight(self) -> None:
        self.highlighted    = ()
        self.highlight_kind = None

    def _notify(self) -> None:
        if self.on_step:
            self.on_step(self.snapshot())


def create_player(
    array: Sequence[Any],
    speed: float = DEFAULT_SPEED,
    on_step: Optional[Callable[[PlayerSnapshot], None]] = None,
) -> Player:
    """Factory for a fresh IDLE player over a copy of `array`."""
    return Player(array, speed=speed, on_step=on_step)
