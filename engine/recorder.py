"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete sorting run, then computes the metrics the UI shows
in its analytics card and in Comparison Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="merge-sort", array=[5, 3, 8, 1])
    rec.run_to_completion()          # replays every step
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot

Comparison Mode:
    The UI holds two Recorders (one per algorithm), runs both on the SAME
    array, then calls compare(rec1, rec2) → ComparisonResult.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import SortStep, StepKind
from engine.player import Player


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    array_size:   int   = 0
    comparisons:  int   = 0
    swaps:        int   = 0
    writes:       int   = 0          # number of SET steps
    highlights:   int   = 0
    sorted_marks: int   = 0
    total_steps:  int   = 0
    wall_time_ms: float = 0.0        # generation + replay, wall clock
    is_sorted:    bool  = False      # replay result matches sorted(input)

    @property
    def moves(self) -> int:
        return self.swaps + self.writes


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived: label of the algorithm with the lower count, or "tie"
    winner_comparisons: str = ""
    winner_moves:       str = ""
    winner_steps:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":  asdict(self.left),
            "right": asdict(self.right),
            "winner_comparisons": self.winner_comparisons,
            "winner_moves":       self.winner_moves,
            "winner_steps":       self.winner_steps,
        }


def count_steps(steps: Sequence[SortStep]) -> Dict[StepKind, int]:
    counts = {kind: 0 for kind in StepKind}
    for s in steps:
        counts[s.kind] += 1
    return counts


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of SortSteps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        player  : The Player used for the replay.
    """

    def __init__(self):
        self.steps:   List[SortStep]       = []
        self.metrics: Optional[RunMetrics] = None
        self.player:  Optional[Player]     = None

        self._algo_info: Optional[AlgoInfo] = None
        self._array:     List[Any]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, array: Sequence[Any]) -> None:
        """Pick the algorithm and snapshot the input for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._array     = list(array)
        self.steps      = []
        self.metrics    = None
        self.player     = Player(self._array)

    def run_to_completion(self) -> RunMetrics:
        """Generate every step, replay them unpaced, compute metrics."""
        if self.player is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        self.steps = self._algo_info.fn(self._array)
        self.player.start(self.steps)
        self.player.jump_to_end()
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "array":    list(self._array),
            "result":   self.player.working_array if self.player else [],
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        counts = count_steps(self.steps)
        result = self.player.working_array if self.player else []

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            array_size=len(self._array),
            comparisons=counts[StepKind.COMPARE],
            swaps=counts[StepKind.SWAP],
            writes=counts[StepKind.SET],
            highlights=counts[StepKind.HIGHLIGHT],
            sorted_marks=counts[StepKind.SORTED],
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            is_sorted=result == sorted(self._array),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_moves=winner(l.moves, r.moves),
        winner_steps=winner(l.total_steps, r.total_steps),
    )
