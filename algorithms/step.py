"""
step.py — Sorting Step Vocabulary
==================================
Every sorting algorithm is simulated to completion and emits a list of
SortStep objects.  A SortStep is one atomic event the player replays:

    • compare   – two positions are being compared
    • swap      – two positions exchange their values
    • set       – one or more positions are overwritten with new values
    • highlight – a region is of interest (pivot, heap root, merge range, …)
    • sorted    – a region has reached its final position

Design decisions:
  - SortStep is a frozen dataclass.  The generator is the only writer;
    the player / recorder are pure readers.
  - Arity is checked on construction.  A malformed step is a generator
    bug, so it raises StepContractError straight away instead of being
    skipped at replay time.
  - Only swap and set touch array data.  apply_step() is the one place
    that knows how, so the player, the recorder and the tests all agree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, MutableSequence, Sequence, Tuple


class StepKind(Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    SET       = "set"
    HIGHLIGHT = "highlight"
    SORTED    = "sorted"


# kinds that must carry exactly two indices
_PAIRWISE = (StepKind.COMPARE, StepKind.SWAP)


class StepContractError(ValueError):
    """Raised when a generator tries to build a malformed step."""


@dataclass(frozen=True)
class SortStep:
    """
    Attributes:
        kind    : StepKind tag.
        indices : Array positions this step is about (0-based).
        values  : Replacement values, parallel to `indices`.  Only for SET.
    """

    kind:    StepKind
    indices: Tuple[int, ...]
    values:  Tuple[Any, ...] = ()

    def __post_init__(self):
        # accept lists from callers but store tuples so the step stays hashable
        object.__setattr__(self, "indices", tuple(self.indices))
        object.__setattr__(self, "values", tuple(self.values))

        if not isinstance(self.kind, StepKind):
            raise StepContractError(f"Unknown step kind: {self.kind!r}")
        if any(i < 0 for i in self.indices):
            raise StepContractError(f"{self.kind.value} step has a negative index: {self.indices}")

        if self.kind in _PAIRWISE:
            if len(self.indices) != 2:
                raise StepContractError(
                    f"{self.kind.value} step needs exactly two indices, got {len(self.indices)}"
                )
        elif not self.indices:
            raise StepContractError(f"{self.kind.value} step needs at least one index")

        if self.kind is StepKind.SET:
            if len(self.values) != len(self.indices):
                raise StepContractError(
                    f"set step has {len(self.indices)} indices but {len(self.values)} values"
                )
        elif self.values:
            raise StepContractError(f"{self.kind.value} step cannot carry values")

    # -- wire format --
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind.value, "indices": list(self.indices)}
        if self.kind is StepKind.SET:
            data["values"] = list(self.values)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SortStep":
        try:
            kind = StepKind(data["type"])
        except (KeyError, ValueError) as exc:
            raise StepContractError(f"Bad step type in {data!r}") from exc
        return cls(kind, tuple(data.get("indices", ())), tuple(data.get("values", ())))


# ---------------------------------------------------------------------------
# Constructors — keep generator code close to the pseudocode
# ---------------------------------------------------------------------------
def compare(i: int, j: int) -> SortStep:
    return SortStep(StepKind.COMPARE, (i, j))


def swap(i: int, j: int) -> SortStep:
    return SortStep(StepKind.SWAP, (i, j))


def set_values(indices: Sequence[int], values: Sequence[Any]) -> SortStep:
    return SortStep(StepKind.SET, tuple(indices), tuple(values))


def write(index: int, value: Any) -> SortStep:
    return SortStep(StepKind.SET, (index,), (value,))


def highlight(*indices: int) -> SortStep:
    return SortStep(StepKind.HIGHLIGHT, indices)


def sorted_(*indices: int) -> SortStep:
    return SortStep(StepKind.SORTED, indices)


# ---------------------------------------------------------------------------
# Builder so algorithms don't have to juggle the list themselves
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Append-only collector used inside a generator.

    Usage:
        sb = StepBuilder()
        sb.compare(j, j + 1)
        sb.swap(j, j + 1)
        sb.sorted(n - 1)
        return sb.build()
    """

    def __init__(self):
        self.steps: List[SortStep] = []

    def compare(self, i: int, j: int) -> None:
        self.steps.append(compare(i, j))

    def swap(self, i: int, j: int) -> None:
        self.steps.append(swap(i, j))

    def write(self, index: int, value: Any) -> None:
        self.steps.append(write(index, value))

    def highlight(self, *indices: int) -> None:
        self.steps.append(highlight(*indices))

    def highlight_range(self, start: int, stop: int) -> None:
        self.steps.append(highlight(*range(start, stop)))

    def sorted(self, *indices: int) -> None:
        self.steps.append(sorted_(*indices))

    def sorted_range(self, start: int, stop: int) -> None:
        self.steps.append(sorted_(*range(start, stop)))

    def build(self) -> List[SortStep]:
        return list(self.steps)


# ---------------------------------------------------------------------------
# Replay helpers
# ---------------------------------------------------------------------------
def apply_step(array: MutableSequence[Any], step: SortStep) -> None:
    """Mutate `array` in place for swap / set; every other kind is a no-op."""
    if step.kind is StepKind.SWAP:
        i, j = step.indices
        array[i], array[j] = array[j], array[i]
    elif step.kind is StepKind.SET:
        for index, value in zip(step.indices, step.values):
            array[index] = value


def replay(array: Iterable[Any], steps: Iterable[SortStep]) -> List[Any]:
    """Return a fresh list with every step applied in order."""
    out = list(array)
    for step in steps:
        apply_step(out, step)
    return out


def trivial_steps(n: int) -> List[SortStep]:
    """Shared answer for arrays too small to sort: [] for 0, one sorted(0) for 1."""
    if n == 0:
        return []
    return [sorted_(0)]
