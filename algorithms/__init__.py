"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm, generate_steps

REGISTRY is a dict:
    {
        "bubble-sort": AlgoInfo(key, label, fn, pseudocode, complexities, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the web layer both
consume it, so adding an algorithm is: write the generator, add one
entry here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from algorithms.step import SortStep

from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:          str                                        # registry key, e.g. "bubble-sort"
    label:        str                                        # human label, e.g. "Bubble Sort"
    fn:           Callable[[Sequence[int]], List[SortStep]]  # the step generator
    pseudocode:   List[str]                                  # lines for the side-panel
    time_best:    str = ""
    time_average: str = ""
    time_worst:   str = ""
    space:        str = ""
    description:  str = ""                                   # one-liner for the UI card

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape the browser UI consumes."""
        return {
            "id": self.key,
            "name": self.label,
            "timeComplexity": {
                "best": self.time_best,
                "average": self.time_average,
                "worst": self.time_worst,
            },
            "spaceComplexity": self.space,
            "description": self.description,
            "pseudocode": list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble-sort": AlgoInfo(
        key="bubble-sort", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Swaps adjacent out-of-order pairs. Stops early on a clean pass.",
    ),

    "selection-sort": AlgoInfo(
        key="selection-sort", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        time_best="O(n²)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Finds the minimum of the unsorted tail and moves it to the front.",
    ),

    "insertion-sort": AlgoInfo(
        key="insertion-sort", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)", space="O(1)",
        description="Shifts each key left into an ever-growing sorted prefix.",
    ),

    "merge-sort": AlgoInfo(
        key="merge-sort", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n log n)", space="O(n)",
        description="Splits in halves, then merges sorted runs through a buffer.",
    ),

    "quick-sort": AlgoInfo(
        key="quick-sort", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n²)", space="O(log n)",
        description="Partitions around the last element. Degrades on already-sorted input.",
    ),

    "heap-sort": AlgoInfo(
        key="heap-sort", label="Heap Sort", fn=_heap, pseudocode=_heap_pc,
        time_best="O(n log n)", time_average="O(n log n)", time_worst="O(n log n)", space="O(1)",
        description="Builds a max-heap, then peels the root off to the end.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def generate_steps(algo_key: str, array: Sequence[int]) -> List[SortStep]:
    """
    Dispatch to the generator registered under `algo_key`.

    An unknown key is not an error: it yields an empty step list, so the
    player simply completes straight away.
    """
    info = REGISTRY.get(algo_key)
    if info is None:
        return []
    return info.fn(array)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "generate_steps",
]
