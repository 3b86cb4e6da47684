"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot is always the last element of the range.

Events per partition(low, high):
  1. Pivot chosen                      →  HIGHLIGHT(high)
  2. Element vs. pivot                 →  COMPARE(j, high)
  3. Element ≤ pivot, boundary ≠ j     →  SWAP(i, j)
  4. Pivot moved behind the boundary   →  SWAP(i+1, high)  (skipped if in place)
  5. Pivot is final                    →  SORTED(i+1)

A one-element range is SORTED directly.  After the top-level call one
SORTED covers the whole array.
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",          # 0
    "    if low < high:",                       # 1
    "        p ← partition(arr, low, high)",    # 2
    "        quick_sort(arr, low, p-1)",        # 3
    "        quick_sort(arr, p+1, high)",       # 4
    "",                                         # 5
    "def partition(arr, low, high):",           # 6
    "    pivot ← arr[high]; i ← low - 1",       # 7
    "    for j in low .. high-1:",              # 8
    "        if arr[j] ≤ pivot:",               # 9
    "            i ← i + 1; swap(arr[i], arr[j])",  # 10
    "    swap(arr[i+1], arr[high])",            # 11
    "    return i + 1",                         # 12
]


def quick_sort(array: Sequence[int]) -> List[SortStep]:
    """Simulate Lomuto quick sort and return its step list."""
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()

    def partition(low: int, high: int) -> int:
        pivot = arr[high]
        sb.highlight(high)

        i = low - 1
        for j in range(low, high):
            sb.compare(j, high)
            if arr[j] <= pivot:
                i += 1
                if i != j:
                    sb.swap(i, j)
                    arr[i], arr[j] = arr[j], arr[i]

        if i + 1 != high:
            sb.swap(i + 1, high)
            arr[i + 1], arr[high] = arr[high], arr[i + 1]

        sb.sorted(i + 1)
        return i + 1

    def sort(low: int, high: int) -> None:
        if low < high:
            p = partition(low, high)
            sort(low, p - 1)
            sort(p + 1, high)
        elif low == high:
            sb.sorted(low)

    sort(0, n - 1)
    sb.sorted_range(0, n)
    return sb.build()
