"""
selection_sort.py — Selection Sort
===================================
For every position i, scan the unsorted tail for the minimum.

Events:
  1. Start of a scan           →  HIGHLIGHT(i)
  2. Candidate vs. minimum     →  COMPARE(min, j)
  3. New minimum found         →  HIGHLIGHT(min)
  4. Minimum not already at i  →  SWAP(i, min)
  5. Position settled          →  SORTED(i)
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                 # 0
    "    for i in 0 .. n-2:",                   # 1
    "        min ← i",                          # 2
    "        for j in i+1 .. n-1:",             # 3
    "            if arr[j] < arr[min]:",        # 4
    "                min ← j",                  # 5
    "        if min ≠ i: swap(arr[i], arr[min])",  # 6
    "        mark arr[i] sorted",               # 7
    "    mark arr[n-1] sorted",                 # 8
]


def selection_sort(array: Sequence[int]) -> List[SortStep]:
    """Simulate selection sort and return its step list."""
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()
    for i in range(n - 1):
        min_idx = i
        sb.highlight(i)

        for j in range(i + 1, n):
            sb.compare(min_idx, j)
            if arr[j] < arr[min_idx]:
                min_idx = j
                sb.highlight(min_idx)

        if min_idx != i:
            sb.swap(i, min_idx)
            arr[i], arr[min_idx] = arr[min_idx], arr[i]

        sb.sorted(i)

    sb.sorted(n - 1)
    return sb.build()
