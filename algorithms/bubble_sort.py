"""
bubble_sort.py — Bubble Sort
=============================
Emits a step at every meaningful event:
  1. Compare adjacent pair  →  COMPARE
  2. Out of order           →  SWAP
  3. End of a pass          →  SORTED (largest unsorted value has bubbled up)
  4. Pass with no swaps     →  SORTED for everything left, then stop early

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can show them.
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                        # 0
    "    for i in 0 .. n-2:",                       # 1
    "        swapped ← false",                      # 2
    "        for j in 0 .. n-i-2:",                 # 3
    "            if arr[j] > arr[j+1]:",            # 4
    "                swap(arr[j], arr[j+1])",       # 5
    "                swapped ← true",               # 6
    "        mark arr[n-i-1] sorted",               # 7
    "        if not swapped: mark rest sorted; stop",  # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(array: Sequence[int]) -> List[SortStep]:
    """
    Simulate bubble sort on a private copy of `array`.

    Returns:
        List[SortStep] – every compare / swap / sorted event, in order.
    """
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()
    for i in range(n - 1):
        swapped = False

        for j in range(n - i - 1):
            sb.compare(j, j + 1)
            if arr[j] > arr[j + 1]:
                sb.swap(j, j + 1)
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True

        # the largest remaining value now sits at n-i-1
        sb.sorted(n - i - 1)

        if not swapped:
            for k in range(n - i - 1):
                sb.sorted(k)
            break

    return sb.build()
