"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element (the "key") at a time.

Events:
  1. Prefix of length one          →  SORTED(0)
  2. Pick the key                  →  HIGHLIGHT(i)
  3. Predecessor bigger than key   →  COMPARE(j, i) then SWAP(j, j+1)
  4. Loop stopped on a comparison  →  the final COMPARE(j, i)
  5. Drop the key into place       →  SET(j+1, key)
  6. Prefix 0..i is ordered        →  SORTED(k) for every k ≤ i

Note on SWAP:
  Here SWAP stands for "shift the larger value one slot right", which is
  what the colour legend of the original visualizer expects.  The
  generator performs a plain shift internally.  Replaying the step as a
  real exchange carries the key down with it, so the closing SET writes
  the value that is already there and the final array is identical.
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                 # 0
    "    for i in 1 .. n-1:",                   # 1
    "        key ← arr[i]",                     # 2
    "        j ← i - 1",                        # 3
    "        while j ≥ 0 and arr[j] > key:",    # 4
    "            arr[j+1] ← arr[j]",            # 5
    "            j ← j - 1",                    # 6
    "        arr[j+1] ← key",                   # 7
    "        mark arr[0..i] sorted",            # 8
]


def insertion_sort(array: Sequence[int]) -> List[SortStep]:
    """Simulate insertion sort and return its step list."""
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()
    sb.sorted(0)

    for i in range(1, n):
        key = arr[i]
        j   = i - 1
        sb.highlight(i)

        while j >= 0 and arr[j] > key:
            sb.compare(j, i)
            sb.swap(j, j + 1)
            arr[j + 1] = arr[j]
            j -= 1

        # the loop ended on a failed comparison rather than running off the front
        if j >= 0:
            sb.compare(j, i)

        arr[j + 1] = key
        sb.write(j + 1, key)

        for k in range(i + 1):
            sb.sorted(k)

    return sb.build()
