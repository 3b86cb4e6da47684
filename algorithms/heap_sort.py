"""
heap_sort.py — Heap Sort
=========================
Phase 1 builds a max-heap bottom-up, phase 2 repeatedly moves the root
to the end of the shrinking heap.

heapify(size, i) events:
  1. Node under inspection        →  HIGHLIGHT(i)
  2. Left child vs. largest       →  COMPARE(left, largest)   (if it exists)
  3. Right child vs. largest      →  COMPARE(right, largest)  (if it exists)
  4. A child won                  →  SWAP(i, largest), then recurse there

Between the phases one HIGHLIGHT covers the whole heap.  Each extraction
is SWAP(0, i) + SORTED(i).  The run ends with SORTED(0) and one SORTED
over the whole array.
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                      # 0
    "    for i in n//2-1 down to 0:",           # 1
    "        heapify(arr, n, i)",               # 2
    "    for i in n-1 down to 1:",              # 3
    "        swap(arr[0], arr[i])",             # 4
    "        heapify(arr, i, 0)",               # 5
    "",                                         # 6
    "def heapify(arr, size, i):",               # 7
    "    largest ← i; l ← 2i+1; r ← 2i+2",      # 8
    "    if l < size and arr[l] > arr[largest]: largest ← l",  # 9
    "    if r < size and arr[r] > arr[largest]: largest ← r",  # 10
    "    if largest ≠ i:",                      # 11
    "        swap(arr[i], arr[largest])",       # 12
    "        heapify(arr, size, largest)",      # 13
]


def heap_sort(array: Sequence[int]) -> List[SortStep]:
    """Simulate heap sort and return its step list."""
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()

    def heapify(size: int, i: int) -> None:
        largest = i
        left    = 2 * i + 1
        right   = 2 * i + 2

        sb.highlight(i)

        if left < size:
            sb.compare(left, largest)
            if arr[left] > arr[largest]:
                largest = left

        if right < size:
            sb.compare(right, largest)
            if arr[right] > arr[largest]:
                largest = right

        if largest != i:
            sb.swap(i, largest)
            arr[i], arr[largest] = arr[largest], arr[i]
            heapify(size, largest)

    for i in range(n // 2 - 1, -1, -1):
        heapify(n, i)

    sb.highlight_range(0, n)

    for i in range(n - 1, 0, -1):
        sb.swap(0, i)
        arr[0], arr[i] = arr[i], arr[0]
        sb.sorted(i)
        heapify(i, 0)

    sb.sorted(0)
    sb.sorted_range(0, n)
    return sb.build()
