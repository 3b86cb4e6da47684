"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Splitting emits nothing; all events come from merge():

  1. Range about to be merged          →  HIGHLIGHT(left..right)
  2. Head of left vs. head of right    →  COMPARE(left+i, mid+1+j)
  3. Winner copied to the output slot  →  SET(k, value)
  4. Leftovers drained (no compares)   →  SET(k, value)
  5. Range merged                      →  SORTED(left..right)

After the top-level call one SORTED covers the whole array.

Compare indices point at the ORIGINAL slots of the two runs, not at the
output cursor, so the UI lights up the values being weighed against
each other.
"""

from typing import List, Sequence

from algorithms.step import SortStep, StepBuilder, trivial_steps


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",        # 0
    "    if left < right:",                     # 1
    "        mid ← (left + right) // 2",        # 2
    "        merge_sort(arr, left, mid)",       # 3
    "        merge_sort(arr, mid+1, right)",    # 4
    "        merge(arr, left, mid, right)",     # 5
    "",                                         # 6
    "def merge(arr, left, mid, right):",        # 7
    "    L ← arr[left..mid]; R ← arr[mid+1..right]",  # 8
    "    while L and R not empty:",             # 9
    "        arr[k++] ← smaller head (L on ties)",    # 10
    "    copy the rest of L, then of R",        # 11
]


def merge_sort(array: Sequence[int]) -> List[SortStep]:
    """Simulate top-down merge sort and return its step list."""
    arr = list(array)
    n   = len(arr)
    if n < 2:
        return trivial_steps(n)

    sb = StepBuilder()

    def merge(left: int, mid: int, right: int) -> None:
        left_run  = arr[left:mid + 1]
        right_run = arr[mid + 1:right + 1]
        i = j = 0
        k = left

        sb.highlight_range(left, right + 1)

        while i < len(left_run) and j < len(right_run):
            sb.compare(left + i, mid + 1 + j)
            if left_run[i] <= right_run[j]:
                arr[k] = left_run[i]
                i += 1
            else:
                arr[k] = right_run[j]
                j += 1
            sb.write(k, arr[k])
            k += 1

        while i < len(left_run):
            arr[k] = left_run[i]
            sb.write(k, arr[k])
            i += 1
            k += 1

        while j < len(right_run):
            arr[k] = right_run[j]
            sb.write(k, arr[k])
            j += 1
            k += 1

        sb.sorted_range(left, right + 1)

    def sort(left: int, right: int) -> None:
        if left < right:
            mid = (left + right) // 2
            sort(left, mid)
            sort(mid + 1, right)
            merge(left, mid, right)

    sort(0, n - 1)
    sb.sorted_range(0, n)
    return sb.build()
