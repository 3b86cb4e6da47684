"""Tests for the six step generators and the registry."""

import math
import random

import pytest

from algorithms import REGISTRY, generate_steps, get_algorithm, list_algorithms
from algorithms.bubble_sort import bubble_sort
from algorithms.heap_sort import heap_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort
from algorithms.selection_sort import selection_sort
from algorithms.step import StepKind, compare, highlight, replay, sorted_, swap, write


ALGO_KEYS = [
    "bubble-sort",
    "selection-sort",
    "insertion-sort",
    "merge-sort",
    "quick-sort",
    "heap-sort",
]

FIXED_INPUTS = [
    [],
    [7],
    [4, 4, 4, 4],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [5, 3, 8, 1],
    [2, 1],
    [3, 1, 2, 3, 1, 2],
]


def _random_inputs():
    rng = random.Random(1234)
    out = []
    for size in (2, 3, 7, 16, 31, 50, 100):
        out.append([rng.randrange(10, 310) for _ in range(size)])
        out.append([rng.randrange(0, 4) for _ in range(size)])   # lots of duplicates
    return out


ALL_INPUTS = FIXED_INPUTS + _random_inputs()


def _count(steps, kind):
    return sum(1 for s in steps if s.kind is kind)


# ---------------------------------------------------------------------------
# Exact sequences on small inputs
# ---------------------------------------------------------------------------
class TestExactSequences:
    def test_bubble_sort(self):
        steps = bubble_sort([5, 3, 8, 1])
        assert steps == [
            compare(0, 1), swap(0, 1), compare(1, 2), compare(2, 3), swap(2, 3), sorted_(3),
            compare(0, 1), compare(1, 2), swap(1, 2), sorted_(2),
            compare(0, 1), swap(0, 1), sorted_(1),
        ]
        assert replay([5, 3, 8, 1], steps) == [1, 3, 5, 8]

    def test_bubble_sort_early_exit(self):
        assert bubble_sort([1, 2, 3]) == [
            compare(0, 1), compare(1, 2), sorted_(2), sorted_(0), sorted_(1),
        ]

    def test_selection_sort(self):
        assert selection_sort([3, 1, 2]) == [
            highlight(0), compare(0, 1), highlight(1), compare(1, 2), swap(0, 1), sorted_(0),
            highlight(1), compare(1, 2), highlight(2), swap(1, 2), sorted_(1),
            sorted_(2),
        ]

    def test_insertion_sort(self):
        assert insertion_sort([3, 1, 2]) == [
            sorted_(0),
            highlight(1), compare(0, 1), swap(0, 1), write(0, 1), sorted_(0), sorted_(1),
            highlight(2), compare(1, 2), swap(1, 2), compare(0, 2), write(1, 2),
            sorted_(0), sorted_(1), sorted_(2),
        ]

    def test_insertion_sort_already_sorted(self):
        steps = insertion_sort([1, 2, 3])
        assert _count(steps, StepKind.SWAP) == 0
        # the closing pass marks every index exactly once
        assert steps[-3:] == [sorted_(0), sorted_(1), sorted_(2)]
        assert {i for s in steps if s.kind is StepKind.SORTED for i in s.indices} == {0, 1, 2}

    def test_merge_sort(self):
        assert merge_sort([3, 1, 2]) == [
            highlight(0, 1), compare(0, 1), write(0, 1), write(1, 3), sorted_(0, 1),
            highlight(0, 1, 2), compare(0, 2), write(0, 1), compare(1, 2), write(1, 2), write(2, 3),
            sorted_(0, 1, 2),
            sorted_(0, 1, 2),
        ]

    def test_quick_sort(self):
        assert quick_sort([3, 1, 2]) == [
            highlight(2), compare(0, 2), compare(1, 2), swap(0, 1), swap(1, 2), sorted_(1),
            sorted_(0), sorted_(2),
            sorted_(0, 1, 2),
        ]

    def test_heap_sort(self):
        assert heap_sort([1, 2, 3]) == [
            highlight(0), compare(1, 0), compare(2, 1), swap(0, 2), highlight(2),
            highlight(0, 1, 2),
            swap(0, 2), sorted_(2), highlight(0), compare(1, 0), swap(0, 1), highlight(1),
            swap(0, 1), sorted_(1), highlight(0),
            sorted_(0),
            sorted_(0, 1, 2),
        ]


# ---------------------------------------------------------------------------
# Properties shared by every generator
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key", ALGO_KEYS)
class TestGeneratorProperties:
    @pytest.mark.parametrize("array", ALL_INPUTS)
    def test_replay_sorts(self, key, array):
        """Replaying the steps on a copy of the input yields sorted(input)."""
        steps = generate_steps(key, array)
        assert replay(array, steps) == sorted(array)

    @pytest.mark.parametrize("array", ALL_INPUTS)
    def test_indices_in_bounds(self, key, array):
        for step in generate_steps(key, array):
            assert all(0 <= i < len(array) for i in step.indices)

    def test_empty_array(self, key):
        assert generate_steps(key, []) == []

    def test_single_element(self, key):
        assert generate_steps(key, [42]) == [sorted_(0)]

    def test_deterministic(self, key):
        array = [9, 4, 7, 1, 4, 8, 2]
        assert generate_steps(key, array) == generate_steps(key, list(array))

    def test_input_not_mutated(self, key):
        array = [9, 4, 7, 1, 4, 8, 2]
        before = list(array)
        generate_steps(key, array)
        assert array == before

    def test_accepts_tuples(self, key):
        assert replay((3, 2, 1), generate_steps(key, (3, 2, 1))) == [1, 2, 3]

    def test_sorted_output_is_a_fixed_point(self, key):
        """Steps regenerated from the sorted result leave it unchanged.

        Swap steps carry positions, not values, so a sequence derived from
        the unsorted input is not replayed here; merge sort's value-carrying
        sequence is checked on its own below.
        """
        result = replay([6, 2, 9, 2, 5], generate_steps(key, [6, 2, 9, 2, 5]))
        again = replay(result, generate_steps(key, result))
        assert again == result == sorted(result)

    def test_sequence_is_a_list(self, key):
        steps = generate_steps(key, [2, 1])
        assert isinstance(steps, list)


# ---------------------------------------------------------------------------
# Compare-count bounds
# ---------------------------------------------------------------------------
class TestCompareCounts:
    @pytest.mark.parametrize("key", ["bubble-sort", "selection-sort", "insertion-sort"])
    @pytest.mark.parametrize("n", [2, 5, 8, 20])
    def test_quadratic_sorts_hit_triangular_number(self, key, n):
        steps = generate_steps(key, list(range(n, 0, -1)))
        assert _count(steps, StepKind.COMPARE) == n * (n - 1) // 2

    def test_selection_sort_always_triangular(self):
        steps = selection_sort([1, 2, 3, 4, 5, 6])
        assert _count(steps, StepKind.COMPARE) == 15

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("n", [2, 3, 10, 33, 64, 100])
    def test_merge_sort_compare_bound(self, seed, n):
        rng = random.Random(seed)
        array = [rng.randrange(0, 1000) for _ in range(n)]
        steps = merge_sort(array)
        assert _count(steps, StepKind.COMPARE) <= n * math.ceil(math.log2(n))

    def test_merge_sort_writes_every_level(self):
        steps = merge_sort(list(range(8, 0, -1)))
        assert _count(steps, StepKind.SET) == 8 * 3

    @pytest.mark.parametrize("array", [[2, 1], [6, 2, 9, 2, 5], [5, 4, 3, 2, 1], [3, 1, 2, 3, 1, 2]])
    def test_merge_sort_steps_replay_onto_sorted_input(self, array):
        """Merge sort only writes values, so its steps also land sorted(A) on sorted(A)."""
        steps = merge_sort(array)
        assert replay(sorted(array), steps) == sorted(array)

    def test_swap_steps_do_not_replay_onto_sorted_input(self):
        assert replay([1, 2], bubble_sort([2, 1])) == [2, 1]

    def test_bubble_sort_swaps_match_inversions(self):
        array = [4, 1, 3, 2]
        steps = bubble_sort(array)
        inversions = sum(1 for i in range(4) for j in range(i + 1, 4) if array[i] > array[j])
        assert _count(steps, StepKind.SWAP) == inversions

    def test_quick_sort_skips_self_swaps(self):
        steps = quick_sort([1, 2, 3, 4])
        assert _count(steps, StepKind.SWAP) == 0


# ---------------------------------------------------------------------------
# Registry & dispatcher
# ---------------------------------------------------------------------------
class TestRegistry:
    def test_keys_in_order(self):
        assert [a.key for a in list_algorithms()] == ALGO_KEYS
        assert list(REGISTRY) == ALGO_KEYS

    def test_unknown_key_yields_empty_sequence(self):
        assert generate_steps("bogo-sort", [3, 2, 1]) == []
        assert generate_steps("", [3, 2, 1]) == []

    def test_get_algorithm(self):
        assert get_algorithm("heap-sort").label == "Heap Sort"
        assert get_algorithm("nope") is None

    @pytest.mark.parametrize("key, best, average, worst, space", [
        ("bubble-sort",    "O(n)",       "O(n²)",      "O(n²)",      "O(1)"),
        ("selection-sort", "O(n²)",      "O(n²)",      "O(n²)",      "O(1)"),
        ("insertion-sort", "O(n)",       "O(n²)",      "O(n²)",      "O(1)"),
        ("merge-sort",     "O(n log n)", "O(n log n)", "O(n log n)", "O(n)"),
        ("quick-sort",     "O(n log n)", "O(n log n)", "O(n²)",      "O(log n)"),
        ("heap-sort",      "O(n log n)", "O(n log n)", "O(n log n)", "O(1)"),
    ])
    def test_complexities(self, key, best, average, worst, space):
        card = get_algorithm(key).to_dict()
        assert card["id"] == key
        assert card["timeComplexity"] == {"best": best, "average": average, "worst": worst}
        assert card["spaceComplexity"] == space

    def test_every_card_has_pseudocode(self):
        for info in list_algorithms():
            assert info.pseudocode
            assert info.to_dict()["pseudocode"] == info.pseudocode
