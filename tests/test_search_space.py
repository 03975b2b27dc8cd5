import pytest

from dsakit.search_space import (
    aggressive_cows,
    allocate_pages,
    closest_elements,
    eko_saw_height,
    exponential_search,
    k_diff_pairs,
    k_diff_pairs_binary,
    lower_bound,
    painters_partition,
    prata_min_time,
    unbounded_search,
)

CLOSEST = [12, 16, 22, 30, 35, 39, 42, 45, 48, 50, 53, 55, 56]
SEARCH = [3, 4, 5, 6, 11, 13, 15, 56, 70]


def _distinct_pairs(nums, k):
    values = set(nums)
    if k == 0:
        return len({v for v in values if list(nums).count(v) > 1})
    return len({v for v in values if v + k in values})


@pytest.mark.parametrize(
    "nums,k",
    [([1, 1, 3, 4, 5], 2), ([3, 1, 4, 1, 5], 2), ([1, 2, 3, 4, 5], 1), ([1, 3, 1, 5, 4], 0)],
)
def test_k_diff_pairs_agree(nums, k):
    expected = _distinct_pairs(nums, k)
    assert k_diff_pairs(list(nums), k) == expected
    assert k_diff_pairs_binary(list(nums), k) == expected


@pytest.mark.parametrize("func", [k_diff_pairs, k_diff_pairs_binary])
def test_k_diff_pairs_negative_k(func):
    with pytest.raises(ValueError):
        func([1, 2, 3], -1)


def test_closest_elements_window():
    result = closest_elements(CLOSEST, 4, 35)
    assert len(result) == 4
    assert 35 in result
    start = CLOSEST.index(result[0])
    assert CLOSEST[start:start + 4] == result


def test_closest_elements_outside_range():
    assert closest_elements(CLOSEST, 3, 0) == CLOSEST[:3]
    assert closest_elements(CLOSEST, 3, 1000) == CLOSEST[-3:]


def test_closest_elements_k_larger_than_array():
    assert closest_elements([1, 2], 5, 1) == [1, 2]


def test_closest_elements_negative_k():
    with pytest.raises(ValueError):
        closest_elements(CLOSEST, -1, 35)


def test_lower_bound_found():
    assert CLOSEST[lower_bound(CLOSEST, 35)] == 35


def test_lower_bound_between():
    idx = lower_bound(CLOSEST, 36)
    assert CLOSEST[idx] < 36 < CLOSEST[idx + 1]


def test_lower_bound_below_all():
    assert lower_bound(CLOSEST, 1) == -1


@pytest.mark.parametrize("target", SEARCH)
def test_exponential_search_finds_every_element(target):
    assert SEARCH[exponential_search(SEARCH, target)] == target


@pytest.mark.parametrize("target", [0, 7, 100])
def test_exponential_search_missing(target):
    assert exponential_search(SEARCH, target) == -1


def test_exponential_search_empty():
    assert exponential_search([], 3) == -1


@pytest.mark.parametrize("target", SEARCH)
def test_unbounded_search_list(target):
    assert SEARCH[unbounded_search(SEARCH, target)] == target


def test_unbounded_search_missing():
    assert unbounded_search(SEARCH, 12) == -1
    assert unbounded_search(SEARCH, 500) == -1
    assert unbounded_search([], 1) == -1


class _Evens:
    def __getitem__(self, index):
        return 2 * index


def test_unbounded_search_infinite_sequence():
    evens = _Evens()
    idx = unbounded_search(evens, 1234)
    assert evens[idx] == 1234
    assert unbounded_search(evens, 1235) == -1


def test_allocate_pages_example():
    assert allocate_pages([12, 34, 67, 90], 2) == 113


def test_allocate_pages_bounds():
    pages = [12, 34, 67, 90]
    assert allocate_pages(pages, 1) == sum(pages)
    assert allocate_pages(pages, len(pages)) == max(pages)


def test_allocate_pages_too_many_students():
    assert allocate_pages([12, 34], 3) == -1


def test_allocate_pages_no_students():
    with pytest.raises(ValueError):
        allocate_pages([1, 2], 0)


def test_painters_partition_example():
    assert painters_partition([10, 20, 30, 40], 2) == 60


def test_painters_partition_bounds():
    boards = [10, 20, 30, 40]
    assert painters_partition(boards, 1) == sum(boards)
    assert painters_partition(boards, 10) == max(boards)


def test_painters_partition_monotonic():
    boards = [5, 10, 30, 20, 15]
    times = [painters_partition(boards, k) for k in range(1, 6)]
    assert times == sorted(times, reverse=True)


def test_painters_partition_no_painters():
    with pytest.raises(ValueError):
        painters_partition([1], 0)


def test_aggressive_cows_example():
    assert aggressive_cows([1, 2, 4, 8, 9], 3) == 3


def test_aggressive_cows_two_cows_span():
    stalls = [9, 1, 8, 4, 2]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_too_many():
    assert aggressive_cows([1, 2, 3], 4) == -1


@pytest.mark.parametrize("stalls,cows", [([1, 2], 0), ([], 2)])
def test_aggressive_cows_invalid(stalls, cows):
    with pytest.raises(ValueError):
        aggressive_cows(stalls, cows)


@pytest.mark.parametrize(
    "trees,wood", [([20, 15, 10, 17], 7), ([4, 42, 40, 26, 46], 20)]
)
def test_eko_height_is_highest_sufficient(trees, wood):
    height = eko_saw_height(trees, wood)

    def cut(h):
        return sum(max(t - h, 0) for t in trees)

    assert cut(height) >= wood
    assert cut(height + 1) < wood


def test_eko_not_enough_wood():
    assert eko_saw_height([1, 2], 10) == -1


def test_eko_invalid_wood():
    with pytest.raises(ValueError):
        eko_saw_height([5], 0)


def test_prata_scaling_ranks_scales_time():
    ranks = [1, 2, 3, 4]
    base = prata_min_time(ranks, 10)
    assert prata_min_time([r * 3 for r in ranks], 10) == base * 3


def test_prata_more_pratas_take_longer():
    ranks = [1, 2, 3, 4]
    times = [prata_min_time(ranks, p) for p in range(0, 12)]
    assert times == sorted(times)
    assert times[0] == 0


def test_prata_more_cooks_not_slower():
    assert prata_min_time([1, 2, 3, 4, 1], 10) <= prata_min_time([1, 2, 3, 4], 10)


@pytest.mark.parametrize("ranks", [[], [0, 1]])
def test_prata_invalid_ranks(ranks):
    with pytest.raises(ValueError):
        prata_min_time(ranks, 5)