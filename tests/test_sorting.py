import random

import pytest

from adsort.ad import Ad
from adsort.sorting import merge_sort, quick_sort

SORTERS = [merge_sort, quick_sort]


def _ads(views):
    return [Ad(views=count, title=f"ad{index}") for index, count in enumerate(views)]


def test_empty_input():
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert merge_sort(_ads([])) == []
    assert quick_sort(_ads([])) == []


@pytest.mark.parametrize("sorter", SORTERS)
def test_single_item(sorter):
    ads = _ads([5])
    assert sorter(ads) == ads


@pytest.mark.parametrize("sorter", SORTERS)
def test_sorts_ascending_by_views(sorter):
    rng = random.Random(1234)
    ads = _ads([rng.randint(0, 50) for _ in range(200)])
    result = sorter(ads)
    assert [ad.views for ad in result] == sorted(ad.views for ad in ads)


@pytest.mark.parametrize("sorter", SORTERS)
def test_result_is_permutation(sorter):
    rng = random.Random(99)
    ads = _ads([rng.randint(0, 10) for _ in range(100)])
    result = sorter(ads)
    assert sorted(ad.title for ad in result) == sorted(ad.title for ad in ads)


@pytest.mark.parametrize("sorter", SORTERS)
def test_input_is_not_modified(sorter):
    ads = _ads([3, 1, 2])
    before = list(ads)
    sorter(ads)
    assert ads == before


@pytest.mark.parametrize("sorter", SORTERS)
def test_accepts_iterables(sorter):
    result = sorter(iter(_ads([9, 4, 7])))
    assert [ad.views for ad in result] == [4, 7, 9]


def test_merge_sort_is_stable():
    ads = _ads([2, 1, 2, 1, 2])
    result = merge_sort(ads)
    assert [ad.title for ad in result] == ["ad1", "ad3", "ad0", "ad2", "ad4"]


def test_quick_sort_handles_long_sorted_input():
    ads = _ads(range(5000))
    result = quick_sort(ads)
    assert [ad.views for ad in result] == list(range(5000))


def test_quick_sort_handles_all_equal_views():
    ads = _ads([7] * 3000)
    result = quick_sort(ads)
    assert all(ad.views == 7 for ad in result)
    assert len(result) == 3000