"""Unit tests for page_numbers."""

import pytest

from pagemeta import ELLIPSIS, page_numbers


def test_below_threshold_lists_all_pages():
    assert page_numbers(1, 3, 5) == [1, 2, 3]


def test_exactly_at_threshold():
    assert page_numbers(3, 5, 5) == [1, 2, 3, 4, 5]


def test_no_pages():
    assert page_numbers(1, 0) == []


def test_middle_window():
    assert page_numbers(50, 100, 5) == [1, ELLIPSIS, 48, 49, 50, 51, 52, ELLIPSIS, 100]


def test_near_start():
    assert page_numbers(1, 10, 5) == [1, 2, 3, 4, 5, ELLIPSIS, 10]
    assert page_numbers(3, 10, 5) == [1, 2, 3, 4, 5, ELLIPSIS, 10]


def test_near_end():
    assert page_numbers(10, 10, 5) == [1, ELLIPSIS, 6, 7, 8, 9, 10]
    assert page_numbers(9, 10, 5) == [1, ELLIPSIS, 6, 7, 8, 9, 10]


def test_both_edge_corrections_apply():
    assert page_numbers(3, 6, 5) == [1, 2, 3, 4, 5, 6]


def test_start_correction_without_end_correction():
    assert page_numbers(4, 7, 5) == [1, 2, 3, 4, 5, ELLIPSIS, 7]
    assert page_numbers(5, 7, 5) == [1, ELLIPSIS, 3, 4, 5, 6, 7]


def test_wider_window():
    assert page_numbers(20, 40, 7) == [1, ELLIPSIS, 17, 18, 19, 20, 21, 22, 23, ELLIPSIS, 40]


def test_default_max_visible():
    assert page_numbers(50, 100) == page_numbers(50, 100, 5)


@pytest.mark.parametrize("current", [1, 2, 5, 17, 29, 30])
def test_first_and_last_always_present(current):
    pages = page_numbers(current, 30, 5)
    assert pages[0] == 1
    assert pages[-1] == 30
    assert current in pages
    numbers = [p for p in pages if p != ELLIPSIS]
    assert numbers == sorted(set(numbers))
