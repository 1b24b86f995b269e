"""Pagination and Name Filtering — offsets, windows, and wildcard translation."""

from jwt_pizza.core.pagination import ANY_MATCH, page_offset, to_like_pattern, trim_window


# ─── to_like_pattern ─────────────────────────────────────────────

def test_star_becomes_percent():
    assert to_like_pattern("pizza*") == "pizza%"


def test_every_star_translated():
    assert to_like_pattern("*za*") == "%za%"


def test_missing_filter_matches_everything():
    assert to_like_pattern(None) == ANY_MATCH
    assert to_like_pattern("") == ANY_MATCH


def test_like_wildcards_pass_through_unescaped():
    assert to_like_pattern("50%_off") == "50%_off"


# ─── page_offset ─────────────────────────────────────────────────

def test_first_page_starts_at_zero():
    assert page_offset(1, 10) == 0


def test_third_page_offset():
    assert page_offset(3, 10) == 20


def test_pages_below_first_are_floored():
    assert page_offset(0, 10) == 0
    assert page_offset(-4, 10) == 0
    assert page_offset(None, 10) == 0


def test_zero_based_pages():
    assert page_offset(0, 3, first_page=0) == 0
    assert page_offset(2, 3, first_page=0) == 6


# ─── trim_window ─────────────────────────────────────────────────

def test_extra_row_means_more():
    rows, more = trim_window([1, 2, 3, 4], 3)
    assert rows == [1, 2, 3]
    assert more is True


def test_exact_fit_means_no_more():
    rows, more = trim_window([1, 2, 3], 3)
    assert rows == [1, 2, 3]
    assert more is False


def test_empty_window():
    assert trim_window([], 5) == ([], False)
