from __future__ import annotations

import itertools

from launchpad.category import CategoryType
from launchpad.models import DDECategory
from launchpad.sorting import (
    Ordering,
    SortEntry,
    baseline_less_than,
    compare_sections,
    compare_transliterations,
    is_less,
    prefer_lowercase_lead,
    prefer_matching_display,
    resolve,
    section_letter,
    sort_items,
    transliterated_less_than,
)

from factories import make_item


def test_section_letter_uppercases_and_handles_empty():
    assert section_letter("apple") == "A"
    assert section_letter("") == ""
    # Multi-character uppercase expansions keep the original character
    assert section_letter("ßtraße") == "ß"


def test_compare_sections_orders_by_letter():
    a = SortEntry("banana", "Banana")
    b = SortEntry("cherry", "Cherry")
    assert compare_sections(a, b) is Ordering.LESS
    assert compare_sections(b, a) is Ordering.GREATER
    assert compare_sections(a, SortEntry("Berry", "Berry")) is Ordering.NOT_APPLICABLE


def test_compare_sections_empty_transliteration_sorts_first():
    empty = SortEntry("", "???")
    named = SortEntry("apple", "Apple")
    assert compare_sections(empty, named) is Ordering.LESS
    assert compare_sections(named, empty) is Ordering.GREATER


def test_prefer_matching_display_letter_led_first():
    latin = SortEntry("alpha", "Alpha")
    greek = SortEntry("alpha", "α-test")
    assert prefer_matching_display(latin, greek) is Ordering.LESS
    assert prefer_matching_display(greek, latin) is Ordering.GREATER


def test_prefer_matching_display_not_applicable_when_same_class():
    both_match = (SortEntry("apple", "apple pie"), SortEntry("Avocado", "Avocado"))
    neither = (SortEntry("alpha", "α"), SortEntry("ahh", "阿"))
    assert prefer_matching_display(*both_match) is Ordering.NOT_APPLICABLE
    assert prefer_matching_display(*neither) is Ordering.NOT_APPLICABLE


def test_prefer_lowercase_lead_inverts_ascii_case_order():
    lower = SortEntry("apple", "1")
    upper = SortEntry("Apple", "2")
    assert prefer_lowercase_lead(lower, upper) is Ordering.LESS
    assert prefer_lowercase_lead(upper, lower) is Ordering.GREATER
    assert prefer_lowercase_lead(lower, SortEntry("avocado", "3")) is Ordering.NOT_APPLICABLE


def test_prefer_lowercase_lead_skips_empty_section():
    assert prefer_lowercase_lead(SortEntry("", "x"), SortEntry("", "y")) is Ordering.NOT_APPLICABLE


def test_compare_transliterations_is_case_sensitive():
    assert compare_transliterations(SortEntry("Ab", "x"), SortEntry("Aa", "y")) is Ordering.GREATER
    assert compare_transliterations(SortEntry("abc", "x"), SortEntry("abc", "y")) is Ordering.TIED


def test_resolve_falls_through_to_tied():
    assert resolve(SortEntry("", "a"), SortEntry("", "b")) is Ordering.TIED
    assert resolve(SortEntry("x", "a"), SortEntry("y", "b"), stages=()) is Ordering.TIED


def test_case_fold_example_lowercase_before_uppercase():
    upper = make_item("#Apple", "Apple")
    lower = make_item("@apple", "apple")
    assert is_less(lower, upper, CategoryType.ALPHABETARY)
    assert not is_less(upper, lower, CategoryType.ALPHABETARY)
    assert sort_items([upper, lower], CategoryType.ALPHABETARY) == [lower, upper]


def test_script_mixing_example_latin_display_first():
    x = make_item("α-test", "alpha")
    y = make_item("Alpha", "alpha")
    assert is_less(y, x, CategoryType.ALPHABETARY)
    assert not is_less(x, y, CategoryType.ALPHABETARY)
    assert sort_items([x, y], CategoryType.ALPHABETARY) == [y, x]


def test_category_ordering_uses_codes_and_is_stable():
    first = make_item("Zeta", "zeta", DDECategory.Development, desktop_id="a")
    second = make_item("Alpha", "alpha", DDECategory.Development, desktop_id="b")
    browser = make_item("Browser", "browser", DDECategory.Internet)
    ordered = sort_items([first, second, browser], CategoryType.DDE_CATEGORY)
    assert ordered == [browser, first, second]


def test_baseline_less_than_never_raises():
    assert baseline_less_than("apple", "Banana")
    assert not baseline_less_than("Banana", "apple")
    assert baseline_less_than(1, 2)
    # Mixed types fall back to their string forms
    assert baseline_less_than(1, "a")
    assert not baseline_less_than(None, None)


def _grid():
    transliterations = ["", "apple", "Apple", "alpha", "Alpha", "banana", "Banana"]
    displays = ["Apple", "alpha", "α", "#", "Banana", "音"]
    return [
        SortEntry(t, d) for t, d in itertools.product(transliterations, displays)
    ]


def test_alphabetary_comparator_is_strict_weak_ordering():
    entries = _grid()
    for a in entries:
        assert not transliterated_less_than(a, a)
    for a, b in itertools.product(entries, repeat=2):
        assert not (transliterated_less_than(a, b) and transliterated_less_than(b, a))
    for a, b, c in itertools.product(entries[::3], repeat=3):
        if transliterated_less_than(a, b) and transliterated_less_than(b, c):
            assert transliterated_less_than(a, c)


def test_sort_items_is_stable_and_repeatable():
    items = [
        make_item("One", "same", desktop_id="1"),
        make_item("Two", "same", desktop_id="2"),
        make_item("Three", "same", desktop_id="3"),
    ]
    first = sort_items(items, CategoryType.ALPHABETARY)
    second = sort_items(list(reversed(first)), CategoryType.ALPHABETARY)
    assert [i.desktop_id for i in first] == ["1", "2", "3"]
    assert [i.desktop_id for i in second] == ["3", "2", "1"]
    assert sort_items(items, CategoryType.ALPHABETARY) == first
