import pytest

from lawyermatch.services.sorting import SortOption, sort_lawyers


@pytest.fixture
def lawyers(store, lawyer_data):
    for name, rating, rate in [
        ("A", 4.0, 200),
        ("B", 5.0, 100),
        ("C", 4.0, 100),
        ("D", 3.0, 300),
    ]:
        store.create(lawyer_data(name=name, rating=rating, hourly_rate=rate))
    return store.list()


def _names(lawyers):
    return [lawyer.name for lawyer in lawyers]


@pytest.mark.parametrize("sort_by, expected", [
    ("relevance", ["A", "B", "C", "D"]),
    ("rating-high", ["B", "A", "C", "D"]),
    ("rating-low", ["D", "A", "C", "B"]),
    ("price-low", ["B", "C", "A", "D"]),
    ("price-high", ["D", "A", "B", "C"]),
])
def test_sort_orders_with_stable_ties(lawyers, sort_by, expected):
    assert _names(sort_lawyers(lawyers, sort_by)) == expected


@pytest.mark.parametrize("sort_by", ["newest", "", None])
def test_unknown_sort_key_keeps_input_order(lawyers, sort_by):
    assert _names(sort_lawyers(lawyers, sort_by)) == ["A", "B", "C", "D"]


def test_sort_returns_new_list(lawyers):
    ordered = sort_lawyers(lawyers, SortOption.RATING_HIGH)
    assert ordered is not lawyers
    assert _names(lawyers) == ["A", "B", "C", "D"]


def test_parse_falls_back_to_relevance():
    assert SortOption.parse("price-low") is SortOption.PRICE_LOW
    assert SortOption.parse(SortOption.RATING_LOW) is SortOption.RATING_LOW
    assert SortOption.parse("bogus") is SortOption.RELEVANCE
