import pytest

from warteg.catalog import MenuItem
from warteg.shop import (
    CartLine,
    Category,
    EmptyCartError,
    Shop,
    find_item,
    items_in_category,
    list_categories,
    page_count,
    paginate,
    search_menu,
)

MENU = [
    MenuItem("1", "Nasi Goreng", 15000, "Makanan"),
    MenuItem("2", "Es Teh", 5000, "Minuman"),
    MenuItem("3", "Mie Goreng", 12000, "Makanan"),
    MenuItem("4", "Kopi Hitam", 4000, "Minuman"),
    MenuItem("5", "Tempe Goreng", 2000, "Lauk"),
    MenuItem("6", "Tahu Bacem", 2000, "Lauk"),
    MenuItem("7", "Es Jeruk", 6000, "Minuman"),
]


def test_list_categories_first_appearance_order():
    assert list_categories(MENU) == [
        Category("1", "Makanan"),
        Category("2", "Minuman"),
        Category("3", "Lauk"),
    ]


def test_list_categories_empty_menu():
    assert list_categories([]) == []


def test_items_in_category():
    found = items_in_category(MENU, "Minuman")
    assert [item.no for item in found] == ["2", "4", "7"]
    assert all(item.category == "Minuman" for item in found)


def test_search_is_case_insensitive_substring():
    found = search_menu(MENU, "GORENG")
    assert [item.no for item in found] == ["1", "3", "5"]


def test_search_empty_query_matches_everything():
    assert search_menu(MENU, "") == MENU


def test_search_no_match():
    assert search_menu(MENU, "rendang") == []


def test_find_item():
    assert find_item(MENU, "4") is MENU[3]
    assert find_item(MENU, "99") is None


@pytest.mark.parametrize("total, per_page", [(0, 5), (5, 5), (6, 5), (7, 3), (1, 1)])
def test_page_count_covers_all_items(total, per_page):
    pages = page_count(total, per_page)
    assert pages * per_page >= total
    assert (pages - 1) * per_page < total or pages == 0


def test_paginate_partitions_the_menu():
    pages = [paginate(MENU, page) for page in range(page_count(len(MENU)))]
    assert [item for page in pages for item in page] == MENU
    assert all(len(page) <= 5 for page in pages)
    assert paginate(MENU, len(pages)) == []


@pytest.mark.parametrize("page, per_page", [(-1, 5), (0, 0)])
def test_paginate_rejects_bad_arguments(page, per_page):
    with pytest.raises(ValueError):
        paginate(MENU, page, per_page)


def test_page_count_rejects_zero_per_page():
    with pytest.raises(ValueError):
        page_count(3, 0)


def test_summarize_groups_by_name():
    shop = Shop()
    for item in (MENU[0], MENU[1], MENU[0]):
        shop.add(item)
    assert shop.summarize() == [
        CartLine("Nasi Goreng", 2, MENU[0].price * 2),
        CartLine("Es Teh", 1, MENU[1].price),
    ]


def test_total_matches_summary():
    shop = Shop()
    for item in MENU:
        shop.add(item)
    assert shop.total() == sum(line.subtotal for line in shop.summarize())
    assert sum(line.quantity for line in shop.summarize()) == len(MENU)


def test_checkout_records_history_and_clears_cart():
    shop = Shop()
    shop.add(MENU[2])
    shop.add(MENU[3])
    expected = tuple(shop.summarize())
    lines = shop.checkout()
    assert lines == expected
    assert shop.history == [expected]
    assert shop.cart == []
    assert shop.total() == 0


def test_checkout_appends_each_transaction():
    shop = Shop()
    shop.add(MENU[0])
    shop.checkout()
    shop.add(MENU[1])
    shop.checkout()
    assert [lines[0].name for lines in shop.history] == ["Nasi Goreng", "Es Teh"]


def test_checkout_empty_cart_raises():
    shop = Shop()
    with pytest.raises(EmptyCartError):
        shop.checkout()
    assert shop.history == []


def test_checkout_zero_total_raises_and_keeps_cart():
    shop = Shop()
    free = MenuItem("8", "Air Putih", 0, "Minuman")
    shop.add(free)
    with pytest.raises(EmptyCartError):
        shop.checkout()
    assert shop.cart == [free]