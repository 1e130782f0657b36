"""Shopping logic: categories, search, paging, cart and checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, TypeVar

from warteg.catalog import MenuItem

__all__ = [
    "CartLine",
    "Category",
    "EmptyCartError",
    "Shop",
    "list_categories",
    "items_in_category",
    "search_menu",
    "find_item",
    "paginate",
    "page_count",
]

ITEMS_PER_PAGE = 5

T = TypeVar("T")


class EmptyCartError(Exception):
    """Raised when paying for a cart that holds nothing to pay for."""


@dataclass(frozen=True)
class CartLine:
    """All units of one dish in the cart, grouped by name."""

    name: str
    quantity: int
    subtotal: int


@dataclass(frozen=True)
class Category:
    """A numbered menu category."""

    no: str
    name: str


def list_categories(menu: Iterable[MenuItem]) -> list[Category]:
    """Distinct categories in order of first appearance, numbered from 1."""
    names = list(dict.fromkeys(item.category for item in menu))
    return [Category(str(number), name) for number, name in enumerate(names, start=1)]


def items_in_category(menu: Iterable[MenuItem], category: str) -> list[MenuItem]:
    """Menu items belonging to ``category``."""
    return [item for item in menu if item.category == category]


def search_menu(menu: Iterable[MenuItem], query: str) -> list[MenuItem]:
    """Items whose name contains ``query``, ignoring case."""
    needle = query.lower()
    return [item for item in menu if needle in item.name.lower()]


def find_item(items: Iterable[MenuItem], item_id: str) -> MenuItem | None:
    """The first item with id ``item_id``, or None."""
    return next((item for item in items if item.no == item_id), None)


def page_count(total_items: int, per_page: int = ITEMS_PER_PAGE) -> int:
    """Number of pages needed to show ``total_items``."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    if total_items < 0:
        raise ValueError("total_items must not be negative")
    return -(-total_items // per_page)


def paginate(items: Sequence[T], page: int, per_page: int = ITEMS_PER_PAGE) -> list[T]:
    """The items on zero-based ``page``; empty past the last page."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    if page < 0:
        raise ValueError("page must not be negative")
    start = page * per_page
    return list(items[start:start + per_page])


@dataclass
class Shop:
    """A customer's cart and completed transactions."""

    cart: list[MenuItem] = field(default_factory=list)
    history: list[tuple[CartLine, ...]] = field(default_factory=list)

    def add(self, item: MenuItem) -> None:
        """Put one unit of ``item`` in the cart."""
        self.cart.append(item)

    def summarize(self) -> list[CartLine]:
        """Cart contents grouped by dish name, in order of first addition."""
        counts: dict[str, int] = {}
        subtotals: dict[str, int] = {}
        for item in self.cart:
            counts[item.name] = counts.get(item.name, 0) + 1
            subtotals[item.name] = subtotals.get(item.name, 0) + item.price
        return [CartLine(name, counts[name], subtotals[name]) for name in counts]

    def total(self) -> int:
        """Sum of prices of everything in the cart."""
        return sum(item.price for item in self.cart)

    def checkout(self) -> tuple[CartLine, ...]:
        """Pay for the cart, record the transaction and empty the cart.

        Raises EmptyCartError when there is nothing to pay.
        """
        if self.total() == 0:
            raise EmptyCartError("the cart is empty")
        lines = tuple(self.summarize())
        self.history.append(lines)
        self.cart = []
        return lines