"""Interactive terminal front end for the warteg ordering system."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from warteg.catalog import CatalogError, MenuItem, fetch_menu, parse_menu
from warteg.shop import (
    EmptyCartError,
    Shop,
    find_item,
    items_in_category,
    list_categories,
    page_count,
    paginate,
    search_menu,
)

__all__ = ["App", "main"]

CLEAR_SCREEN = "\033[H\033[2J"
RULE = "=============================================="
SHORT_RULE = "=================================="

HOME_SCREEN = """
================================
| 🥣 WELCOME TO WARTEG BAHARI  |
================================
| 1. Show All Menu 🍴          |
| 2. List Menu by Category 📜  |
| 3. Cari Menu 🔎              |
| 4. Lihat Keranjang 🛒        |
| 5. Checkout 💸               |
| 6. History Transaction 📋    |
| 0. Exit ❌                   |
================================
"""

ALL_MENU_SCREEN = """
==============================================
| LIST ALL MENU 🍴                           |
==============================================
| ID produk | nama produk | harga | category |
==============================================
"""

CATEGORY_SCREEN = """
==================================
| LIST CATEGORY 📜
==================================
"""

MENU_SCREEN = """
==================================
| LIST MENU
==================================
| ID produk | nama produk | harga
==================================
"""

CART_SCREEN = """
=========================
| LIST CART 🛒
=========================
"""

CHECKOUT_SCREEN = """
=========================
| CHECKOUT 💸
=========================
"""

PAYMENT_SUCCESS_SCREEN = """
==============================================
| 💸 PAYMENT SUCCESS! ✅                     |
==============================================
"""

PAYMENT_FAILED_SCREEN = """
==============================================
| 💸 PAYMENT FAILED! ❌                      |
| anda belum memasukkan apapun ke keranjang! |
==============================================
"""

HISTORY_SCREEN = """
=============================
| 💸 HISTORY TRANSACTION ⏳ |
=============================
"""

BACK_HOME = "\nEnter untuk kembali ke home..."
NOT_AVAILABLE = "Pilihan tidak ada❌, enter untuk kembali ke home.."


class App:
    """The menu-driven session of one customer.

    Input is read line by line from ``read_line`` (called with no
    arguments, raising EOFError when input runs out); output goes to ``out``.
    """

    def __init__(
        self,
        menu: Sequence[MenuItem],
        shop: Shop | None = None,
        read_line: Callable[[], str] = input,
        out: TextIO | None = None,
    ) -> None:
        self.menu = list(menu)
        self.shop = shop if shop is not None else Shop()
        self._read_line = read_line
        self._out = out if out is not None else sys.stdout

    def _write(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)
        self._out.flush()

    def _clear(self) -> None:
        self._write(CLEAR_SCREEN, end="")

    def _line(self, prompt: str = "") -> str:
        if prompt:
            self._write(prompt, end="")
        return self._read_line().rstrip("\r\n")

    def _token(self, prompt: str = "") -> str:
        words = self._line(prompt).split()
        return words[0] if words else ""

    def run(self, name: str) -> None:
        """Show the home screen and dispatch choices until the user leaves."""
        actions = {
            "1": self.all_menu,
            "2": self.browse_category,
            "3": self.search,
            "4": self.show_cart,
            "5": self.checkout,
            "6": self.history,
        }
        try:
            while True:
                self._clear()
                self._write(f"Halo {name.upper()} 😄 🖐 !")
                self._write(HOME_SCREEN)
                choice = self._token("Masukkan pilihan: ")
                if choice == "0":
                    self._write(f"See You Again {name} 😥 🖐 !")
                    return
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice!")
                    return
                action()
        except EOFError:
            return

    def all_menu(self) -> None:
        """Page through the whole menu, adding items to the cart by id."""
        pages = page_count(len(self.menu))
        page = 0
        while True:
            self._clear()
            self._write(ALL_MENU_SCREEN, end="")
            for item in paginate(self.menu, page):
                self._write(f"{item.no} | {item.name} | {item.price} | {item.category}")
            self._write(RULE)
            self._write(f"Page {page + 1} of {pages}")
            self._write(
                "[p = previous] [n = next] [Tambahkan ID ke keranjang] [q to back to home]"
            )
            choice = self._token("Masukkan Pilihan: ").lower()
            if choice == "n":
                if page < pages - 1:
                    page += 1
            elif choice == "p":
                if page > 0:
                    page -= 1
            elif choice == "q":
                return
            else:
                item = find_item(self.menu, choice)
                if item is not None:
                    self.shop.add(item)
                    self._line(
                        f"Menambahkan {item.name} ke Keranjang ✅ , enter untuk kembali ke home..."
                    )

    def browse_category(self) -> None:
        """Pick a category, then an item from it to add to the cart."""
        self._clear()
        self._write(CATEGORY_SCREEN, end="")
        categories = list_categories(self.menu)
        for category in categories:
            self._write(f"| {category.no}. {category.name}")
        self._write(SHORT_RULE)
        first = categories[0].no if categories else "1"
        choice = self._token(f"Pilih Kategori [{first} - {len(categories)}] : ")
        chosen = next((c for c in categories if c.no == choice), None)
        if chosen is None:
            self._line(NOT_AVAILABLE)
            return

        self._clear()
        self._write(MENU_SCREEN, end="")
        items = items_in_category(self.menu, chosen.name)
        for item in items:
            self._write(f"| {item.no} | {item.name} | {item.price}")
        self._write(SHORT_RULE)
        item_id = self._token("Pilih Menu [ ID Produk ] : ")
        item = find_item(items, item_id)
        if item is None:
            self._line(NOT_AVAILABLE)
            return
        self.shop.add(item)
        self._line("Berhasil ditambahkan ✅ , enter untuk kembali dan lihat keranjang mu..")

    def search(self) -> None:
        """Search dishes by name and add one of the results to the cart."""
        while True:
            self._clear()
            self._write("*ketik nama item atau nama menu yang anda ingin cari")
            query = self._line("\ncari item 🔎 : ")
            self._write("\nHasil Pencarian :")
            results = search_menu(self.menu, query) if query else []
            for item in results:
                self._write(f"[ ID Menu: {item.no} ] {item.name} ")

            if not results:
                self._write("❌Item Tidak Ditemukkan🔎❌")
            else:
                item_id = self._token("\n Ketik ID produk untuk ditambahkan ke keranjang: ")
                item = find_item(results, item_id)
                if item is not None:
                    self.shop.add(item)
                    self._write("Data Berhasil Ditambahkan ✅ ")
                else:
                    self._write("❌ Input Tidak Valid!", end="")

            self._write("\nKetik 0 untuk melakukan pencarian kembali...", end="")
            action = self._token(BACK_HOME)
            if action != "0":
                return

    def _write_cart_lines(self) -> None:
        for number, line in enumerate(self.shop.summarize(), start=1):
            self._write(
                f"[{number}]. {line.name} | total item: {line.quantity} | Total Harga: {line.subtotal}"
            )

    def show_cart(self) -> None:
        """List the cart grouped by dish and offer to check out."""
        self._clear()
        self._write(CART_SCREEN, end="")
        self._write_cart_lines()
        self._write(f"\nTotal Harga: {self.shop.total()}")
        self._write("=========================")
        self._write("\nKetik 0 untuk kembali ")
        self._write("Ketik 1 untuk checkout ")
        choice = self._token("\nMasukkan pilihan : ")
        if choice == "1":
            self.checkout()

    def checkout(self) -> None:
        """Confirm and pay for the cart, asking again on an unclear answer."""
        while True:
            self._clear()
            self._write(CHECKOUT_SCREEN, end="")
            self._write("Item anda saat ini:")
            self._write_cart_lines()
            total = self.shop.total()
            self._write(f"\nTotal yang akan dibayarkan: {total}")
            self._write("Anda yakin ingin melanjutkan pembayaran? (YA/tidak)")
            answer = self._token().lower()
            if answer == "ya":
                self._pay(total)
                return
            if answer == "tidak":
                return

    def _pay(self, total: int) -> None:
        try:
            self.shop.checkout()
        except EmptyCartError:
            screen = PAYMENT_FAILED_SCREEN
        else:
            screen = PAYMENT_SUCCESS_SCREEN
        self._clear()
        self._write(screen, end="")
        self._write(f"Total yang anda dibayarkan: {total}")
        self._write(RULE)
        self._line(BACK_HOME)

    def history(self) -> None:
        """Show every completed transaction."""
        self._clear()
        self._write(HISTORY_SCREEN, end="")
        if not self.shop.history:
            self._write("Belum ada History Transaksi 😯 !")
        for number, lines in enumerate(self.shop.history, start=1):
            self._write(f"Transaksi [{number}]:")
            self._write("Detail Item yang dibeli:")
            for line in lines:
                self._write(f"> {line.name} | Total Item: {line.quantity} | Harga: {line.subtotal}")
            self._write("-----------------------------")
        self._line(BACK_HOME)


def _load_menu(source: str) -> list[MenuItem]:
    if source.startswith(("http://", "https://")):
        return fetch_menu(source)
    return parse_menu(Path(source).read_bytes())


def main(argv: Sequence[str] | None = None) -> int:
    """Load the menu and start an interactive ordering session."""
    parser = argparse.ArgumentParser(prog="warteg", description="Warteg ordering terminal.")
    parser.add_argument("source", help="menu JSON: a file path or an http(s) URL")
    args = parser.parse_args(argv)

    try:
        menu = _load_menu(args.source)
    except (CatalogError, OSError) as exc:
        print(f"failed to fetch! {exc}", file=sys.stderr)
        return 1

    print("Masukkan Nama Anda: ", end="", flush=True)
    try:
        words = input().split()
    except EOFError:
        words = []
    name = words[0] if words else ""

    App(menu).run(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())