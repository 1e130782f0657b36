# warteg

A small interactive terminal cashier for a warung-style eatery. It loads a
menu given as a JSON list, then lets a customer browse it, fill a cart,
check out and look back at the orders paid during the session.

## Installation

```
pip install .
```

## The menu file

The menu is a JSON array of objects with the fields `No` (item ID, a
string), `Name`, `Price` (an integer) and `Category`:

```json
[
  {"No": "1", "Name": "Nasi Goreng", "Price": 15000, "Category": "Makanan"},
  {"No": "2", "Name": "Es Teh", "Price": 5000, "Category": "Minuman"}
]
```

Field names are matched without regard to case. A missing field is read as
an empty string (or `0` for `Price`). A JSON `null` is read as an empty menu.
Any other shape is rejected.

## Running

Pass the menu as a file path or as an `http://` / `https://` URL:

```
warteg menu.json
warteg https://menu.example.com/menu.json
```

If the menu cannot be read or decoded, the command prints `failed to fetch!`
with the reason to standard error and exits with status 1.

The program first asks for your name (the first word typed is used), then
shows the home screen:

| Key | Action |
|-----|--------|
| `1` | Show all menu items, five per page: `n` next page, `p` previous page, an item ID adds it to the cart, `q` goes back |
| `2` | List the categories, choose one by number, then pick an item from it by ID |
| `3` | Search items by name (case-insensitive substring); pick a result by ID; type `0` afterwards to search again |
| `4` | View the cart grouped per item with subtotals and the total; `1` goes on to checkout |
| `5` | Check out: `ya` pays, `tidak` cancels, any other answer asks again |
| `6` | Show the history of paid transactions |
| `0` | Exit |

Any other key on the home screen prints `Invalid choice!` and ends the
session, as does reaching the end of input. Paying for an empty cart shows a
"payment failed" screen and records nothing.

## Using the library

The ordering logic can be used without the terminal interface:

```python
from warteg.catalog import parse_menu
from warteg.shop import Shop, list_categories, search_menu, paginate, page_count

menu = parse_menu(
    '[{"No": "1", "Name": "Nasi Goreng", "Price": 15000, "Category": "Makanan"},'
    ' {"No": "2", "Name": "Es Teh", "Price": 5000, "Category": "Minuman"}]'
)

print([c.name for c in list_categories(menu)])   # ['Makanan', 'Minuman']
print(search_menu(menu, "teh"))                  # [MenuItem(no='2', name='Es Teh', ...)]
print(page_count(len(menu)), paginate(menu, 0))  # pages of five items

shop = Shop()
shop.add(menu[0])
shop.add(menu[0])
print(shop.total())                              # 30000
print(shop.summarize())                          # [CartLine(name='Nasi Goreng', quantity=2, subtotal=30000)]
shop.checkout()                                  # records the lines in shop.history, empties the cart
```

- `warteg.catalog`: `MenuItem`, `parse_menu(payload)`, and
  `fetch_menu(url, timeout=10.0)`, which downloads and decodes a menu. Both
  raise `CatalogError` when the data cannot be retrieved or decoded.
- `warteg.shop`: `list_categories`, `items_in_category`, `search_menu`,
  `find_item`, `paginate`, `page_count`, and `Shop` with `add`, `summarize`,
  `total` and `checkout`. `Shop.checkout()` raises `EmptyCartError` when
  there is nothing to pay.
- `warteg.cli`: `App`, the interactive session. It takes the menu, an
  optional `Shop`, a `read_line` callable and an output stream, so it can be
  driven from code; `App.run(name)` starts it. `main(argv=None)` is the
  `warteg` command.

## What it does not do

- It has no built-in menu; one must be supplied on the command line.
- Nothing is stored: the cart and the transaction history live only for the
  running session.

## Tests

```
pip install .[test]
pytest
```