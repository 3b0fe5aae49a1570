# cntshop

A small Python library holding the product category catalogue of the
Continente online supermarket: the top-level departments and their
sub-categories. It can look a category up by id or by name and render the
catalogue as a tree, as JSON, or as tab-separated lines.

## Installation

```
pip install .
```

Python 3.11 or later is required; there are no third-party runtime
dependencies. To run the tests, install the `test` extra and run `pytest`.

## The catalogue

`cntshop.categories` holds the catalogue:

- `Category` is a frozen dataclass with `cgid`, `name` and `parent`;
  `parent` is `None` for a top-level department.
- `all_categories()` returns every category as a tuple, in catalogue order:
  the top-level departments first, then the sub-categories department by
  department.
- `resolve_cgid(query)` finds a category id from an id or a name. Ignoring
  case, it tries in order: an exact id, an exact name, a name containing the
  text, then an id containing it. The first category that matches wins; it
  returns `None` when nothing matches.

```python
from cntshop.categories import all_categories, resolve_cgid

resolve_cgid("Frescos")           # -> "frescos"
resolve_cgid("Talho")             # -> "peixaria-e-talho-talho"
resolve_cgid("gelados de cone")   # -> "congelados-gelados-cone"
resolve_cgid("no such aisle")     # -> None

len(all_categories())
```

The raw entries behind the catalogue are plain `(cgid, name, parent)` tuples,
split by aisle: `fresh_entries()` in `cntshop.catalog_fresh` (departments,
fresh food and dairy), `pantry_entries()` in `cntshop.catalog_pantry`
(frozen food, grocery, drinks, health food) and `household_entries()` in
`cntshop.catalog_household` (cleaning, baby, beauty, pets, home, toys).

## Rendering

`cntshop.formatting` turns categories into text:

- `OutputFormat` has the members `TABLE`, `JSON` and `COMPACT`.
  `OutputFormat.parse("Json")` reads a name case-insensitively and raises
  `ValueError` for an unknown one.
- `format_categories(categories, output_format)` renders any iterable of
  `Category`:
  - `TABLE` prints a `Categories:` heading, then each top-level category
    followed by its direct children, drawn with `├──` and `└──` connectors;
  - `JSON` prints an indented list of objects with `cgid`, `name` and
    `parent`;
  - `COMPACT` prints one `cgid<TAB>name` line per category.
- `run_categories(output_format)` renders the whole catalogue.
- `truncate(text, max_chars)` shortens text to at most `max_chars`
  characters, ending in `…` when it was cut.

```python
from cntshop.formatting import OutputFormat, run_categories

print(run_categories(OutputFormat.COMPACT))
```

## What it does not do

This package is a library only. It installs no command-line program, reads
no configuration file, and does not contact the shop: there is no product
search, price lookup, store finder or flyer listing. It works solely with the
built-in category catalogue.