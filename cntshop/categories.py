"""The supermarket category catalogue and lookup by id or name."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain

from cntshop.catalog_fresh import fresh_entries
from cntshop.catalog_household import household_entries
from cntshop.catalog_pantry import pantry_entries


@dataclass(frozen=True, slots=True)
class Category:
    """One catalogue category; ``parent`` is ``None`` for top-level departments."""

    cgid: str
    name: str
    parent: str | None = None


_CATEGORIES: tuple[Category, ...] = tuple(
    Category(cgid, name, parent)
    for cgid, name, parent in chain(fresh_entries(), pantry_entries(), household_entries())
)


def all_categories() -> tuple[Category, ...]:
    """Every known category, in catalogue order."""
    return _CATEGORIES


def resolve_cgid(query: str) -> str | None:
    """Find the category id matching ``query``.

    Tries, in order: exact id, exact name, name containing the query, id
    containing the query. All comparisons ignore case. Returns ``None`` when
    nothing matches.
    """
    lower = query.lower()
    matchers = (
        lambda c: c.cgid == lower,
        lambda c: c.name.lower() == lower,
        lambda c: lower in c.name.lower(),
        lambda c: lower in c.cgid,
    )
    for matches in matchers:
        found = next((c for c in _CATEGORIES if matches(c)), None)
        if found is not None:
            return found.cgid
    return None