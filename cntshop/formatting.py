"""Rendering of results as a table, JSON or tab-separated compact text."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from enum import Enum

from cntshop.categories import Category, all_categories


class OutputFormat(str, Enum):
    """How command output is rendered."""

    TABLE = "table"
    JSON = "json"
    COMPACT = "compact"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> OutputFormat:
        """Parse a format name, ignoring case; raise ``ValueError`` if unknown."""
        lowered = text.lower()
        try:
            return cls(lowered)
        except ValueError:
            raise ValueError(f"Unknown output format: '{lowered}'") from None


def truncate(text: str, max_chars: int) -> str:
    """Shorten ``text`` to ``max_chars`` characters, ending in an ellipsis if cut."""
    if len(text) > max_chars:
        return text[: max(max_chars - 1, 0)] + "…"
    return text


def _to_json(value: object) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _categories_tree(categories: Sequence[Category]) -> str:
    lines = ["Categories:", ""]
    for top in (c for c in categories if c.parent is None):
        lines.append(f"{top.name} ({top.cgid})")
        children = [c for c in categories if c.parent == top.cgid]
        for position, child in enumerate(children, start=1):
            connector = "└──" if position == len(children) else "├──"
            lines.append(f" {connector} {child.name} ({child.cgid})")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_categories(categories: Iterable[Category], output_format: OutputFormat) -> str:
    """Render categories in the requested format."""
    cats = list(categories)
    if output_format is OutputFormat.JSON:
        return _to_json(
            [{"cgid": c.cgid, "name": c.name, "parent": c.parent} for c in cats]
        )
    if output_format is OutputFormat.TABLE:
        return _categories_tree(cats)
    return "".join(f"{c.cgid}\t{c.name}\n" for c in cats)


def run_categories(output_format: OutputFormat) -> str:
    """Render the whole category catalogue."""
    return format_categories(all_categories(), output_format)