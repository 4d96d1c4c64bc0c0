"""
Directive parsing - Turn a field's tag string into validator calls.

A directive string names the validators to run against one field:

    long,short
    nonzero,between[4,7]
    struct,present

Entries are separated by top-level commas. An entry may carry a bracketed
parameter list; commas inside the brackets separate parameters, not entries,
so ``between[4,7]`` is one entry with params ``("4", "7")``.

An entry with unbalanced or trailing brackets keeps its raw text as the
validator name. Such a name is never registered, so it surfaces as an
undefined validator instead of aborting validation.
"""

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class Directive(BaseModel):
    """One validator reference parsed from a directive string."""

    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[str, ...] = ()
    bracketed: bool = False  # True when the entry carried a [...] suffix


# name[params] with no brackets in the name and nothing after the closing one
ENTRY_PATTERN = re.compile(r"^([^\[\]]*)\[([^\[\]]*)\]$")


def split_entries(tag: str) -> list[str]:
    """Split a directive string on commas outside brackets."""
    entries: list[str] = []
    current: list[str] = []
    depth = 0

    for char in tag:
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == "," and depth == 0:
            entries.append("".join(current))
            current = []
            continue
        current.append(char)

    entries.append("".join(current))
    return entries


def parse_entry(entry: str) -> Directive:
    """Parse a single ``name`` or ``name[p1,p2]`` entry."""
    entry = entry.strip()

    match = ENTRY_PATTERN.match(entry)
    if match:
        name, inner = match.groups()
        params = tuple(p.strip() for p in inner.split(",")) if inner.strip() else ()
        return Directive(name=name.strip(), params=params, bracketed=True)

    return Directive(name=entry)


@lru_cache(maxsize=1024)
def parse_directives(tag: str) -> tuple[Directive, ...]:
    """
    Parse a directive string into ordered directives.

    Args:
        tag: Raw directive string from field metadata

    Returns:
        Directives in evaluation order; empty for an empty tag
    """
    if not tag:
        return ()
    return tuple(parse_entry(entry) for entry in split_entries(tag))
