"""The HEADER section: header variables mapped to their tags."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from dxfsections.tags import Tag, tag_groups

_ACADVER = "$ACADVER"
_DWGCODEPAGE = "$DWGCODEPAGE"


@dataclass
class HeaderSection:
    """Header variables, each name mapped to the tags that follow it."""

    values: dict[str, list[Tag]] = field(default_factory=dict)

    def get(self, key: str) -> list[Tag]:
        """Return the tags of a header variable, or an empty list."""
        return list(self.values.get(key, []))


def parse_header(tags: Iterable[Tag]) -> HeaderSection:
    """Build a HeaderSection from the tags of a whole HEADER section."""
    tags = list(tags)
    values: dict[str, list[Tag]] = {}
    if len(tags) > 3:
        for group in tag_groups(tags[2:-1], 9):
            values.setdefault(str(group[0].value), []).extend(group[1:])

    values.setdefault(_ACADVER, [Tag(1, "AC1009")])
    values.setdefault(_DWGCODEPAGE, [Tag(3, "ANSI_1252")])
    return HeaderSection(values)