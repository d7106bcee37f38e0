"""DXF tags (group code / value pairs) and helpers for splitting tag sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Union

TagValue = Union[str, int, float]

INVALID_TABLE_MESSAGE = "Invalid table. Missing TABLE AND/OR ENDTAB tags."


class TagTypeError(ValueError):
    """Raised when a tag value cannot be read as the requested type."""

    def __init__(self, value: object, type_name: str) -> None:
        super().__init__(f"Error parsing type of {value!r} as {type_name}")
        self.value = value


class InvalidTableError(ValueError):
    """Raised when a table is not delimited by TABLE and ENDTAB tags."""

    def __init__(self, message: str = INVALID_TABLE_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Tag:
    """A single DXF group code with its value."""

    code: int
    value: TagValue


def as_int(tag: Tag) -> int:
    """Return the tag value as an integer."""
    value = tag.value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise TagTypeError(value, "an Integer")


def as_float(tag: Tag) -> float:
    """Return the tag value as a float."""
    value = tag.value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise TagTypeError(value, "a Float")


def as_str(tag: Tag) -> str:
    """Return the tag value as a string."""
    if isinstance(tag.value, str):
        return tag.value
    raise TagTypeError(tag.value, "a String")


def tag_groups(tags: Iterable[Tag], code: int) -> list[list[Tag]]:
    """Split tags into groups, each starting at a tag with the given code.

    Tags that come before the first such tag form a group of their own.
    """
    groups: list[list[Tag]] = []
    for tag in tags:
        if tag.code == code or not groups:
            groups.append([tag])
        else:
            groups[-1].append(tag)
    return groups


def table_entry_tags(tags: Iterable[Tag]) -> list[list[Tag]]:
    """Return the entry groups of a TABLE ... ENDTAB tag sequence.

    The leading TABLE group and the closing ENDTAB group are removed.
    """
    groups = tag_groups(tags, 0)
    if (
        not groups
        or str(groups[0][0].value) != "TABLE"
        or str(groups[-1][0].value) != "ENDTAB"
    ):
        raise InvalidTableError()
    return groups[1:-1]


def split_tag_chunks(
    tags: Sequence[Tag], stop_tag: Tag, chunk_delimiter: Tag
) -> list[list[Tag]]:
    """Split tags into chunks, each ending with chunk_delimiter.

    Splitting ends at stop_tag, which is not included in any chunk.
    """
    chunks: list[list[Tag]] = []
    remaining = iter(tags)
    for first in remaining:
        if first == stop_tag:
            break
        chunk = [first]
        found_stop = False
        for tag in remaining:
            if tag == chunk_delimiter:
                chunk.append(tag)
                break
            if tag == stop_tag:
                found_stop = True
                break
            chunk.append(tag)
        chunks.append(chunk)
        if found_stop:
            break
    return chunks