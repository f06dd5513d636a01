"""Category providers: category files and interactive entry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

from loguru import logger

from services.errors import CategoryFileError, CategoryInputError, UnknownInputMethodError


@dataclass(frozen=True)
class Category:
    """A named group of cards in the deck, sized by how many cards qualify."""

    name: str
    size: int


class InputMethod(Enum):
    STDIN = "stdin"
    FILE = "file"

    @classmethod
    def parse(cls, value: str) -> "InputMethod":
        key = value.strip().lower()
        for method in cls:
            if method.value == key:
                return method
        raise UnknownInputMethodError(value.strip())


def parse_size(text: str) -> int:
    """Parse a plain base-10 count made only of ASCII digits."""
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{text!r} is not a non-negative base-10 integer")
    return int(text)


def parse_category_lines(lines: Iterable[str]) -> list[Category]:
    """
    Convert alternating name/size lines into categories.

    Args:
        lines: Lines without trailing newlines, e.g. ``["Lands", "37"]``

    Returns:
        Categories in file order

    Raises:
        CategoryFileError: On an odd number of lines, an empty name or a size
            that is not a non-negative base-10 integer
    """
    lines = list(lines)
    if len(lines) % 2:
        raise CategoryFileError("File has invalid format: expected name/size line pairs")

    categories: list[Category] = []
    for index in range(0, len(lines), 2):
        name = lines[index]
        size_text = lines[index + 1].strip()
        if not name.strip():
            raise CategoryFileError(f"File has invalid format: empty category name on line {index + 1}")
        try:
            size = parse_size(size_text)
        except ValueError as exc:
            raise CategoryFileError(
                f"Error parsing number on line {index + 2}: {size_text!r}"
            ) from exc
        categories.append(Category(name=name, size=size))
    return categories


def load_categories_from_file(path: Path) -> list[Category]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CategoryFileError(f"Error reading file {path}: {exc}") from exc
    categories = parse_category_lines(text.splitlines())
    logger.debug(f"Loaded {len(categories)} categories from {path}")
    return categories


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise CategoryInputError("Input ended before all categories were entered")
    return line.rstrip("\r\n")


def _read_name(stdin: TextIO, stdout: TextIO) -> str:
    while True:
        name = _read_line(stdin)
        if name.strip():
            return name
        stdout.write("\tCategory name cannot be empty, try again: ")
        stdout.flush()


def _read_count(stdin: TextIO, stdout: TextIO, retry_prefix: str = "") -> int:
    while True:
        text = _read_line(stdin).strip()
        try:
            return parse_size(text)
        except ValueError as exc:
            stdout.write(f"{retry_prefix}This number is invalid ({exc}), try again: ")
            stdout.flush()


def read_categories_interactive(stdin: TextIO, stdout: TextIO) -> list[Category]:
    """Prompt for categories on a line-based stream, re-prompting invalid numbers and empty names."""
    stdout.write("Category count: ")
    stdout.flush()
    count = _read_count(stdin, stdout)

    categories: list[Category] = []
    for index in range(count):
        stdout.write(f"Category {index}\n\tCategory name: ")
        stdout.flush()
        name = _read_name(stdin, stdout)
        stdout.write("\tCategory size: ")
        stdout.flush()
        size = _read_count(stdin, stdout, retry_prefix="\t")
        categories.append(Category(name=name, size=size))
    return categories


def get_categories(
    method: InputMethod,
    category_file: Path,
    stdin: TextIO,
    stdout: TextIO,
) -> list[Category]:
    if method is InputMethod.FILE:
        logger.info(f"Reading categories from {category_file}")
        return load_categories_from_file(category_file)
    return read_categories_interactive(stdin, stdout)


__all__ = [
    "Category",
    "InputMethod",
    "get_categories",
    "load_categories_from_file",
    "parse_category_lines",
    "parse_size",
    "read_categories_interactive",
]
