"""
File line matchers for asserting on generated project files.

A file matches `contains_lines_in_relative_order(m1, m2, ...)` when a single
pass over its lines finds a line satisfying m1, then a later line satisfying
m2, and so on. Lines in between are ignored.

    assert_that(path, contains_lines_in_relative_order("line2", "line4"))
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineMatcher:
    """A single-line predicate with a human-readable description."""
    predicate: Callable[[str], bool]
    description: str

    def __call__(self, line: str) -> bool:
        return bool(self.predicate(line))

    def __str__(self) -> str:
        return self.description


def equal_to(expected: str) -> LineMatcher:
    return LineMatcher(lambda line: line == expected, repr(expected))


def contains_string(fragment: str) -> LineMatcher:
    return LineMatcher(lambda line: fragment in line, f"a string containing {fragment!r}")


def starts_with(prefix: str) -> LineMatcher:
    return LineMatcher(lambda line: line.startswith(prefix), f"a string starting with {prefix!r}")


def matches_pattern(pattern: str) -> LineMatcher:
    compiled = re.compile(pattern)
    return LineMatcher(lambda line: compiled.search(line) is not None,
                       f"a string matching the pattern {pattern!r}")


def line(predicate: Callable[[str], bool], description: str) -> LineMatcher:
    return LineMatcher(predicate, description)


LineMatcherLike = Union[LineMatcher, str]


def _as_matcher(item: LineMatcherLike) -> LineMatcher:
    if isinstance(item, LineMatcher):
        return item
    if isinstance(item, str):
        return equal_to(item)
    raise TypeError(f"expected a LineMatcher or str, got {type(item).__name__}")


class ContainsInRelativeOrder:
    """Matches a list of lines containing the matchers' lines in order."""

    def __init__(self, matchers: Sequence[LineMatcher]):
        self.matchers = list(matchers)

    def _scan(self, lines: Sequence[str]) -> Tuple[int, Optional[str]]:
        # Returns how many matchers were satisfied and the last line that satisfied one.
        index = 0
        last_matched = None
        for text in lines:
            if index == len(self.matchers):
                break
            if self.matchers[index](text):
                last_matched = text
                index += 1
        return index, last_matched

    def matches(self, lines: Sequence[str]) -> bool:
        index, _ = self._scan(lines)
        return index == len(self.matchers)

    def describe_to(self) -> str:
        inner = ", ".join(m.description for m in self.matchers)
        return f"iterable containing [{inner}] in relative order"

    def describe_mismatch(self, lines: Sequence[str]) -> str:
        index, last_matched = self._scan(lines)
        if index == len(self.matchers):
            return ""
        failed = self.matchers[index]
        where = f"line matcher {index + 1} of {len(self.matchers)}"
        if last_matched is None:
            return f"{failed.description} ({where}) was not found"
        return f"{failed.description} ({where}) was not found after {last_matched!r}"


class FileContainsLines:
    """Matches a file path whose lines satisfy a delegate line-list matcher."""

    def __init__(self, delegate: ContainsInRelativeOrder):
        self.delegate = delegate

    def describe_to(self) -> str:
        return f"a file with lines that are an {self.delegate.describe_to()}"

    def matches(self, file: Any) -> bool:
        lines, _ = self._read_lines_safely(file)
        if lines is None:
            return False
        return self.delegate.matches(lines)

    def describe_mismatch(self, file: Any) -> str:
        lines, reason = self._read_lines_safely(file)
        if lines is None:
            return reason
        mismatch = self.delegate.describe_mismatch(lines)
        if not mismatch:
            return ""
        return f"{mismatch} in file {os.fspath(file)!r} with lines {lines!r}"

    def _read_lines_safely(self, file: Any) -> Tuple[Optional[List[str]], str]:
        """Read the lines of `file`, or return None and the reason it could not be read."""
        if file is None:
            return None, "was None"
        if not isinstance(file, (str, os.PathLike)):
            return None, f"was a {type(file).__name__} and not a file"
        try:
            with open(file, encoding="utf-8") as fh:
                return fh.read().splitlines(), ""
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("unable to read %s: %s", file, e)
            return None, f"was unable to read file due to the {type(e).__name__}: {e}"


def contains_lines_in_relative_order(*line_matchers: LineMatcherLike) -> FileContainsLines:
    """Match a file whose lines satisfy `line_matchers` in the same relative order.

    Plain strings are compared for equality with whole lines (without line
    terminators). A file with lines "line1".."line5" matches
    ``contains_lines_in_relative_order("line2", "line4")``.
    """
    return FileContainsLines(ContainsInRelativeOrder([_as_matcher(m) for m in line_matchers]))


def assert_that(actual: Any, matcher: FileContainsLines, reason: str = "") -> None:
    if matcher.matches(actual):
        return
    message = (f"{reason}\nExpected: {matcher.describe_to()}\n"
               f"     but: {matcher.describe_mismatch(actual)}")
    raise AssertionError(message.lstrip("\n"))
