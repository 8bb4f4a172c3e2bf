# filerepo — compose text resources from a directory tree
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Reference parsing: find ``${name}`` placeholders in resource text.

A reference parser is any callable ``(text) -> iterable of Reference``.
The resolver treats it as an opaque capability, so callers can plug in a
different token syntax either by writing their own function or by building
one from a regex with :func:`regex_parser`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Reference:
    """A placeholder that refers to another resource.

    Attributes:
        name: Name of the referenced resource, relative to the directory of
            the resource containing the placeholder.
        token: Exact text in the source that gets replaced, e.g. ``${foo}``.
    """

    name: str
    token: str


ReferenceParser = Callable[[str], Iterable[Reference]]

REFERENCE_PATTERN = re.compile(r"\$\{([A-Za-z0-9_./-]+)\}")


def regex_parser(pattern: str | re.Pattern[str]) -> ReferenceParser:
    """Build a reference parser from a regular expression.

    Group 1 of *pattern* is taken as the referenced name and the whole match
    as the token.  Text is scanned line by line and references are
    deduplicated by name, keeping the first token seen for each.

    Raises :class:`ValueError` if *pattern* has no capturing group.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    if regex.groups < 1:
        raise ValueError(
            f"Reference pattern {regex.pattern!r} needs a capturing group for the name"
        )

    def parse(text: str) -> list[Reference]:
        found: dict[str, Reference] = {}
        for line in text.split("\n"):
            for match in regex.finditer(line):
                name = match.group(1)
                if name and name not in found:
                    found[name] = Reference(name=name, token=match.group(0))
        return list(found.values())

    return parse


_default_parser = regex_parser(REFERENCE_PATTERN)


def parse_references(text: str) -> list[Reference]:
    """Return the distinct ``${name}`` references in *text*, in discovery order.

    Names may contain letters, digits and ``_ . / -``.  Text without any
    placeholder yields an empty list.
    """
    return _default_parser(text)
