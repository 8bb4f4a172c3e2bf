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

"""Recursive reference resolution.

Resolving a resource reads its raw text, asks the reference parser which
other resources it refers to, resolves each of those (relative to the
referring resource's directory) and splices the results back in.

Cycles are caught by bounding recursion depth rather than by tracking
visited names, so a non-cyclic chain that reaches the bound fails the same
way a loop does.

Only top-level results are cached.  How a referenced resource's trailing
newline is absorbed depends on where it is spliced, so intermediate results
are not reusable under the same key.  The cache is never evicted and grows
with the number of distinct names loaded.
"""

from __future__ import annotations

import logging
import posixpath

from filerepo.errors import ReferenceDepthError
from filerepo.references import ReferenceParser
from filerepo.store import ResourceStore

logger = logging.getLogger(__name__)

MAX_DEPTH = 10


def splice(text: str, token: str, value: str) -> str:
    """Replace *token* in *text* with *value* without adding blank lines.

    The first ``token + "\\n"`` is replaced by *value* as-is, so a line
    holding only the placeholder takes its newline from *value*.  Then the
    first remaining bare *token* is replaced by *value* with one trailing
    newline removed (if it has one).

    Each step touches only the first match; further occurrences of the same
    token stay literal.
    """
    text = text.replace(token + "\n", value, 1)
    if value.endswith("\n"):
        return text.replace(token, value[:-1], 1)
    return text.replace(token, value, 1)


def relative_name(referrer: str, name: str) -> str:
    """Resolve *name* against the directory of *referrer*.

    >>> relative_name("foo/bam", "baz")
    'foo/baz'
    >>> relative_name("complex", "baz")
    'baz'
    >>> relative_name("foo/main", "/shared/x")
    'foo/shared/x'
    """
    return posixpath.normpath(posixpath.join(posixpath.dirname(referrer), name.lstrip("/")))


class Resolver:
    """Resolve resources and their transitive references to flat text.

    Args:
        store: Source of raw resource text.
        parser: Reference parser, or ``None`` to return raw text untouched.
        cache: Mapping for top-level results, or ``None`` to disable caching.
        max_depth: Recursion bound; reaching it raises
            :class:`ReferenceDepthError`.
    """

    def __init__(
        self,
        store: ResourceStore,
        parser: ReferenceParser | None = None,
        cache: dict[str, str] | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self.store = store
        self.parser = parser
        self.cache = cache
        self.max_depth = max_depth

    def resolve(self, name: str, depth: int = 0) -> str:
        if self.cache is not None and depth == 0 and name in self.cache:
            logger.debug("Cache hit for %s", name)
            return self.cache[name]

        if depth >= self.max_depth:
            logger.warning("Reference depth %d reached at %s", depth, name)
            raise ReferenceDepthError(name, depth)

        text = self.store.read(name)

        if self.parser is not None:
            for reference in self.parser(text):
                target = relative_name(name, reference.name)
                value = self.resolve(target, depth + 1)
                logger.debug("Splicing %s into %s", target, name)
                text = splice(text, reference.token, value)

        if self.cache is not None and depth == 0:
            self.cache[name] = text
        return text
