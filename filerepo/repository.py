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

"""The :class:`FileRepo` façade.

Usage::

    repo = FileRepo(Path(__file__).parent / "sql", suffix=".sql",
                    parse_references=True, cache=True)
    sql = await repo.load("reports/monthly")
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from filerepo.errors import ConfigurationError
from filerepo.references import ReferenceParser, parse_references as default_parser
from filerepo.resolver import MAX_DEPTH, Resolver
from filerepo.store import ResourceStore

logger = logging.getLogger(__name__)


def _select_parser(option: bool | ReferenceParser | None) -> ReferenceParser | None:
    if option is None or option is False:
        return None
    if option is True:
        return default_parser
    if callable(option):
        return option
    raise ConfigurationError(
        f"parse_references must be a bool or a callable, got {type(option).__name__}"
    )


class FileRepo:
    """Load text resources from a directory tree, splicing in references.

    Args:
        base_dir: Root directory of the resource tree.  Must exist.
        suffix: Appended to every resource name before lookup.
        cache: Memoise top-level results for the lifetime of this instance.
            Entries are never evicted.
        encoding: Encoding used to decode resource files.
        parse_references: ``False`` to return raw text, ``True`` for the
            default ``${name}`` syntax, or a custom reference parser.
        max_depth: Reference nesting bound used to detect loops.

    Raises:
        ConfigurationError: If *base_dir* is missing or not a directory, or
            *parse_references* is neither a bool nor callable.
    """

    def __init__(
        self,
        base_dir: str | Path,
        *,
        suffix: str = "",
        cache: bool = False,
        encoding: str = "utf-8",
        parse_references: bool | ReferenceParser = False,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        path = Path(base_dir).expanduser()
        if not path.exists():
            raise ConfigurationError(f"base_dir does not exist: {path}")
        if not path.is_dir():
            raise ConfigurationError(f"base_dir is not a directory: {path}")

        self._store = ResourceStore(path, suffix=suffix, encoding=encoding)
        self._resolver = Resolver(
            self._store,
            parser=_select_parser(parse_references),
            cache={} if cache else None,
            max_depth=max_depth,
        )
        logger.debug(
            "FileRepo at %s (suffix=%r, cache=%s, references=%s)",
            path, suffix, cache, self.parses_references,
        )

    @property
    def base_dir(self) -> Path:
        return self._store.base_dir

    @property
    def suffix(self) -> str:
        return self._store.suffix

    @property
    def encoding(self) -> str:
        return self._store.encoding

    @property
    def cache_enabled(self) -> bool:
        return self._resolver.cache is not None

    @property
    def parses_references(self) -> bool:
        return self._resolver.parser is not None

    async def load(self, name: str) -> str:
        """Return the fully resolved text of *name*.

        File reads run in a worker thread.  Concurrent loads of the same
        name are not coalesced; with caching on, each may resolve and store
        the same result.

        Raises:
            ResourceNotFoundError: If *name* or anything it references is
                missing.
            ReferenceDepthError: If references nest ``max_depth`` deep.
        """
        return await asyncio.to_thread(self._resolver.resolve, name, 0)

    def load_sync(self, name: str) -> str:
        """Blocking variant of :meth:`load`."""
        return self._resolver.resolve(name, 0)

    def path_for(self, name: str) -> Path:
        """Return the file that backs *name*."""
        return self._store.path_for(name)

    def has(self, name: str) -> bool:
        """Check whether a resource file exists for *name*."""
        return self._store.exists(name)
