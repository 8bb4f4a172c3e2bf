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

"""Exceptions raised by filerepo.

Every error derives from :class:`FileRepoError` and additionally from the
builtin exception a caller would naturally catch for the same condition.
"""

from __future__ import annotations

from pathlib import Path


class FileRepoError(Exception):
    """Base class for all filerepo errors."""


class ConfigurationError(FileRepoError, ValueError):
    """Invalid repository configuration (e.g. a missing base directory)."""


class ResourceNotFoundError(FileRepoError, FileNotFoundError):
    """A requested or referenced resource does not exist."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Resource {name!r} not found: {path}")
        self.name = name
        self.path = path


class ReferenceDepthError(FileRepoError, RecursionError):
    """Reference resolution nested deeper than the configured bound.

    Raised both for genuine reference loops and for non-cyclic chains that
    are simply too deep; the two are not distinguished.
    """

    def __init__(self, name: str, depth: int) -> None:
        super().__init__(
            f"Exceeded maximum depth ({depth}) resolving {name!r}; "
            "HINT: Check if you have a loop in your references"
        )
        self.name = name
        self.depth = depth


CycleError = ReferenceDepthError
