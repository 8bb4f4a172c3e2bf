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

"""Load text resources from a directory tree and splice ``${name}`` references.

Usage::

    from filerepo import FileRepo

    repo = FileRepo("sql", suffix=".sql", parse_references=True)
    query = await repo.load("reports/monthly")
"""

from filerepo.errors import (
    ConfigurationError,
    CycleError,
    FileRepoError,
    ReferenceDepthError,
    ResourceNotFoundError,
)
from filerepo.references import (
    REFERENCE_PATTERN,
    Reference,
    ReferenceParser,
    parse_references,
    regex_parser,
)
from filerepo.repository import FileRepo
from filerepo.resolver import MAX_DEPTH, Resolver, splice
from filerepo.store import ResourceStore

__all__ = [
    "FileRepo",
    "Resolver",
    "ResourceStore",
    "Reference",
    "ReferenceParser",
    "REFERENCE_PATTERN",
    "MAX_DEPTH",
    "parse_references",
    "regex_parser",
    "splice",
    "FileRepoError",
    "ConfigurationError",
    "ResourceNotFoundError",
    "ReferenceDepthError",
    "CycleError",
]
