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

"""Jinja2 loader backed by a :class:`~filerepo.FileRepo`.

``env.get_template("reports/monthly")`` resolves the resource through the
repository first, so every ``${...}`` reference is already spliced in when
Jinja2 compiles the source.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from jinja2 import BaseLoader, Environment, TemplateNotFound

from filerepo.errors import ResourceNotFoundError
from filerepo.repository import FileRepo

logger = logging.getLogger(__name__)


class RepoLoader(BaseLoader):
    """Jinja2 loader that reads resolved resources from a repository.

    Without repository caching, templates are reported stale on every
    access so edits to any referenced fragment are picked up.
    """

    def __init__(self, repo: FileRepo) -> None:
        self.repo = repo

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        try:
            source = self.repo.load_sync(template)
        except ResourceNotFoundError as exc:
            if exc.name != template:
                raise
            raise TemplateNotFound(template) from exc
        path = self.repo.path_for(template)
        cached = self.repo.cache_enabled
        logger.debug("Loaded template %s from %s", template, path)
        return source, str(path), lambda: cached
