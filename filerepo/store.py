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

"""Raw resource access on disk.

A resource named ``foo/bar`` with suffix ``.sql`` lives at
``<base_dir>/foo/bar.sql``.  Text is returned exactly as stored: newlines
are not translated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from filerepo.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)


class ResourceStore:
    """Reads named text files below a base directory.

    Args:
        base_dir: Root of the resource tree.
        suffix: Appended to every resource name (e.g. ``".sql"``).
        encoding: Text encoding used for reads.
    """

    def __init__(
        self,
        base_dir: Path,
        suffix: str = "",
        encoding: str = "utf-8",
    ) -> None:
        self.base_dir = base_dir
        self.suffix = suffix
        self.encoding = encoding

    def path_for(self, name: str) -> Path:
        """Return the file for *name*; a leading slash stays under ``base_dir``."""
        return self.base_dir / f"{name.lstrip('/')}{self.suffix}"

    def exists(self, name: str) -> bool:
        """Check whether *name* maps to an existing file."""
        return self.path_for(name).is_file()

    def read(self, name: str) -> str:
        """Return the raw text of *name*.

        Raises :class:`ResourceNotFoundError` if there is no file for it.
        Other I/O and decoding errors propagate unchanged.
        """
        path = self.path_for(name)
        try:
            with open(path, encoding=self.encoding, newline="") as fh:
                text = fh.read()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise ResourceNotFoundError(name, path) from exc
        logger.debug("Read %s (%d chars)", path, len(text))
        return text
