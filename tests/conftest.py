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

"""Shared fixtures: a small tree of SQL fragments on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

SQL_FILES = {
    "test.sql": "SELECT 1 AS x\n",
    "test-sub.sql": "${test}\nWHERE 1 = 2\n",
    "foo/bam.sql": "-- Bam\nSELECT t.id\nFROM bam t\n",
    "foo/limited.sql": "${bam}\nLIMIT 1\n",
    "foo/up.sql": "${../test}\n",
    "baz.sql": "-- Baz\n${foo/bam}\n",
    "complex.sql": "-- Complex\n${baz}\n",
    "literal.sql": "SELECT '${test}' AS raw\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for name, text in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
    return root


@pytest.fixture
def sql_dir(tmp_path):
    return write_tree(tmp_path / "sql", SQL_FILES)
