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

"""Jinja2 integration for rendering assembled resources.

filerepo only splices resources together; this loader hands the result to
Jinja2 when a caller also wants variables rendered.

Usage::

    from jinja2 import Environment
    from filerepo import FileRepo
    from filerepo.templates import RepoLoader

    repo = FileRepo("sql", suffix=".sql", parse_references=True)
    env = Environment(loader=RepoLoader(repo), keep_trailing_newline=True)
    sql = env.get_template("reports/monthly").render(since="2024-01-01")
"""

from filerepo.templates.loader import RepoLoader

__all__ = ["RepoLoader"]
