"""
sqlindent - Lexical SQL re-indenting toolkit
Copyright © 2025 Ilona Tag

This file is part of sqlindent.

sqlindent is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

sqlindent is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with sqlindent. If not, see <https://www.gnu.org/licenses/>.

Contact: <https://github.com/elevata-labs>.
"""

from django.apps import AppConfig

class SqlindentConfig(AppConfig):
  name = "sqlindent"
  label = "sqlindent"
  verbose_name = "SQL Indent"

  def ready(self) -> None:
    # Fail early if the keyword table was edited out of order
    from .formatting.keywords import assert_reserved_keywords_sorted
    assert_reserved_keywords_sorted()
