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

"""
Shared constants for the SQL re-indenter.

Delimiter characters are emitted as tokens of their own. The whitespace subset
never triggers structural formatting; the structural subset drives line breaks.
"""

WHITESPACE_DELIMITERS = " \t\n\r\f"
STRUCTURAL_DELIMITERS = "(),"
DELIMITERS = WHITESPACE_DELIMITERS + STRUCTURAL_DELIMITERS

OPEN_PAREN = "("
CLOSE_PAREN = ")"
COMMA = ","

NEWLINE = "\n"

# Spaces of padding per depth unit
INDENT_WIDTH = 2

# Django setting holding the app configuration (dict)
SETTINGS_KEY = "SQLINDENT"
ENV_PREFIX = "SQLINDENT_"

SQL_LOGGER_NAME = "sqlindent.sql"
