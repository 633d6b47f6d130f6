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

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from sqlindent.constants import DELIMITERS, STRUCTURAL_DELIMITERS, WHITESPACE_DELIMITERS


# One delimiter character, or a maximal run of anything else.
_DELIM_CLASS = re.escape(DELIMITERS)
_TOKEN_RE = re.compile(rf"[{_DELIM_CLASS}]|[^{_DELIM_CLASS}]+")


@dataclass(frozen=True)
class Token:
  """A slice of the input: either a single delimiter character or a word."""

  text: str
  delimiter: bool

  @property
  def is_whitespace(self) -> bool:
    return self.delimiter and self.text in WHITESPACE_DELIMITERS

  @property
  def is_structural(self) -> bool:
    return self.delimiter and self.text in STRUCTURAL_DELIMITERS


def tokenize(sql: str) -> Iterator[Token]:
  """
  Split `sql` into tokens.

  - every delimiter character becomes its own single-character token
  - every maximal run of non-delimiter characters becomes one word token
  - empty tokens are never produced

  Joining the token texts in order gives back `sql` unchanged.
  """
  if not isinstance(sql, str):
    raise TypeError(f"tokenize() expects str, got {type(sql).__name__}")

  for match in _TOKEN_RE.finditer(sql):
    text = match.group()
    yield Token(text=text, delimiter=len(text) == 1 and text in DELIMITERS)
