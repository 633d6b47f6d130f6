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

from dataclasses import dataclass, field

from sqlindent.constants import CLOSE_PAREN, COMMA, INDENT_WIDTH, NEWLINE
from sqlindent.formatting.keywords import is_reserved
from sqlindent.formatting.tokenizer import Token, tokenize


def _indent(depth: int) -> str:
  # Negative depth pads with nothing; depth itself is never clamped.
  return NEWLINE + " " * (depth * INDENT_WIDTH)


@dataclass
class FormatterState:
  """
  Per-call state of the indentation engine.

  depth:              current indentation level
  last_reserved:      whether the previous word was a reserved keyword
  last_delim_non_ws:  whether the previous delimiter was structural
  """

  depth: int = 0
  last_reserved: bool = True
  last_delim_non_ws: bool = False
  parts: list[str] = field(default_factory=list)

  def feed(self, token: Token) -> "FormatterState":
    if token.delimiter:
      self._feed_delimiter(token)
    else:
      self._feed_word(token)
    return self

  def _feed_delimiter(self, token: Token) -> None:
    text = token.text

    if text == CLOSE_PAREN:
      self.parts.append(_indent(self.depth))
      self.parts.append(text)
    elif not self.last_delim_non_ws:
      self.parts.append(text)

    # Line break after a comma, even when the comma itself was collapsed.
    if text == COMMA:
      self.parts.append(_indent(self.depth))

    self.last_delim_non_ws = token.is_structural

  def _feed_word(self, token: Token) -> None:
    self.last_delim_non_ws = False
    reserved = is_reserved(token.text)

    if reserved and not self.last_reserved:
      self.depth -= 1
      self.parts.append(NEWLINE)
    elif not reserved and self.last_reserved:
      self.depth += 1
      self.parts.append(_indent(self.depth))

    self.last_reserved = reserved
    self.parts.append(token.text)

  def getvalue(self) -> str:
    return "".join(self.parts)


def format_sql(sql: str) -> str:
  """
  Re-indent `sql` ("pretty print") in a single pass over its tokens.

  This is a lexical filter, not a parser: nothing is validated, unbalanced
  parentheses and non-SQL text simply produce unusual indentation. Reserved
  keywords are matched case-sensitively, so lowercase SQL only gets the
  leading indent.
  """
  state = FormatterState()
  for token in tokenize(sql):
    state.feed(token)
  return state.getvalue()
