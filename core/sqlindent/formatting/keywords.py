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

"""
Reserved keyword table for the indentation engine.

Kept as a sorted tuple so membership is an exact, case-sensitive binary
search. Lowercase spellings ("select") are deliberately not reserved.
"""

from bisect import bisect_left

RESERVED_KEYWORDS: tuple[str, ...] = (
  "ALL",
  "AND",
  "BY",
  "DISTINCT",
  "FROM",
  "GROUP",
  "HAVING",
  "JOIN",
  "LEFT",
  "ON",
  "OR",
  "ORDER",
  "OUTER",
  "SELECT",
  "WHERE",
)


def is_reserved(token: str) -> bool:
  """Return True if `token` is exactly one of RESERVED_KEYWORDS."""
  i = bisect_left(RESERVED_KEYWORDS, token)
  return i < len(RESERVED_KEYWORDS) and RESERVED_KEYWORDS[i] == token


def assert_reserved_keywords_sorted() -> None:
  """
  Guardrail: the keyword table must stay sorted, unique and uppercase,
  otherwise the binary search in is_reserved() silently misses entries.
  """
  problems: list[str] = []

  for prev, cur in zip(RESERVED_KEYWORDS, RESERVED_KEYWORDS[1:]):
    if prev == cur:
      problems.append(f"duplicate keyword {cur!r}")
    elif prev > cur:
      problems.append(f"{prev!r} sorts after {cur!r}")

  not_upper = [kw for kw in RESERVED_KEYWORDS if kw != kw.upper()]
  if not_upper:
    problems.append("not uppercase: " + ", ".join(not_upper))

  if problems:
    raise RuntimeError(
      "RESERVED_KEYWORDS is malformed: " + "; ".join(problems)
    )
