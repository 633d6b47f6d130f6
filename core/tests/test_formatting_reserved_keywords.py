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
Reserved keyword table: exact-match lookup and the sorted-table guardrail.
"""

import pytest

from sqlindent.formatting import keywords as keywords_mod
from sqlindent.formatting.keywords import (
  RESERVED_KEYWORDS,
  assert_reserved_keywords_sorted,
  is_reserved,
)


def test_reserved_keywords_guardrail_passes():
  assert_reserved_keywords_sorted()


def test_reserved_keywords_have_expected_shape():
  assert list(RESERVED_KEYWORDS) == sorted(RESERVED_KEYWORDS)
  assert len(set(RESERVED_KEYWORDS)) == len(RESERVED_KEYWORDS) == 15
  assert all(kw == kw.upper() for kw in RESERVED_KEYWORDS)


@pytest.mark.parametrize("kw", RESERVED_KEYWORDS)
def test_every_keyword_is_reserved(kw):
  assert is_reserved(kw) is True


@pytest.mark.parametrize(
  "token",
  ["select", "Select", "SELECTED", "SELEC", "", "A", "ZZZ", "UNION", "INNER", " SELECT"],
)
def test_non_keywords_are_not_reserved(token):
  assert is_reserved(token) is False


def test_guardrail_rejects_unsorted_table(monkeypatch):
  monkeypatch.setattr(keywords_mod, "RESERVED_KEYWORDS", ("FROM", "ALL"))

  with pytest.raises(RuntimeError, match="sorts after"):
    keywords_mod.assert_reserved_keywords_sorted()


def test_guardrail_rejects_duplicates_and_lowercase(monkeypatch):
  monkeypatch.setattr(keywords_mod, "RESERVED_KEYWORDS", ("ALL", "ALL", "and"))

  with pytest.raises(RuntimeError) as excinfo:
    keywords_mod.assert_reserved_keywords_sorted()

  assert "duplicate keyword 'ALL'" in str(excinfo.value)
  assert "not uppercase: and" in str(excinfo.value)


def test_app_ready_runs_guardrail(monkeypatch):
  from django.apps import apps

  config = apps.get_app_config("sqlindent")
  config.ready()

  monkeypatch.setattr(keywords_mod, "RESERVED_KEYWORDS", ("WHERE", "ALL"))
  with pytest.raises(RuntimeError):
    config.ready()
