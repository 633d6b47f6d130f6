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

import pytest


# -------------------------------------------------------------------
# Environment isolation
# -------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_sqlindent_env(monkeypatch):
  """SQLINDENT_* env vars from the developer shell must not leak into tests."""
  for name in ("SQLINDENT_LOG_SQL", "SQLINDENT_LOG_LEVEL"):
    monkeypatch.delenv(name, raising=False)


# -------------------------------------------------------------------
# Fake DB-API driver objects
# -------------------------------------------------------------------
class FakeCursor:
  """Records every call; execute/executemany return the cursor like most drivers."""

  def __init__(self, rows=None, error=None):
    self.calls = []
    self.rows = list(rows or [])
    self.error = error
    self.closed = False

  def execute(self, operation, *args, **kwargs):
    self.calls.append(("execute", operation, args, kwargs))
    if self.error is not None:
      raise self.error
    return self

  def executemany(self, operation, seq_of_parameters, *args, **kwargs):
    self.calls.append(("executemany", operation, list(seq_of_parameters), kwargs))
    if self.error is not None:
      raise self.error
    return self

  def fetchone(self):
    return self.rows[0] if self.rows else None

  def fetchmany(self, size=1):
    return self.rows[:size]

  def fetchall(self):
    return list(self.rows)

  def close(self):
    self.closed = True

  def __iter__(self):
    return iter(self.rows)


class FakeConnection:
  """Minimal DB-API connection with a couple of driver extensions."""

  def __init__(self, cursor=None):
    self.calls = []
    self.autocommit = False
    self._cursor = cursor or FakeCursor()
    self.entered = 0
    self.exited = []

  def cursor(self, *args, **kwargs):
    self.calls.append(("cursor", args, kwargs))
    return self._cursor

  def commit(self):
    self.calls.append(("commit",))

  def rollback(self, *args, **kwargs):
    self.calls.append(("rollback", args, kwargs))

  def close(self):
    self.calls.append(("close",))

  def set_savepoint(self, name=None):
    return f"savepoint:{name}"

  def execute(self, operation, *args, **kwargs):
    return self._cursor.execute(operation, *args, **kwargs)

  def __enter__(self):
    self.entered += 1
    return self

  def __exit__(self, exc_type, exc, tb):
    self.exited.append(exc_type)
    return False

  def __str__(self):
    return "fake-connection"


@pytest.fixture
def fake_cursor():
  return FakeCursor(rows=[(1, "a"), (2, "b")])


@pytest.fixture
def fake_connection(fake_cursor):
  return FakeConnection(cursor=fake_cursor)
