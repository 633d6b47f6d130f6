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

from typing import Any


class Delegate:
  """
  Generic forwarding wrapper around a target object.

  Every attribute the wrapper does not define itself is looked up on the
  target, so driver-specific extensions (savepoints, autocommit,
  isolation_level, ...) stay reachable without being listed here.
  Subclasses override single operations and call super() for the rest.

  Errors raised by the target propagate unchanged.
  """

  def __init__(self, target: Any):
    if target is None:
      raise TypeError(f"{self.__class__.__name__} requires a target, got None.")
    object.__setattr__(self, "target", target)

  def __getattr__(self, name: str) -> Any:
    # Only called when normal lookup fails on the wrapper.
    target = self.__dict__.get("target")
    if target is None:
      raise AttributeError(name)
    return getattr(target, name)

  def __setattr__(self, name: str, value: Any) -> None:
    # Write through to attributes the target already owns (e.g. autocommit);
    # anything else is wrapper state.
    target = self.__dict__.get("target")
    if (
      name not in self.__dict__
      and not hasattr(type(self), name)
      and target is not None
      and hasattr(target, name)
    ):
      setattr(target, name, value)
      return
    object.__setattr__(self, name, value)

  # ---------------------------------------------------------------------------
  # Identity
  # ---------------------------------------------------------------------------
  def __eq__(self, other: object) -> bool:
    return self.target == other

  def __hash__(self) -> int:
    return hash(self.target)

  def __str__(self) -> str:
    return str(self.target)

  def __repr__(self) -> str:
    return f"<{self.__class__.__name__} target={self.target!r}>"

  # ---------------------------------------------------------------------------
  # Context manager
  # ---------------------------------------------------------------------------
  def __enter__(self):
    self.target.__enter__()
    return self

  def __exit__(self, exc_type, exc, tb):
    return self.target.__exit__(exc_type, exc, tb)


class DelegateConnection(Delegate):
  """
  DB-API 2.0 connection that delegates all calls to the target connection.
  """

  def cursor(self, *args, **kwargs):
    return self.target.cursor(*args, **kwargs)

  def commit(self):
    return self.target.commit()

  def rollback(self, *args, **kwargs):
    # Drivers with savepoint support accept extra arguments here.
    return self.target.rollback(*args, **kwargs)

  def close(self):
    return self.target.close()


class DelegateCursor(Delegate):
  """
  DB-API 2.0 cursor that delegates all calls to the target cursor.
  """

  def execute(self, operation, *args, **kwargs):
    return self.target.execute(operation, *args, **kwargs)

  def executemany(self, operation, seq_of_parameters, *args, **kwargs):
    return self.target.executemany(operation, seq_of_parameters, *args, **kwargs)

  def fetchone(self):
    return self.target.fetchone()

  def fetchmany(self, *args, **kwargs):
    return self.target.fetchmany(*args, **kwargs)

  def fetchall(self):
    return self.target.fetchall()

  def close(self):
    return self.target.close()

  def __iter__(self):
    return iter(self.target)
