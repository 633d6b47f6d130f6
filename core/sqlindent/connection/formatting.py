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

import logging
from typing import Any, Optional

from sqlindent.config import resolve_log_level, resolve_log_sql
from sqlindent.constants import SQL_LOGGER_NAME
from sqlindent.formatting import format_sql

from .delegate import DelegateConnection, DelegateCursor

sql_logger = logging.getLogger(SQL_LOGGER_NAME)


class _SqlLogSettings:
  """Resolved once per connection and shared with its cursors."""

  def __init__(self, *, enabled: bool, level: int, logger: logging.Logger):
    self.enabled = enabled
    self.level = level
    self.logger = logger

  def log(self, sql: Any, *, many: bool = False) -> None:
    if not self.enabled or not isinstance(sql, str):
      return
    if not self.logger.isEnabledFor(self.level):
      return
    label = "executemany" if many else "execute"
    self.logger.log(self.level, "%s:%s", label, format_sql(sql))


class FormattingCursor(DelegateCursor):
  """Cursor that logs re-indented SQL before forwarding it unchanged."""

  _sql_log: Optional[_SqlLogSettings] = None

  def __init__(self, target: Any, sql_log: _SqlLogSettings):
    super().__init__(target)
    self._sql_log = sql_log

  def execute(self, operation, *args, **kwargs):
    self._sql_log.log(operation)
    return super().execute(operation, *args, **kwargs)

  def executemany(self, operation, seq_of_parameters, *args, **kwargs):
    self._sql_log.log(operation, many=True)
    return super().executemany(operation, seq_of_parameters, *args, **kwargs)


class FormattingConnection(DelegateConnection):
  """
  Connection wrapper that logs every executed statement in re-indented form.

  Example:
    conn = FormattingConnection(duckdb.connect(":memory:"), log_sql=True)
    conn.execute("SELECT a, b FROM t WHERE a = 1")

  Logging is controlled by `log_sql` / `level` or, when omitted, by
  SQLINDENT_LOG_SQL / SQLINDENT_LOG_LEVEL and settings.SQLINDENT.
  The SQL handed to the target is never modified.
  """

  _sql_log: Optional[_SqlLogSettings] = None

  def __init__(
    self,
    target: Any,
    *,
    log_sql: Optional[bool] = None,
    level: Optional[int | str] = None,
    logger: Optional[logging.Logger] = None,
  ):
    super().__init__(target)
    self._sql_log = _SqlLogSettings(
      enabled=resolve_log_sql(log_sql),
      level=resolve_log_level(level),
      logger=logger or sql_logger,
    )

  @property
  def log_sql(self) -> bool:
    return self._sql_log.enabled

  def cursor(self, *args, **kwargs) -> FormattingCursor:
    return FormattingCursor(super().cursor(*args, **kwargs), self._sql_log)

  def execute(self, operation, *args, **kwargs):
    """
    Connection-level execute shortcut (sqlite3, DuckDB).
    Drivers without it raise AttributeError as usual.
    """
    execute = self.target.execute
    self._sql_log.log(operation)
    return execute(operation, *args, **kwargs)

  def executemany(self, operation, seq_of_parameters, *args, **kwargs):
    executemany = self.target.executemany
    self._sql_log.log(operation, many=True)
    return executemany(operation, seq_of_parameters, *args, **kwargs)
