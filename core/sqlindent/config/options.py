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
import os
from typing import Any, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from sqlindent.constants import ENV_PREFIX, SETTINGS_KEY


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


# -----------------------------------------------------------------------------
# Raw sources
# -----------------------------------------------------------------------------
def env_value(name: str) -> Optional[str]:
  """Return SQLINDENT_<name> from the environment, or None if unset/empty."""
  val = os.getenv(f"{ENV_PREFIX}{name}")
  return val if val not in (None, "") else None


def setting_value(name: str) -> Any:
  """
  Return settings.SQLINDENT[name], or None.
  Missing settings (no settings module configured yet) count as absent.
  """
  try:
    conf = getattr(settings, SETTINGS_KEY, None) or {}
  except ImproperlyConfigured:
    return None
  return conf.get(name)


def _to_bool(value: Any, source: str) -> bool:
  if isinstance(value, bool):
    return value
  text = str(value).strip().lower()
  if text in _TRUE_VALUES:
    return True
  if text in _FALSE_VALUES:
    return False
  raise ValueError(f"Invalid boolean value {value!r} from {source}.")


def _to_level(value: Any, source: str) -> int:
  if isinstance(value, bool):
    raise ValueError(f"Invalid log level {value!r} from {source}.")
  if isinstance(value, int):
    return value
  text = str(value).strip()
  if text.isdecimal():
    return int(text)
  level = logging.getLevelName(text.upper())
  if not isinstance(level, int):
    raise ValueError(f"Unknown log level {value!r} from {source}.")
  return level


# -----------------------------------------------------------------------------
# Resolved options
# -----------------------------------------------------------------------------
def resolve_log_sql(explicit: Optional[bool] = None) -> bool:
  """
  Whether executed SQL should be logged in re-indented form.

  Resolution order:
    1. explicit argument
    2. SQLINDENT_LOG_SQL env var
    3. settings.SQLINDENT["LOG_SQL"]
    4. False
  """
  if explicit is not None:
    return bool(explicit)

  env = env_value("LOG_SQL")
  if env is not None:
    return _to_bool(env, f"{ENV_PREFIX}LOG_SQL")

  conf = setting_value("LOG_SQL")
  if conf is not None:
    return _to_bool(conf, f"settings.{SETTINGS_KEY}['LOG_SQL']")

  return False


def resolve_log_level(explicit: Optional[int | str] = None) -> int:
  """
  Level used for SQL log records.

  Resolution order:
    1. explicit argument (int or level name)
    2. SQLINDENT_LOG_LEVEL env var
    3. settings.SQLINDENT["LOG_LEVEL"]
    4. DEBUG

  Raises:
      ValueError: if a level name cannot be resolved.
  """
  if explicit is not None:
    return _to_level(explicit, "argument")

  env = env_value("LOG_LEVEL")
  if env is not None:
    return _to_level(env, f"{ENV_PREFIX}LOG_LEVEL")

  conf = setting_value("LOG_LEVEL")
  if conf is not None:
    return _to_level(conf, f"settings.{SETTINGS_KEY}['LOG_LEVEL']")

  return logging.DEBUG
