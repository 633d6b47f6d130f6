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
Minimal Django site for running sqlindent management commands and tests.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("SQLINDENT_SECRET_KEY", "sqlindent-dev-only")
DEBUG = os.getenv("SQLINDENT_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
  "django.contrib.contenttypes",
  "sqlindent",
]

DATABASES = {
  "default": {
    "ENGINE": "django.db.backends.sqlite3",
    "NAME": ":memory:",
  }
}

TEMPLATES = [
  {
    "BACKEND": "django.template.backends.django.DjangoTemplates",
    "DIRS": [],
    "APP_DIRS": True,
    "OPTIONS": {},
  }
]

USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# App configuration; SQLINDENT_* env vars take precedence.
SQLINDENT = {
  "LOG_SQL": False,
  "LOG_LEVEL": "DEBUG",
}

LOGGING = {
  "version": 1,
  "disable_existing_loggers": False,
  "formatters": {
    "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
  },
  "handlers": {
    "console": {"class": "logging.StreamHandler", "formatter": "plain"},
  },
  "loggers": {
    "sqlindent": {
      "handlers": ["console"],
      "level": os.getenv("SQLINDENT_LOGGING_LEVEL", "INFO"),
    },
  },
}
