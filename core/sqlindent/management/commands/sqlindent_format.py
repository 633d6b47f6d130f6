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

import logging
import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from sqlindent.formatting import format_sql

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


class Command(BaseCommand):
  help = (
    "Re-indent SQL read from files or stdin.\n\n"
    "Examples:\n"
    "  python manage.py sqlindent_format query.sql\n"
    "  cat query.sql | python manage.py sqlindent_format\n"
    "  python manage.py sqlindent_format --in-place a.sql b.sql\n"
  )

  def add_arguments(self, parser):
    parser.add_argument(
      "paths",
      nargs="*",
      help="SQL files to format. Omit or use '-' to read from stdin.",
    )
    parser.add_argument(
      "--in-place",
      action="store_true",
      help="Rewrite the given files instead of printing the result.",
    )
    parser.add_argument(
      "--encoding",
      default="utf-8",
      help="Encoding used to read and write files (default: utf-8).",
    )

  def handle(self, *args, **options):
    paths = list(options.get("paths") or []) or [STDIN_MARKER]
    in_place = bool(options.get("in_place"))
    encoding = options.get("encoding") or "utf-8"

    if in_place and STDIN_MARKER in paths:
      raise CommandError("--in-place cannot be used when reading from stdin.")

    if in_place:
      for path in paths:
        self._rewrite(Path(path), encoding)
      self.stdout.write(self.style.SUCCESS(f"Formatted {len(paths)} file(s)."))
      return

    with_headers = len(paths) > 1
    for path in paths:
      sql = self._read(path, encoding)
      if with_headers:
        self.stdout.write(f"-- {path}")
      self.stdout.write(format_sql(sql))

  # ---------------------------------------------------------------------------
  # Helpers
  # ---------------------------------------------------------------------------
  def _read(self, path: str, encoding: str) -> str:
    if path == STDIN_MARKER:
      logger.info("Formatting SQL from stdin")
      return self._read_stdin(encoding)

    logger.info("Formatting SQL from %s", path)
    try:
      # newline="" keeps \r\n intact; \r is a delimiter of its own.
      with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()
    except (OSError, UnicodeDecodeError) as exc:
      raise CommandError(f"Cannot read {path}: {exc}") from exc

  def _rewrite(self, path: Path, encoding: str) -> None:
    sql = self._read(str(path), encoding)
    try:
      with open(path, "w", encoding=encoding, newline="") as f:
        f.write(format_sql(sql))
    except OSError as exc:
      raise CommandError(f"Cannot write {path}: {exc}") from exc
    logger.info("Rewrote %s", path)

  def _read_stdin(self, encoding: str) -> str:
    # Text-mode stdin translates \r\n; decode the raw bytes when available.
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
      return sys.stdin.read()
    try:
      return buffer.read().decode(encoding)
    except UnicodeDecodeError as exc:
      raise CommandError(f"Cannot read stdin: {exc}") from exc
