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

import os
import sys
from pathlib import Path

import pytest


def main():
  """Configure Django and run pytest."""
  root = Path(__file__).resolve().parent
  core = root / "core"

  # Ensure 'core' is on sys.path so 'sqlindent' and 'sqlindent_site' can be imported
  if str(core) not in sys.path:
    sys.path.insert(0, str(core))

  # Match manage.py
  os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sqlindent_site.settings")

  # Run tests in core/tests
  return pytest.main([str(core / "tests")])


if __name__ == "__main__":
  raise SystemExit(main())
