"""
sqlindent - lexical SQL re-indenting toolkit.

format_sql() re-indents a SQL string in one pass over its tokens.
The connection wrappers forward DB-API calls to a driver connection and can
log executed SQL in re-indented form.
"""

from .formatting import RESERVED_KEYWORDS, Token, format_sql, is_reserved, tokenize
from .connection import DelegateConnection, DelegateCursor, FormattingConnection

__all__ = [
  "DelegateConnection",
  "DelegateCursor",
  "FormattingConnection",
  "RESERVED_KEYWORDS",
  "Token",
  "format_sql",
  "is_reserved",
  "tokenize",
]
