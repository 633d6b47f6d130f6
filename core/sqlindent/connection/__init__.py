"""
DB-API connection wrappers.

DelegateConnection/DelegateCursor forward every operation to a wrapped
driver object unchanged. FormattingConnection builds on them to log
executed SQL in re-indented form.
"""

from .delegate import Delegate, DelegateConnection, DelegateCursor
from .formatting import FormattingConnection, FormattingCursor

__all__ = [
  "Delegate",
  "DelegateConnection",
  "DelegateCursor",
  "FormattingConnection",
  "FormattingCursor",
]
