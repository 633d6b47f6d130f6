"""
Lexical SQL re-indenter.

Splits SQL into delimiter and word tokens and re-emits them with line breaks
and indentation driven by reserved keywords and bracket/comma delimiters.
"""

from .engine import FormatterState, format_sql
from .keywords import RESERVED_KEYWORDS, assert_reserved_keywords_sorted, is_reserved
from .tokenizer import Token, tokenize

__all__ = [
  "FormatterState",
  "RESERVED_KEYWORDS",
  "Token",
  "assert_reserved_keywords_sorted",
  "format_sql",
  "is_reserved",
  "tokenize",
]
