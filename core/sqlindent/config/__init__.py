"""
Runtime configuration for sqlindent.

Values are resolved from explicit arguments, SQLINDENT_* environment
variables and the SQLINDENT Django setting, in that order.
"""

from .options import resolve_log_level, resolve_log_sql

__all__ = ["resolve_log_level", "resolve_log_sql"]
