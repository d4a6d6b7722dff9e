"""
translink: translation relationship graph for CMS content records.
"""

from .core import TranslationCore, build_core, build_sql_core, configure_logging

__version__ = "1.0.0"

__all__ = [
    "TranslationCore",
    "build_core",
    "build_sql_core",
    "configure_logging",
]
