"""Utility modules for Cortado.

Provides:
- logger: get_logger for namespaced logging
"""

from cortado.utils.logger import get_logger

__all__ = ["get_logger"]
