"""Mini README: Core package initializer for the Home Ledger application.

Exposes the logging helper so modules and scripts can obtain configured
loggers without importing the package internals. Heavier pieces (the web
application, the asset cache) are imported from their subpackages on demand.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
