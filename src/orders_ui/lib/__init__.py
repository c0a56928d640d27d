"""
Local library modules shared across the Orders UI.

Modules:
    logs: Logging utilities
    clients: HTTP session factory for the remote list API
"""

from orders_ui.lib import clients, logs

__all__ = ["clients", "logs"]
