"""
Orders UI: a Reflex application for browsing sales orders and customer credits.

This package provides a web interface over a remote paginated list API.
Browsing switches between server-side pagination and client-side search
over a cached full result set, while keeping one consistent page of
records and one consistent summary.

Subpackages:
- browse: Debouncer, scope keys, result cache, aggregation and the fetch orchestrator
- components: Reflex UI components
- models: Record dataclasses and view models
- services: List API access (HTTP and demo implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
