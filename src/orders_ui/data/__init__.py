"""
Static and demo data for the Orders UI.

This package contains fixture data used by DemoListService for
development and demonstrations without a running backend.

Modules:
- demo_records: Generated sales and customer payloads in API shape
"""
