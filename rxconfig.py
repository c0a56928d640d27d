"""Reflex configuration for the Orders UI application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("ORDERS_UI_PORT", "8000"))

config = rx.Config(
    app_name="orders_ui",
    # Use the src directory structure
    app_module_import="orders_ui.app",
    backend_port=APP_PORT,
)
