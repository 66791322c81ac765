# src/bundle_launcher/__init__.py
"""Application bundle launcher."""

APP_NAME = "Application Launcher"
__version__ = "1.0.0"
