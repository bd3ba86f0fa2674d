"""
FastAPI web layer: application factory, routers and templates.
"""

from .app import create_app, main

__all__ = ["create_app", "main"]
