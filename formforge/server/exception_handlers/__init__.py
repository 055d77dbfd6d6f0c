"""Exception handlers registered on the FastAPI application."""

from .global_handler import auth_exception_handler, global_exception_handler, setup_exception_handlers

__all__ = ["auth_exception_handler", "global_exception_handler", "setup_exception_handlers"]
