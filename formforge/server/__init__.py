"""
FormForge Server Package.

This package hosts the web server around the authentication core.

Subpackages:
    api: FastAPI route definitions (health and version).
    core: Configuration, constants and authentication dependencies.
    exception_handlers: JSON error mapping.
"""
