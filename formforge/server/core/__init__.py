"""Server configuration, constants and request security dependencies."""
