"""Core infrastructure shared across FormForge: logging, cache, models and database."""
