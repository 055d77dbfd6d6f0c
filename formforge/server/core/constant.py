"""Server-wide constants."""

PROJECT_NAME = "FormForge"
VERSION = "1.0.0"
API_V1_STR = "/api/v1"
