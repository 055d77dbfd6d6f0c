"""FormForge.

Backend core of the FormForge form builder.

Core subpackages
----------------

- ``formforge.auth``: password hashing, JWT access/refresh tokens with
  rotation, email verification codes and the ``AuthService``.
- ``formforge.core``: configuration-driven logging, the Redis client, domain
  enums and value models, and the SQLModel entities and repositories for
  users, organizations, forms, form elements and submissions.
- ``formforge.server``: the FastAPI host, request authentication dependencies
  and exception handlers.

Typical workflow
----------------

1. ``register`` creates an unverified account and sends a 6-digit code.
2. ``verify_email`` confirms the code.
3. ``login`` returns an access token and a persisted refresh token.
4. ``refresh_tokens`` rotates the refresh token; ``logout`` revokes it.
"""

__version__ = "1.0.0"
