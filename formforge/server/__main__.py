"""Run the FormForge server with uvicorn: ``python -m formforge.server``."""

import uvicorn

from .core.config import settings


def run() -> None:
    uvicorn.run(
        "formforge.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
