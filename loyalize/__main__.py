"""Run the API server: ``python -m loyalize``."""

import uvicorn

from loyalize.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "loyalize.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
