"""Run the API with uvicorn: ``python -m catalog``."""

import uvicorn

from catalog.core.config import settings


def main() -> None:
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
