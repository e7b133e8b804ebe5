"""
Run the API with uvicorn using the configured bind address.

    python -m brain
"""

import uvicorn

from brain.config.settings import settings


def main() -> None:
    uvicorn.run(
        "brain.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development and settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
