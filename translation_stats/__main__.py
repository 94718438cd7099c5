"""Run the Translation Stats service: ``python -m translation_stats``."""

import uvicorn

from translation_stats.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "translation_stats.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        # Logging is configured by the application factory.
        log_config=None,
    )


if __name__ == "__main__":
    main()
