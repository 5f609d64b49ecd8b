"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from daily_diet.config import Settings


def main() -> None:
    """Run the HTTP server on the configured host and port."""
    settings = Settings()
    uvicorn.run("daily_diet.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
