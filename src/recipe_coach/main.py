"""Command-line launcher for the API server."""

import uvicorn

from recipe_coach.api.app import create_app
from recipe_coach.config import Settings
from recipe_coach.containers import build_container


def main() -> None:
    """Run the API with uvicorn on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
