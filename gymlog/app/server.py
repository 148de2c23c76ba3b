"""Console entry point: serve the API with uvicorn."""

import os

import uvicorn

from .constants import DEFAULT_HOST, DEFAULT_PORT


def main() -> None:
    """Run the API on HOST:PORT (default 0.0.0.0:8080)."""
    port = int(os.getenv("PORT", DEFAULT_PORT))
    host = os.getenv("HOST", DEFAULT_HOST)
    uvicorn.run("gymlog.app.app:app", host=host, port=port)


if __name__ == "__main__":
    main()
