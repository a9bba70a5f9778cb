"""Entry: start the API and static file server."""
import logging
import uvicorn

from recordcrate.config import API_HOST, API_PORT, LOG_FORMAT


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(
        "recordcrate.api.app:app",
        host=API_HOST,
        port=API_PORT,
    )


if __name__ == "__main__":
    main()
