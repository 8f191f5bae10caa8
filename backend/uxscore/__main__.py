"""Run the API with ``python -m uxscore``."""
import uvicorn

from uxscore.config import settings


def main() -> None:
    uvicorn.run("uxscore.main:app", host=settings.api_host, port=settings.port)


if __name__ == "__main__":
    main()
