"""Run the Users API with uvicorn: ``python -m usersvc``."""

import uvicorn

from usersvc.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("usersvc.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
