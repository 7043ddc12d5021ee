"""Run the todo backend with uvicorn: `python -m todo_app`."""

import uvicorn

from .config import settings


def main():
    uvicorn.run("todo_app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
