import uvicorn

from teamtasks.config import settings


def main() -> None:
    uvicorn.run("teamtasks.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
