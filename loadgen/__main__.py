import uvicorn

from loadgen.core import config


def main():
    uvicorn.run(
        "loadgen.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.level_number(config.LOG_LEVEL),
    )


if __name__ == "__main__":
    main()
