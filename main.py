# Entry point for the circle board.

import logging

import config
from app import CircleBoardApp


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    CircleBoardApp().run()


if __name__ == "__main__":
    main()
