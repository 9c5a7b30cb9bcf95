"""Quote board server entrypoint."""

from __future__ import annotations

import uvicorn

from src.quoteboard.board_config import get_board_config


def main() -> None:
    config = get_board_config()
    uvicorn.run("src.quoteboard.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
