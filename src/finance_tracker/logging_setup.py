from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    lvl = logging.getLevelName(str(level).upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO

    if not root.handlers:
        logging.basicConfig(level=lvl, format=LOG_FORMAT)
    root.setLevel(lvl)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
