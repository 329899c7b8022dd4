import asyncio
import logging
import sys

from fitlog.cli.session import SessionController
from fitlog.config import settings


def configure_logging() -> None:
    # Diagnostics go to stderr so they don't mix with the menu on stdout
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if settings.debug:
        logging.getLogger("fitlog").setLevel(logging.DEBUG)


def main() -> None:
    configure_logging()
    sys.exit(asyncio.run(SessionController().run()))


if __name__ == "__main__":
    main()
