import logging
import os
import sys

from termcolor import colored

from config import ConsoleConfigProvider
from errors import InputError
from simulation import play_game

LOG_LEVEL_ENV = "LIFE_LOG"


def resolve_level(value):
    """Accept a level name or number; anything else means WARNING."""
    if not value:
        return logging.WARNING
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level=None):
    """Log to stderr so the boards on stdout stay readable."""
    logging.basicConfig(
        level=resolve_level(level or os.environ.get(LOG_LEVEL_ENV)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(provider=None):
    setup_logging()
    provider = provider or ConsoleConfigProvider()
    try:
        config = provider.get_config()
    except InputError as exc:
        print(colored(str(exc), "red"), file=sys.stderr)
        return 1
    play_game(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
