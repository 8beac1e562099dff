"""Console entry point: python -m dicesim."""

import logging
import sys

from dicesim.config import DEFAULT_LOG_FORMAT
from dicesim.console.input_reader import InputParseError
from dicesim.console.menu import create_menu
from dicesim.settings import AppConfigManager

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the menu with configuration from the environment."""
    manager = AppConfigManager()
    logging.basicConfig(level=manager.config.log_level, format=DEFAULT_LOG_FORMAT)

    menu = create_menu(manager.config)
    try:
        return menu.run()
    except InputParseError as e:
        logger.error(f"Aborting on unparseable input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
