from __future__ import annotations

import logging
import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Make the package importable when this file is run directly as a script."""
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # python -m flight_panel / console script
    from .app import run
    from .config import load_config
    from .exceptions import ConfigError
except ImportError:
    # python flight_panel/__main__.py
    _ensure_repo_root_on_path()
    from flight_panel.app import run
    from flight_panel.config import load_config
    from flight_panel.exceptions import ConfigError

logger = logging.getLogger("flight_panel")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> int:
    """Entry point for running the panel from the command line."""
    try:
        config = load_config()
    except ConfigError as exc:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        logger.error("invalid configuration: %s", exc)
        return 2

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    return run(config=config)


if __name__ == "__main__":
    raise SystemExit(main())
