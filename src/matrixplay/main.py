"""Application entry point for MatrixPlay."""
from __future__ import annotations

import logging
from pathlib import Path

from matrixplay.app.app import MatrixPlayApp
from matrixplay.core.config import ConfigError, load_app_config
from matrixplay.core.logging_config import setup_logging

logger = logging.getLogger("matrixplay")


def main() -> None:
    root = Path(__file__).resolve().parents[2]
    config_path = root / "config" / "app_config.json"
    try:
        app_config = load_app_config(config_path)
    except ConfigError:
        setup_logging()
        logger.exception("Invalid configuration in %s", config_path)
        raise

    setup_logging(app_config.logging.level, app_config.logging.log_file or None)
    logger.info("Loaded configuration from %s", config_path)

    app = MatrixPlayApp(app_config=app_config)
    app.run()


if __name__ == "__main__":
    main()
