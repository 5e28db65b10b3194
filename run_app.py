#!/usr/bin/env python3
"""
Simple runner script for the demo Flask application.
This script ensures the correct Python path is set, configures logging and runs the app.
"""

import sys
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from app.main import app
from config_manager import get_analytics_config, get_app_config
from gaq_tools.logging_config import get_logger, setup_logging, stop_logging

if __name__ == "__main__":
    app_config = get_app_config()
    setup_logging(debug=app_config.debug)
    logger = get_logger("run_app")

    analytics_config = get_analytics_config()
    logger.info("Tracker: %s", analytics_config.tracker or "<not set>")
    logger.info("Local mode default: %s", analytics_config.local)
    logger.info("Server: %s:%s", app_config.host, app_config.port)

    try:
        app.run(
            host=app_config.host,
            port=app_config.port,
            debug=app_config.debug
        )
    finally:
        stop_logging()
