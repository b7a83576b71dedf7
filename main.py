#!/usr/bin/env python3
"""Main entry point for the environment report server"""
import sys
import uvicorn
from config import Settings
from app.server import EnvironmentReportServer
from environment.snapshot import get_environment_snapshot
from logging_config import setup_structured_logging, get_logger, log_server_startup, log_snapshot_captured, log_error


def main():
    """Main application entry point"""
    try:
        settings = Settings()

        setup_structured_logging(settings)
        logger = get_logger(__name__)

        snapshot = get_environment_snapshot(settings)
        log_snapshot_captured(logger, snapshot)
        log_server_startup(logger, settings)

        server = EnvironmentReportServer(settings, snapshot)

        uvicorn.run(
            server.get_app(),
            host=settings.server_host,
            port=settings.server_port,
            log_config=None  # We handle logging ourselves
        )

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "startup"})
        sys.exit(1)


if __name__ == '__main__':
    main()
