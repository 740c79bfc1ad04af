#!/usr/bin/env python3
"""
Startup script running the API under Gunicorn with uvicorn workers.
"""

import logging
import os
import subprocess
import sys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    try:
        port = os.environ.get("PORT", "8000")
        logger.info(f"Starting application on port {port}")

        # Fail fast on import/configuration errors before forking workers
        from wellnesshub.app import app  # noqa: F401
        logger.info("Successfully imported wellnesshub.app")

        cmd = [
            "gunicorn",
            "--config", "gunicorn.conf.py",
            "--bind", f"0.0.0.0:{port}",
            "wellnesshub.app:app",
        ]

        logger.info(f"Starting with command: {' '.join(cmd)}")
        subprocess.run(cmd, check=True)

    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
