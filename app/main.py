"""
Main FastAPI application entry point.

Following kkb_fastapi pattern.
"""
import logging
import os

import uvicorn

from app.core.config import get_config_file_for_environment
from app.create_app import get_app

logging.basicConfig(level=logging.DEBUG)

app = get_app(get_config_file_for_environment())


if __name__ == "__main__":
    try:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=int(os.environ.get("PORT", 8000)),
            log_level="debug",
            loop="asyncio",
        )
    except Exception as e:
        logging.error(f"Error running FastAPI: {e}")
