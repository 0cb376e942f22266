#!/usr/bin/env python3
"""
Wellness Recommendation API — entrypoint for `python -m wellness_server.server`.

For uvicorn wellness_server:app use wellness_server/__init__.py (exposes app from wellness_server.app).
"""

from .app import app

if __name__ == "__main__":
    import uvicorn

    from .config import get_config

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
