"""Process settings for the catalog service.

Run with ``python uvicorn.conf.py`` from ``services/catalog``. The catalog
is static and read-only, so each worker serves its own copy of the listing
and a couple of workers are enough.
"""
import os

import uvicorn

app = "main:app"
host = os.getenv("HOST", "0.0.0.0")
port = int(os.getenv("PORT", "3001"))
workers = int(os.getenv("UVICORN_WORKERS", "2"))
log_level = os.getenv("LOG_LEVEL", "info")
# request lines are already logged as JSON by the service middleware
access_log = os.getenv("UVICORN_ACCESS_LOG", "0") == "1"
proxy_headers = True


def options() -> dict:
    return {
        "host": host,
        "port": port,
        "workers": workers,
        "log_level": log_level,
        "access_log": access_log,
        "proxy_headers": proxy_headers,
    }


if __name__ == "__main__":
    uvicorn.run(app, **options())
