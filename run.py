#!/usr/bin/env python3
"""
Application startup script.
"""
import argparse

from globaltrotters.core.config import settings


def main():
    """Parse overrides and start uvicorn."""
    parser = argparse.ArgumentParser(description=f"{settings.APP_NAME} API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=5000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--init-db", action="store_true", help="Create tables and seed the catalogue first")
    args = parser.parse_args()

    if args.init_db:
        from globaltrotters.db.init_db import main as init_db_main
        init_db_main()

    print(f"Starting {settings.APP_NAME} on {args.host}:{args.port}")

    import uvicorn

    uvicorn.run(
        "globaltrotters.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
