#!/usr/bin/env python3
"""
Run the Reporting Examples FastAPI server.

Usage:
    python run_api.py              # Run on the configured port (default 3000)
    python run_api.py --port 9000  # Run on custom port
    python run_api.py --reload     # Run with auto-reload
"""

import sys
import argparse
import uvicorn

from reporting_examples.config import settings


def main():
    """Run the FastAPI server."""
    parser = argparse.ArgumentParser(description="Run Reporting Examples API Server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: info)"
    )

    args = parser.parse_args()

    print(f"""
Starting {settings.app_name} on http://{args.host}:{args.port}

Documentation: http://{args.host}:{args.port}/docs
Health Check:  http://{args.host}:{args.port}/health

Press Ctrl+C to stop the server
{'=' * 70}
    """)

    try:
        uvicorn.run(
            "reporting_examples.api.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user. Goodbye!")
        sys.exit(0)
    except Exception as e:
        print(f"\n\nError starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
