#!/usr/bin/env python3
"""
Entry point for running the fintrack API server.

Usage:
    python run.py [--port PORT] [--host HOST] [--database PATH]
"""

import argparse
import logging
import os
import webbrowser
from pathlib import Path

import qrcode
import uvicorn

logger = logging.getLogger("fintrack")


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def main():
    parser = argparse.ArgumentParser(description="fintrack personal finance tracker")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--database", type=Path, help="SQLite file to use instead of the default")
    parser.add_argument("--no-browser", action="store_true", help="Don't open browser")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    log_level = os.environ.get("FINTRACK_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.database:
        # Read by load_settings() inside the app factory
        os.environ["FINTRACK_DATABASE_URL"] = f"sqlite:///{args.database.resolve()}"

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  fintrack")
    print("=" * 50)
    print(f"\n  URL: {url}/docs\n")

    try:
        print_qr_code(url)
    except Exception:
        logger.debug("QR code rendering failed", exc_info=True)

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if not args.no_browser:
        webbrowser.open(f"{url}/docs")

    uvicorn.run(
        "fintrack.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
