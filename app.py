#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Studiofolio - studio landing page

Entry point for the NiceGUI-based site.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


def setup_logging():
    """Configure logging to console and file.

    Log file location: ~/.studiofolio/logs/startup.log
    - Truncated on startup
    - Falls back to console-only logging when the directory is not writable

    Returns:
        tuple: (console_handler, file_handler) to keep references alive
    """
    logs_dir = Path.home() / ".studiofolio" / "logs"
    log_file_path = logs_dir / "startup.log"

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    ))

    file_handler = None
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"[WARNING] Failed to create log directory {logs_dir}: {e}", file=sys.stderr)
        logs_dir = None

    if logs_dir is not None:
        try:
            file_handler = logging.FileHandler(
                log_file_path,
                mode='w',
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
        except OSError as e:
            print(f"[WARNING] Failed to create log file {log_file_path}: {e}", file=sys.stderr)
            file_handler = None

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
    if file_handler:
        root_logger.addHandler(file_handler)

    # Suppress verbose logging from third-party libraries
    for name in ['uvicorn', 'uvicorn.error', 'uvicorn.access',
                 'starlette', 'engineio', 'socketio',
                 'asyncio', 'concurrent']:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Studiofolio starting...")
    logger.info("=" * 60)
    logger.info("Executable: %s", sys.executable)
    logger.info("CWD: %s", Path.cwd())
    logger.debug("sys.argv: %s", sys.argv)

    if file_handler:
        logger.info("Log file: %s", log_file_path)
    else:
        logger.warning("File logging disabled - console only")

    return (console_handler, file_handler)


# Global reference to keep log handlers alive (prevents garbage collection)
_global_log_handlers = None


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Studiofolio landing page")
    parser.add_argument("--host", default=None, help="Host to bind to (default: settings.host)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: settings.port)")
    parser.add_argument(
        "--form-endpoint",
        default=None,
        help="Override the contact form endpoint (same as STUDIOFOLIO_FORM_ENDPOINT)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point

    NiceGUI is imported inside run_app().
    """
    import asyncio

    args = _parse_args(argv)
    if args.form_endpoint:
        os.environ["STUDIOFOLIO_FORM_ENDPOINT"] = args.form_endpoint

    global _global_log_handlers
    _global_log_handlers = setup_logging()

    logger = logging.getLogger(__name__)

    from studiofolio.services.exceptions import ConfigurationError
    from studiofolio.ui.app import run_app

    try:
        run_app(host=args.host, port=args.port)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        raise SystemExit(2)
    except KeyboardInterrupt:
        logger.debug("Application shutdown via KeyboardInterrupt")
    except asyncio.CancelledError:
        logger.debug("Application shutdown via CancelledError")
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        raise


if __name__ in {'__main__', '__mp_main__'}:
    main()
