"""
Blog Data Core Module.

Entry point for the ``blogdata`` console command.

Subcommands:
    validate [PATH] [--strict-categories]
        Load a blog payload file (the bundled one by default), run schema
        and conformance validation, and print every problem found. Exits 0
        when the payload conforms, 1 otherwise.

    serve [--debug] [--config PATH]
        Configure logging, load config.yml and the blog data, and run the
        read API under an embedded Gunicorn server.

Example:
    $ blogdata validate
    Validation passed: 2 post(s), 4 category(ies)

    $ blogdata serve --debug
    Starting Gunicorn for blog data read API
"""

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from content import BlogDataError, BlogDataValidationError, load_blog_data

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger for console and (optionally) file output.

    Args:
        debug: Log at DEBUG instead of INFO
        log_file: Rotating log file path (10MB, 3 backups). None disables it.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers to avoid duplicates (e.g., from gunicorn)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        log_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3
        )
        log_handler.setLevel(log_level)
        log_handler.setFormatter(formatter)
        root_logger.addHandler(log_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_logconfig_dict(debug: bool = False, log_file: Optional[str] = None) -> dict:
    """Build Gunicorn's ``logconfig_dict`` with the same levels and handlers as configure_logging.

    Gunicorn applies this with dictConfig when the arbiter starts, which
    replaces whatever configure_logging put on the root logger.
    """
    level = "DEBUG" if debug else "INFO"
    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'generic',
            'stream': sys.stdout
        },
        'error_console': {
            'class': 'logging.StreamHandler',
            'formatter': 'generic',
            'stream': sys.stderr
        },
    }
    root_handlers = ['console']
    if log_file:
        handlers['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'generic',
            'filename': log_file,
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 3
        }
        root_handlers.append('file')

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'root': {
            'level': level,
            'handlers': root_handlers
        },
        'loggers': {
            'gunicorn.error': {
                'level': level,
                'handlers': ['error_console'] + root_handlers[1:],
                'propagate': False,
                'qualname': 'gunicorn.error'
            },
            'gunicorn.access': {
                'level': 'INFO',
                'handlers': root_handlers,
                'propagate': False,
                'qualname': 'gunicorn.access'
            },
        },
        'handlers': handlers,
        'formatters': {
            'generic': {
                'format': LOG_FORMAT,
                'datefmt': '%Y-%m-%d %H:%M:%S',
                'class': 'logging.Formatter'
            }
        }
    }


def run_validate(path: Optional[str] = None, strict_categories: bool = False) -> int:
    """Validate a blog payload file and report the result on stdout.

    Returns:
        Process exit code: 0 when the payload conforms, 1 otherwise
    """
    source = path or "bundled blog data"
    try:
        blog_data = load_blog_data(path, strict_categories=strict_categories)
    except FileNotFoundError as e:
        print(f"Validation failed: {e}")
        return 1
    except BlogDataValidationError as e:
        print(f"Validation failed for {source}:")
        for problem in e.problems:
            print(f"- {problem}")
        return 1
    except BlogDataError as e:
        print(f"Validation failed for {source}: {e}")
        return 1

    print(
        f"Validation passed: {blog_data.post_count} post(s), "
        f"{len(blog_data.categories)} category(ies)"
    )
    return 0


def run_serve(debug: bool = False, config_path: Optional[str] = None) -> None:
    """Start Gunicorn with the read API. Blocks until the server exits."""
    from gunicorn.app.base import BaseApplication
    from api import create_app
    from config import load_config

    config = load_config(config_path)
    log_file = config.get("logging", {}).get("file")
    configure_logging(debug, log_file)

    if debug:
        logger.info("Debug mode enabled: verbose logging and worker timeout disabled")

    app = create_app(config=config)

    gunicorn_config_path = os.path.join(os.path.dirname(__file__), "..", "api", "gunicorn_config.py")
    bind = config.get("server", {}).get("bind")

    class StandaloneApplication(BaseApplication):
        """Custom Gunicorn application for embedding within the blogdata entry point."""

        def __init__(self, app, options=None):
            self.options = options or {}
            self.application = app
            super().__init__()

        def load_config(self):
            config_file = self.options.get("config")
            if config_file:
                with open(config_file, "r") as f:
                    config_code = f.read()
                config_namespace = {}
                exec(config_code, config_namespace)
                for key, value in config_namespace.items():
                    if key in self.cfg.settings and value is not None:
                        self.cfg.set(key.lower(), value)

            self.cfg.set("logconfig_dict", build_logconfig_dict(self.options.get("debug"), log_file))
            if self.options.get("bind"):
                self.cfg.set("bind", self.options["bind"])
            if self.options.get("debug"):
                self.cfg.set("timeout", 0)
                self.cfg.set("loglevel", "debug")

        def load(self):
            return self.application

    options = {
        "config": gunicorn_config_path,
        "bind": bind,
        "debug": debug,
    }
    logger.info(f"Starting blog data read API on {bind}")
    StandaloneApplication(app, options).run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogdata", description="Blog content store tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate a blog payload file")
    validate_parser.add_argument("path", nargs="?", default=None,
                                 help="Payload JSON file (default: bundled blog data)")
    validate_parser.add_argument("--strict-categories", action="store_true",
                                 help="Require post categories to match the category list")

    serve_parser = subparsers.add_parser("serve", help="Serve the blog data read API")
    serve_parser.add_argument("--debug", action="store_true",
                              help="Verbose logging and no worker timeout")
    serve_parser.add_argument("--config", dest="config_path", default=None,
                              help="Path to config.yml")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the blogdata console command.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.command == "validate":
        return run_validate(args.path, strict_categories=args.strict_categories)

    debug = args.debug or os.environ.get("BLOGDATA_DEBUG", "").lower() in ("true", "1", "yes")
    run_serve(debug=debug, config_path=args.config_path)
    return 0


# Allow running as a script for development/testing
if __name__ == "__main__":
    raise SystemExit(main())
