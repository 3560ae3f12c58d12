#!/usr/bin/env python3
"""
CLI for serving a Lambda API handler locally.

The target is given as ``module:attribute`` and may be either a Lambda
handler function ``(event, context)`` or a route table.

Examples:
    python scripts/run_local.py examples.sample_app:handler
    python scripts/run_local.py examples.sample_app:routes --port 8080
"""

import argparse
import importlib
import sys
from collections.abc import Mapping
from typing import Any

from lambda_api.config import settings
from lambda_api.lambda_handler import create_lambda_handler
from lambda_api.local import run_local
from lambda_api.logging.config import configure_logging


def load_target(target: str) -> Any:
    """
    Import ``module:attribute``.

    Args:
        target: Import path of the handler or route table

    Returns:
        The imported object

    Raises:
        ValueError: If the target is not in module:attribute form
    """
    module_name, separator, attribute = target.partition(":")
    if not separator or not module_name or not attribute:
        raise ValueError(f"Target must be module:attribute, got {target!r}")
    module = importlib.import_module(module_name)
    return getattr(module, attribute)


def resolve_handler(target: Any) -> Any:
    """
    Turn a loaded target into a Lambda handler.

    Args:
        target: Lambda handler or route table

    Returns:
        Lambda handler

    Raises:
        TypeError: If the target is neither callable nor a route table
    """
    if isinstance(target, Mapping):
        return create_lambda_handler(target)
    if callable(target):
        return target
    raise TypeError(f"Expected a Lambda handler or route table, got {type(target).__name__}")


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Serve a Lambda API handler locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        type=str,
        help="Handler or route table as module:attribute",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=settings.local_host,
        help=f"Interface to bind (default: {settings.local_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.local_port,
        help=f"Port to listen on (default: {settings.local_port})",
    )

    args = parser.parse_args()

    configure_logging()

    try:
        handler = resolve_handler(load_target(args.target))
    except (ImportError, AttributeError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    run_local(handler, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
