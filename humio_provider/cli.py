"""humio-provider CLI: quick Humio operations from the command line.

Usage examples::

    humio-provider --resource repository list
    humio-provider --resource alert get my-repo errors-spike
    humio-provider --resource ingest-token update my-repo shipper --kwargs '{"parser":"json"}'

Connection settings come from ``--config`` or the ``HUMIO_ADDRESS`` /
``HUMIO_API_TOKEN`` environment variables.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, get_type_hints

from pydantic import BaseModel, ValidationError

from humio_provider.base.exceptions import HumioError

RESOURCES = ["repository", "alert", "action", "ingest-token", "parser", "user"]


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``humio-provider`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="humio-provider",
        description="Manage Humio repositories, alerts, actions, ingest tokens and parsers",
    )
    parser.add_argument(
        "--resource", "-r",
        required=True,
        choices=RESOURCES,
        help="Resource type",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON config string (e.g. \'{"address":"https://cloud.humio.com"}\')',
    )
    parser.add_argument(
        "operation",
        help="Operation to perform (method name, e.g. list, get, delete)",
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="Positional arguments for the operation",
    )
    parser.add_argument(
        "--kwargs", "-k",
        type=str,
        default="{}",
        help="JSON keyword arguments for the operation",
    )
    return parser


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump()
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def _coerce_kwargs(method: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
    """Validate dict keyword arguments into the pydantic models *method* expects."""
    if not kwargs:
        return kwargs
    hints = get_type_hints(method)
    coerced = dict(kwargs)
    for key, value in kwargs.items():
        hint = hints.get(key)
        if isinstance(hint, type) and issubclass(hint, BaseModel) and isinstance(value, dict):
            coerced[key] = hint.model_validate(value)
    return coerced


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, creates a mapper via the universal factory, and
    invokes the requested operation. Results are printed as JSON.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config: dict[str, Any] = json.loads(ns.config)
    except json.JSONDecodeError as e:
        print(f"Invalid --config JSON: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        kwargs: dict[str, Any] = json.loads(ns.kwargs)
    except json.JSONDecodeError as e:
        print(f"Invalid --kwargs JSON: {e}", file=sys.stderr)
        sys.exit(1)

    from humio_provider.factory import universal_factory

    try:
        svc = universal_factory(ns.resource.replace("-", "_"), config)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    method_name = ns.operation.replace("-", "_")
    method = getattr(svc, method_name, None)
    if method_name.startswith("_") or method is None or not callable(method):
        print(f"Unknown operation '{ns.operation}' for {ns.resource}", file=sys.stderr)
        sys.exit(1)

    try:
        result = method(*ns.args, **_coerce_kwargs(method, kwargs))
    except (HumioError, ValidationError, TypeError) as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)

    if result is None:
        print("OK")
    else:
        print(json.dumps(_to_jsonable(result), indent=2, default=str))


if __name__ == "__main__":
    main()
