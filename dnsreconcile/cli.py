"""dnsreconcile CLI — reconcile one Route 53 record from the command line.

Usage examples::

    dnsreconcile create --zone-id Z123 --name www.example.com --type A --ttl 300 --value 192.0.2.1
    dnsreconcile delete --zone-id Z123 --name www.example.com --type A --mock
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, get_args

from pydantic import ValidationError

from dnsreconcile.base.supported_types import failover_roles, record_types


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``dnsreconcile`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--zone-id", "-z", required=True, help="Hosted zone ID")
    common.add_argument("--name", "-n", required=True, help="Record name")
    common.add_argument(
        "--type", "-t",
        required=True,
        type=str.upper,
        choices=get_args(record_types),
        help="Record type",
    )
    common.add_argument(
        "--value", "-v",
        dest="values",
        action="append",
        default=[],
        help="Record value (repeat for multiple values)",
    )
    common.add_argument("--ttl", type=int, default=None, help="Time-to-live in seconds")
    common.add_argument(
        "--alias-target",
        type=str,
        default=None,
        help='JSON alias target (e.g. \'{"HostedZoneId":"Z2","DNSName":"lb.example.com."}\')',
    )
    common.add_argument("--health-check-id", default=None, help="Route 53 health check ID")
    common.add_argument(
        "--failover",
        type=str.upper,
        choices=get_args(failover_roles),
        default=None,
        help="Failover role",
    )
    common.add_argument("--set-identifier", default=None, help="Routing set identifier")
    common.add_argument(
        "--overwrite",
        action="store_true",
        help="UPSERT instead of CREATE when the record differs",
    )
    common.add_argument(
        "--mock",
        action="store_true",
        help="Use the in-memory stub client, no network calls",
    )
    common.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON client config (e.g. \'{"region_name":"us-east-1"}\')',
    )
    common.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (defaults to $DNSRECONCILE_LOG_LEVEL or INFO)",
    )

    parser = argparse.ArgumentParser(
        prog="dnsreconcile",
        description="Idempotent Route 53 record reconciliation",
    )
    sub = parser.add_subparsers(dest="action", required=True)
    sub.add_parser("create", parents=[common], help="Create or update the record")
    sub.add_parser("delete", parents=[common], help="Delete the record")
    return parser


def _load_json(raw: str, flag: str) -> dict[str, Any]:
    """Parse *raw* as a JSON object, exiting with status 1 otherwise."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Invalid {flag} JSON: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(value, dict):
        print(
            f"Invalid {flag} JSON: expected an object, got {type(value).__name__}",
            file=sys.stderr,
        )
        sys.exit(1)
    return value


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Builds a :class:`RecordSpec` and a client from the arguments, runs the
    requested action and prints the :class:`ChangeResult` as JSON.  Exits
    with status 1 when the change failed or the input was invalid.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    config: dict[str, Any] = _load_json(ns.config, "--config")
    alias_target = _load_json(ns.alias_target, "--alias-target") if ns.alias_target else None
    if ns.mock:
        config["mock"] = True

    # Lazy-import to avoid loading boto3 for --help
    from dnsreconcile.base.exceptions import DNSReconcileError
    from dnsreconcile.base.logger import rec_logger
    from dnsreconcile.base.records import RecordSpec
    from dnsreconcile.factory import client_factory
    from dnsreconcile.reconciler import ensure_absent, ensure_present

    if ns.log_level:
        rec_logger.set_level(ns.log_level)

    try:
        spec = RecordSpec(
            name=ns.name,
            type=ns.type,
            ttl=ns.ttl,
            values=ns.values,
            alias_target=alias_target,
            health_check_id=ns.health_check_id,
            failover=ns.failover,
            set_identifier=ns.set_identifier,
            overwrite=ns.overwrite,
            mock=ns.mock,
        )
        client = client_factory(config)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    operation = ensure_present if ns.action == "create" else ensure_absent
    try:
        result = operation(spec, ns.zone_id, client)
    except DNSReconcileError as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)

    print(result.model_dump_json(indent=2))
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
