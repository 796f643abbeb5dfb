"""dnsreconcile — idempotent DNS record reconciliation for AWS Route 53.

Entry point for the library.  Build a client once with
:func:`client_factory` and pass it to :func:`ensure_present` or
:func:`ensure_absent`::

    from dnsreconcile import RecordSpec, client_factory, ensure_present

    client = client_factory({"region_name": "us-east-1"})
    ensure_present(RecordSpec(name="www.example.com", type="A", values="192.0.2.1"), "Z123", client)
"""

from .base import (
    DNSClientBlueprint,
    AliasTarget,
    RecordSpec,
    ChangeResult,
)
from .factory import client_factory
from .reconciler import ensure_present, ensure_absent

__all__ = [
    "DNSClientBlueprint",
    "AliasTarget",
    "RecordSpec",
    "ChangeResult",
    "client_factory",
    "ensure_present",
    "ensure_absent",
]
