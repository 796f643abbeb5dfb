"""Route 53 clients: the boto3-backed client and the in-memory stub."""

from .route53 import Route53Client
from .stub import StubRoute53Client, MOCK_RECORD_SET

__all__ = [
    "Route53Client",
    "StubRoute53Client",
    "MOCK_RECORD_SET",
]
