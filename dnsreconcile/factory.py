"""Client factory.

Provides :func:`client_factory`, the single entry-point for creating the
DNS client the reconciler talks to.  Build it once and pass the same
instance to :func:`~dnsreconcile.reconciler.ensure_present` and
:func:`~dnsreconcile.reconciler.ensure_absent`.
"""

from dnsreconcile.base import DNSClientBlueprint
from dnsreconcile.base.config import AWSConfig, validate_config
from dnsreconcile.aws.factory import CLIENT_REGISTRY


def client_factory(config: dict | AWSConfig) -> DNSClientBlueprint:
    """
    Create a DNS client from configuration.
    Args:
        config: Configuration dictionary (or validated model). ``mock=True``
            selects the in-memory stub instead of boto3.
    Returns:
        A client implementing :class:`DNSClientBlueprint`.
    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    config_obj = validate_config(config)
    client_class = CLIENT_REGISTRY["stub" if config_obj.mock else "route53"]
    return client_class(config_obj)
