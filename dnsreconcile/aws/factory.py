"""AWS client factory.

Maps client names to their implementations.
``CLIENT_REGISTRY`` is consumed by :func:`dnsreconcile.factory.client_factory`.
"""

from dnsreconcile.aws.route53 import Route53Client
from dnsreconcile.aws.stub import StubRoute53Client


# Client registry for AWS
CLIENT_REGISTRY: dict[str, type] = {
    "route53": Route53Client,
    "stub": StubRoute53Client,
}
