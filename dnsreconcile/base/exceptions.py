"""
dnsreconcile exception hierarchy.

Provider-side failures share :class:`ServiceError` as their parent so the
reconciler can tell a rejected write apart from a local setup mistake.
"""


# ── Base ──────────────────────────────────────────────────────────────
class DNSReconcileError(Exception):
    """Root exception for all dnsreconcile errors."""


# ── Local setup ───────────────────────────────────────────────────────
class ConfigurationError(DNSReconcileError):
    """Client or reconciler configured inconsistently (e.g. mock mode on a real client)."""


# ── Provider ──────────────────────────────────────────────────────────
class ServiceError(DNSReconcileError):
    """Provider-side RPC failure.

    Attributes:
        code: Provider error code (e.g. ``InvalidChangeBatch``), if known.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class ZoneNotFoundError(ServiceError):
    """Hosted zone not found."""


class InvalidChangeBatchError(ServiceError):
    """Change batch rejected (duplicate create, delete of a missing record, …)."""


class InvalidInputError(ServiceError):
    """Request parameters rejected by the provider."""


class ThrottlingError(ServiceError):
    """Provider refused the request because of rate limits or a pending change."""
