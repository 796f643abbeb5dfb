"""Abstract client blueprint, record models and core utilities.

Every DNS client inherits from :class:`DNSClientBlueprint`.  Import it to
type-hint your own code or to plug in a custom provider.
"""

from .client import DNSClientBlueprint
from .records import (
    AliasTarget,
    ValueRecordSet,
    AliasRecordSet,
    RecordSet,
    RecordSpec,
    ChangeRequest,
    ChangeResult,
)
from .supported_types import change_actions, failover_roles, record_types


__all__ = [
    "DNSClientBlueprint",
    "AliasTarget",
    "ValueRecordSet",
    "AliasRecordSet",
    "RecordSet",
    "RecordSpec",
    "ChangeRequest",
    "ChangeResult",
    "change_actions",
    "failover_roles",
    "record_types",
]
