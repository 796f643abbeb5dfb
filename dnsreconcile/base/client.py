"""DNS client blueprint."""

from abc import ABC, abstractmethod
from typing import Any

from dnsreconcile.base.records import AliasRecordSet, ChangeRequest, ValueRecordSet


class DNSClientBlueprint(ABC):
    """Abstract capability interface the reconciler talks to.

    Maps to AWS Route 53; implemented by the boto3 client and by the
    in-memory stub used in mock mode.
    """

    @abstractmethod
    def list_resource_record_sets(
        self,
        zone_id: str,
        start_record_name: str,
        start_record_type: str | None = None,
    ) -> list[ValueRecordSet | AliasRecordSet]:
        """List record sets in a zone, starting at *start_record_name*.

        Only the first page returned by the provider is consulted.

        Args:
            zone_id: Hosted zone ID, with or without the ``/hostedzone/`` prefix.
            start_record_name: FQDN to start listing from.
            start_record_type: Record type to start listing from *(optional)*.

        Returns:
            Live record sets in their comparison shapes.
        """

    @abstractmethod
    def change_resource_record_sets(
        self, zone_id: str, change: ChangeRequest
    ) -> dict[str, Any]:
        """Submit *change* as a single-item change batch.

        Returns:
            Change info dict with ``id``, ``status``, ``submitted_at`` and
            ``comment``.

        Raises:
            ServiceError: If the provider rejects the change.
        """
