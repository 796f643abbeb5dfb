"""In-memory stand-in for Route 53, used in mock mode and in dry runs."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from dnsreconcile.base.client import DNSClientBlueprint
from dnsreconcile.base.config import AWSConfig
from dnsreconcile.base.exceptions import InvalidChangeBatchError, ServiceError
from dnsreconcile.base.logger import rec_logger
from dnsreconcile.base.records import (
    AliasRecordSet,
    ChangeRequest,
    ValueRecordSet,
    record_set_from_payload,
)

# Fabricated record returned by list calls when a delete runs in mock mode
MOCK_RECORD_SET = ValueRecordSet(
    name="www.mock.com.",
    type="A",
    ttl=300,
    resource_records=("192.168.1.2",),
)


def _identity(rs: ValueRecordSet | AliasRecordSet) -> tuple[str, str, str | None]:
    set_identifier = rs.set_identifier if isinstance(rs, AliasRecordSet) else None
    return rs.name, rs.type, set_identifier


class StubRoute53Client(DNSClientBlueprint):
    """Route 53 test double with canned responses.

    Holds one list of record sets for every zone.  Changes are applied to
    that list so repeated reconciliations observe their own writes.

    Attributes:
        record_sets: Records returned by list calls.
        requests: Every change request received, in order.
    """

    def __init__(self, config: AWSConfig | None = None) -> None:
        self.record_sets: list[ValueRecordSet | AliasRecordSet] = []
        self.requests: list[tuple[str, ChangeRequest]] = []
        self._next_error: ServiceError | None = None
        rec_logger.debug("Stub Route 53 client initialized")

    def seed_record_sets(
        self, record_sets: Iterable[ValueRecordSet | AliasRecordSet | dict[str, Any]]
    ) -> None:
        """Replace the canned list response.

        Args:
            record_sets: Record models or Route 53 ``ResourceRecordSet`` dicts.
        """
        self.record_sets = [
            record_set_from_payload(rs) if isinstance(rs, dict) else rs
            for rs in record_sets
        ]

    def fail_next_change(self, error: ServiceError) -> None:
        """Make the next change call raise *error* instead of applying."""
        self._next_error = error

    def list_resource_record_sets(
        self,
        zone_id: str,
        start_record_name: str,
        start_record_type: str | None = None,
    ) -> list[ValueRecordSet | AliasRecordSet]:
        return [rs for rs in self.record_sets if rs.name >= start_record_name]

    def change_resource_record_sets(
        self, zone_id: str, change: ChangeRequest
    ) -> dict[str, Any]:
        self.requests.append((zone_id, change))
        if self._next_error is not None:
            error, self._next_error = self._next_error, None
            raise error

        record_set = change.record_set
        key = _identity(record_set)
        existing = [i for i, rs in enumerate(self.record_sets) if _identity(rs) == key]

        if change.action == "CREATE":
            if existing:
                raise InvalidChangeBatchError(
                    f"Tried to create resource record set {record_set.name} "
                    f"type {record_set.type} but it already exists",
                    code="InvalidChangeBatch",
                )
            self.record_sets.append(record_set)
        elif change.action == "UPSERT":
            if existing:
                self.record_sets[existing[0]] = record_set
            else:
                self.record_sets.append(record_set)
        else:
            if not existing or self.record_sets[existing[0]] != record_set:
                raise InvalidChangeBatchError(
                    f"Tried to delete resource record set {record_set.name} "
                    f"type {record_set.type} but it was not found",
                    code="InvalidChangeBatch",
                )
            del self.record_sets[existing[0]]

        rec_logger.debug(
            f"Stub: applied {change.action} for {record_set.name}",
            zone_id=zone_id,
            record_name=record_set.name,
            action=change.action,
        )
        return {
            "id": uuid.uuid4().hex[:14].upper(),
            "status": "PENDING",
            "submitted_at": datetime.now(timezone.utc),
            "comment": change.to_change_batch()["Comment"],
        }
