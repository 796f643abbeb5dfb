"""Record reconciler.

Brings one record in a hosted zone in line with a :class:`RecordSpec`.
Each call performs a single list RPC and at most one change RPC::

    from dnsreconcile import RecordSpec, client_factory, ensure_present

    client = client_factory({"region_name": "us-east-1"})
    spec = RecordSpec(name="www.example.com", type="A", ttl=300, values=["192.0.2.10"])
    result = ensure_present(spec, "Z123", client)

Write failures are logged and reported through :class:`ChangeResult`
rather than raised.  Read failures propagate.
"""

from __future__ import annotations

from dnsreconcile.aws.stub import MOCK_RECORD_SET, StubRoute53Client
from dnsreconcile.base.client import DNSClientBlueprint
from dnsreconcile.base.exceptions import ConfigurationError, ServiceError
from dnsreconcile.base.logger import ReconcileLogger, rec_logger
from dnsreconcile.base.records import (
    AliasRecordSet,
    ChangeRequest,
    ChangeResult,
    RecordSpec,
    ValueRecordSet,
)
from dnsreconcile.base.supported_types import change_actions


def _find_value(
    record_sets: list[ValueRecordSet | AliasRecordSet], spec: RecordSpec
) -> ValueRecordSet | AliasRecordSet | None:
    """First live record whose name matches."""
    return next((rs for rs in record_sets if rs.name == spec.name), None)


def _find_alias(
    record_sets: list[ValueRecordSet | AliasRecordSet], spec: RecordSpec
) -> AliasRecordSet | None:
    """First live alias record whose name and set identifier match."""
    return next(
        (
            rs
            for rs in record_sets
            if isinstance(rs, AliasRecordSet)
            and rs.name == spec.name
            and rs.set_identifier == spec.set_identifier
        ),
        None,
    )


def _delete_target(
    record_sets: list[ValueRecordSet | AliasRecordSet], spec: RecordSpec
) -> ValueRecordSet | AliasRecordSet | None:
    """Live record a DELETE for *spec* may remove.

    Other records sharing the name (another type, another set identifier,
    the other variant) are never picked.
    """
    variant = AliasRecordSet if spec.is_alias else ValueRecordSet
    return next(
        (
            rs
            for rs in record_sets
            if isinstance(rs, variant)
            and rs.name == spec.name
            and rs.type == spec.type
            and (not spec.is_alias or rs.set_identifier == spec.set_identifier)
        ),
        None,
    )


def _fetch(
    spec: RecordSpec, zone: str, client: DNSClientBlueprint
) -> list[ValueRecordSet | AliasRecordSet]:
    return client.list_resource_record_sets(zone, spec.name, spec.type)


def _change(
    spec: RecordSpec,
    zone: str,
    client: DNSClientBlueprint,
    action: change_actions,
    record_set: ValueRecordSet | AliasRecordSet,
    log: ReconcileLogger,
) -> ChangeResult:
    """Send one change and turn the outcome into a result."""
    request = ChangeRequest(
        action=action,
        record_set=record_set,
        health_check_id=spec.health_check_id,
    )
    try:
        info = client.change_resource_record_sets(zone, request)
    except ServiceError as e:
        log.error(f"Error with {action} request: {request.to_change_batch()}", action=action)
        log.error(str(e), action=action, status="failed")
        return ChangeResult(
            status="failed", record_name=spec.name, action=action, error=str(e)
        )

    log.debug(f"Changed record - {action}: {info}", action=action, change_id=info.get("id"))
    return ChangeResult(
        status="changed",
        record_name=spec.name,
        action=action,
        change_id=info.get("id"),
    )


def ensure_present(
    spec: RecordSpec, zone: str, client: DNSClientBlueprint
) -> ChangeResult:
    """Create or update the record so it matches *spec*.

    Args:
        spec: Desired record.
        zone: Hosted zone ID.
        client: DNS client, typically from :func:`~dnsreconcile.factory.client_factory`.

    Returns:
        ``unchanged`` when the live record already matches, ``changed`` after a
        successful CREATE/UPSERT, ``failed`` when the provider rejected it.

    Raises:
        ServiceError: If listing the zone fails.
    """
    log = rec_logger.bind(zone_id=zone, record_name=spec.name)
    desired = spec.desired_record_set()
    live = _fetch(spec, zone, client)
    current = _find_alias(live, spec) if spec.is_alias else _find_value(live, spec)

    log.debug(f"current record set = {current}")
    log.debug(f"desired record set = {desired}")

    if current == desired:
        log.debug(
            "Current resources match specification, specification already satisfied",
            status="unchanged",
        )
        return ChangeResult(status="unchanged", record_name=spec.name)

    action: change_actions = "UPSERT" if spec.overwrite else "CREATE"
    result = _change(spec, zone, client, action, desired, log)
    if result.ok:
        message = "Record created/modified" if spec.overwrite else "Record created"
        log.info(f"{message}: {spec.name}", action=action, change_id=result.change_id, status="changed")
    return result


def ensure_absent(
    spec: RecordSpec, zone: str, client: DNSClientBlueprint
) -> ChangeResult:
    """Delete the live record matching *spec*, if any.

    Only a record with the spec's identity is ever removed: same name and
    type, and in alias mode the same set identifier.  The DELETE carries
    that live record set, which Route 53 requires to match exactly.  With
    ``spec.mock`` the stub client is seeded with one fabricated record first.

    Returns:
        ``unchanged`` when there is nothing to delete, ``changed`` after a
        successful DELETE, ``failed`` when the provider rejected it.

    Raises:
        ConfigurationError: If ``spec.mock`` is set on a non-stub client.
        ServiceError: If listing the zone fails.
    """
    if spec.mock:
        if not isinstance(client, StubRoute53Client):
            raise ConfigurationError(
                f"Mock mode for '{spec.name}' requires the stub client, got {type(client).__name__}"
            )
        client.seed_record_sets([MOCK_RECORD_SET])

    log = rec_logger.bind(zone_id=zone, record_name=spec.name)
    target = _delete_target(_fetch(spec, zone, client), spec)

    if target is None:
        log.info("There is nothing to delete.", status="unchanged")
        return ChangeResult(status="unchanged", record_name=spec.name)

    result = _change(spec, zone, client, "DELETE", target, log)
    if result.ok:
        log.info(f"Record deleted: {spec.name}", action="DELETE", change_id=result.change_id, status="changed")
    return result
