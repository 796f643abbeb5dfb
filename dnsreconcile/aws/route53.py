"""AWS Route 53 implementation of the DNS client blueprint."""

from __future__ import annotations

from typing import Any, NoReturn

import boto3
from botocore.exceptions import ClientError

from dnsreconcile.base.client import DNSClientBlueprint
from dnsreconcile.base.config import AWSConfig
from dnsreconcile.base.exceptions import (
    InvalidChangeBatchError,
    InvalidInputError,
    ServiceError,
    ThrottlingError,
    ZoneNotFoundError,
)
from dnsreconcile.base.logger import rec_logger
from dnsreconcile.base.records import (
    AliasRecordSet,
    ChangeRequest,
    ValueRecordSet,
    record_set_from_payload,
)

_ZONE_PREFIX = "/hostedzone/"

_ERROR_MAP: dict[str, type[ServiceError]] = {
    "NoSuchHostedZone": ZoneNotFoundError,
    "InvalidChangeBatch": InvalidChangeBatchError,
    "InvalidInput": InvalidInputError,
    "PriorRequestNotComplete": ThrottlingError,
    "Throttling": ThrottlingError,
}


def _handle(e: ClientError, msg: str) -> NoReturn:
    error = e.response.get("Error", {})
    code = error.get("Code")
    exc = _ERROR_MAP.get(code or "", ServiceError)
    raise exc(f"{msg}: {error.get('Message', e)}", code=code) from e


def hosted_zone_path(zone_id: str) -> str:
    """Return *zone_id* in ``/hostedzone/<id>`` form."""
    if zone_id.startswith(_ZONE_PREFIX):
        return zone_id
    return _ZONE_PREFIX + zone_id


def change_info(resp: dict[str, Any]) -> dict[str, Any]:
    """Flatten a ``ChangeInfo`` response into a plain dict."""
    info = resp.get("ChangeInfo", {})
    return {
        "id": info.get("Id", "").split("/")[-1],
        "status": info.get("Status"),
        "submitted_at": info.get("SubmittedAt"),
        "comment": info.get("Comment"),
    }


class Route53Client(DNSClientBlueprint):
    """AWS Route 53 DNS client.

    Attributes:
        client: boto3 Route 53 client.
    """

    def __init__(self, config: AWSConfig) -> None:
        """Initialize the Route 53 client.

        An explicit access-key pair wins; without one, boto3 resolves
        credentials on its own (environment, shared files, instance role).

        Args:
            config: AWS configuration object containing credentials and region.
        """
        if config.has_explicit_credentials:
            self.client = boto3.client(
                "route53",
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
                region_name=config.region_name,
            )
        else:
            rec_logger.info(
                "No AWS credentials supplied, going to attempt to use "
                "automatic credentials from IAM or ENV"
            )
            self.client = boto3.client("route53", region_name=config.region_name)

    def list_resource_record_sets(
        self,
        zone_id: str,
        start_record_name: str,
        start_record_type: str | None = None,
    ) -> list[ValueRecordSet | AliasRecordSet]:
        """List record sets starting at *start_record_name* (first page only).

        Raises:
            ZoneNotFoundError: If the zone does not exist.
            ServiceError: On any other Route 53 API failure.
        """
        params: dict[str, Any] = {
            "HostedZoneId": hosted_zone_path(zone_id),
            "StartRecordName": start_record_name,
        }
        if start_record_type:
            params["StartRecordType"] = start_record_type
        try:
            resp = self.client.list_resource_record_sets(**params)
        except ClientError as e:
            _handle(e, f"Failed to list records in zone '{zone_id}'")
        return [record_set_from_payload(r) for r in resp.get("ResourceRecordSets", [])]

    def change_resource_record_sets(
        self, zone_id: str, change: ChangeRequest
    ) -> dict[str, Any]:
        """Apply a Route 53 change batch (CREATE / UPSERT / DELETE).

        Raises:
            InvalidChangeBatchError: If Route 53 rejects the batch.
            ServiceError: On any other Route 53 API failure.
        """
        try:
            resp = self.client.change_resource_record_sets(
                HostedZoneId=hosted_zone_path(zone_id),
                ChangeBatch=change.to_change_batch(),
            )
        except ClientError as e:
            _handle(
                e,
                f"Failed to {change.action.lower()} record "
                f"'{change.record_set.name}' in zone '{zone_id}'",
            )
        return change_info(resp)
