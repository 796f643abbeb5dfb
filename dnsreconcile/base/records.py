"""
Record models shared by the reconciler and the DNS clients.

A live record set is either a *value* record (TTL plus literal values) or an
*alias* record (a pointer at another provider resource).  The two variants
carry disjoint fields, so each gets its own model and the ``kind`` field
tells them apart.  Both compare by value, which is what the reconciler
relies on to decide whether a write is needed.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dnsreconcile.base.supported_types import (
    change_actions,
    change_statuses,
    failover_roles,
    record_types,
)


def normalize_name(name: str) -> str:
    """Return *name* in fully qualified (trailing-dot) form."""
    return name if name.endswith(".") else name + "."


class AliasTarget(BaseModel):
    """Target of an alias record.

    Accepts both snake_case keys and the Route 53 keys
    (``HostedZoneId``, ``DNSName``, ``EvaluateTargetHealth``).
    ``dns_name`` is stored the way Route 53 reports it: lowercase, fully
    qualified.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hosted_zone_id: str = Field(alias="HostedZoneId")
    dns_name: str = Field(alias="DNSName", min_length=1)
    evaluate_target_health: bool = Field(default=False, alias="EvaluateTargetHealth")

    @field_validator("dns_name", mode="after")
    @classmethod
    def qualify_dns_name(cls, v: str) -> str:
        return normalize_name(v.lower())

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ValueRecordSet(BaseModel):
    """Comparison shape of a record holding literal values.

    ``resource_records`` is always sorted.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["value"] = "value"
    name: str
    type: str
    ttl: int | None = None
    resource_records: tuple[str, ...] = ()

    @field_validator("resource_records", mode="after")
    @classmethod
    def sort_values(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(sorted(v))

    def to_payload(self, health_check_id: str | None = None) -> dict[str, Any]:
        """Render as a Route 53 ``ResourceRecordSet`` dict."""
        payload: dict[str, Any] = {"Name": self.name, "Type": self.type}
        if self.ttl is not None:
            payload["TTL"] = self.ttl
        payload["ResourceRecords"] = [{"Value": v} for v in self.resource_records]
        if health_check_id:
            payload["HealthCheckId"] = health_check_id
        return payload


class AliasRecordSet(BaseModel):
    """Comparison shape of an alias record (no TTL, no values)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["alias"] = "alias"
    name: str
    type: str
    set_identifier: str | None = None
    failover: failover_roles | None = None
    alias_target: AliasTarget

    def to_payload(self, health_check_id: str | None = None) -> dict[str, Any]:
        """Render as a Route 53 ``ResourceRecordSet`` dict."""
        payload: dict[str, Any] = {"Name": self.name, "Type": self.type}
        if self.set_identifier is not None:
            payload["SetIdentifier"] = self.set_identifier
        if self.failover is not None:
            payload["Failover"] = self.failover
        payload["AliasTarget"] = self.alias_target.to_payload()
        if health_check_id:
            payload["HealthCheckId"] = health_check_id
        return payload


RecordSet = Annotated[Union[ValueRecordSet, AliasRecordSet], Field(discriminator="kind")]


def record_set_from_payload(payload: dict[str, Any]) -> ValueRecordSet | AliasRecordSet:
    """Parse a Route 53 ``ResourceRecordSet`` dict into its comparison shape.

    Routing metadata outside the shape (weights, health checks, …) is dropped.
    """
    if payload.get("AliasTarget"):
        return AliasRecordSet(
            name=payload["Name"],
            type=payload["Type"],
            set_identifier=payload.get("SetIdentifier"),
            failover=payload.get("Failover"),
            alias_target=AliasTarget.model_validate(payload["AliasTarget"]),
        )
    return ValueRecordSet(
        name=payload["Name"],
        type=payload["Type"],
        ttl=payload.get("TTL"),
        resource_records=tuple(rr["Value"] for rr in payload.get("ResourceRecords", [])),
    )


class RecordSpec(BaseModel):
    """Desired state of one record, immutable for a reconciliation run.

    A non-empty ``alias_target`` puts the spec in alias mode; ``ttl`` and
    ``values`` are then ignored.  ``set_identifier`` is not enforced for
    alias mode here: a missing one shows up as a mismatch or as a provider
    rejection on write.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: record_types
    ttl: int | None = Field(default=None, ge=0)
    values: tuple[str, ...] = ()
    alias_target: AliasTarget | None = None
    health_check_id: str | None = None
    failover: failover_roles | None = None
    set_identifier: str | None = None
    overwrite: bool = False
    mock: bool = False

    @field_validator("name", mode="after")
    @classmethod
    def qualify_name(cls, v: str) -> str:
        return normalize_name(v)

    @field_validator("type", "failover", mode="before")
    @classmethod
    def upper_case(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("values", mode="before")
    @classmethod
    def wrap_scalar(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("alias_target", mode="before")
    @classmethod
    def empty_alias_is_none(cls, v: Any) -> Any:
        return v or None

    @property
    def is_alias(self) -> bool:
        return self.alias_target is not None

    def value_record_set(self) -> ValueRecordSet:
        return ValueRecordSet(
            name=self.name,
            type=self.type,
            ttl=self.ttl,
            resource_records=self.values,
        )

    def alias_record_set(self) -> AliasRecordSet:
        if self.alias_target is None:
            raise ValueError(f"Record '{self.name}' has no alias target")
        return AliasRecordSet(
            name=self.name,
            type=self.type,
            set_identifier=self.set_identifier,
            failover=self.failover,
            alias_target=self.alias_target,
        )

    def desired_record_set(self) -> ValueRecordSet | AliasRecordSet:
        """Comparison shape for this spec's mode."""
        return self.alias_record_set() if self.is_alias else self.value_record_set()


class ChangeRequest(BaseModel):
    """A single change item, sent as a one-item change batch."""

    model_config = ConfigDict(frozen=True)

    action: change_actions
    record_set: RecordSet
    health_check_id: str | None = None
    comment: str | None = None

    def to_change_batch(self) -> dict[str, Any]:
        """Render as a Route 53 ``ChangeBatch`` dict."""
        return {
            "Comment": self.comment or f"dnsreconcile: {self.record_set.name}",
            "Changes": [
                {
                    "Action": self.action,
                    "ResourceRecordSet": self.record_set.to_payload(self.health_check_id),
                }
            ],
        }


class ChangeResult(BaseModel):
    """Outcome of one reconciliation run."""

    status: change_statuses
    record_name: str
    action: change_actions | None = None
    change_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """False only when the write was attempted and rejected."""
        return self.status != "failed"


__all__ = [
    "AliasTarget",
    "ValueRecordSet",
    "AliasRecordSet",
    "RecordSet",
    "RecordSpec",
    "ChangeRequest",
    "ChangeResult",
    "normalize_name",
    "record_set_from_payload",
]
