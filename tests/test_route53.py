"""Tests for the AWS Route 53 client."""

from unittest.mock import patch, MagicMock
import pytest
from botocore.exceptions import ClientError

from dnsreconcile.aws.route53 import Route53Client, hosted_zone_path
from dnsreconcile.base.config import AWSConfig
from dnsreconcile.base.exceptions import (
    InvalidChangeBatchError,
    ServiceError,
    ThrottlingError,
    ZoneNotFoundError,
)
from dnsreconcile.base.records import AliasRecordSet, ChangeRequest, ValueRecordSet


def _client_error(code: str, msg: str = "error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": msg}}, "op")


@pytest.fixture
def svc():
    with patch("dnsreconcile.aws.route53.boto3") as mock_boto:
        mock_client = MagicMock()
        mock_boto.client.return_value = mock_client
        instance = Route53Client(AWSConfig(
            aws_access_key_id="key",
            aws_secret_access_key="secret",
            region_name="us-east-1",
        ))
        yield instance, mock_client


# --- credentials ---

class TestCredentials:
    @patch("dnsreconcile.aws.route53.boto3")
    def test_explicit_pair(self, mock_boto):
        Route53Client(AWSConfig(
            aws_access_key_id="key",
            aws_secret_access_key="secret",
            region_name="us-west-2",
        ))
        mock_boto.client.assert_called_once_with(
            "route53",
            aws_access_key_id="key",
            aws_secret_access_key="secret",
            region_name="us-west-2",
        )

    @patch("dnsreconcile.aws.route53.boto3")
    def test_ambient_discovery(self, mock_boto, monkeypatch):
        monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
        monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)
        Route53Client(AWSConfig(region_name="eu-west-1"))
        mock_boto.client.assert_called_once_with("route53", region_name="eu-west-1")

    @patch("dnsreconcile.aws.route53.boto3")
    def test_half_pair_uses_ambient(self, mock_boto, monkeypatch):
        monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)
        Route53Client(AWSConfig(aws_access_key_id="key", region_name="eu-west-1"))
        mock_boto.client.assert_called_once_with("route53", region_name="eu-west-1")


class TestHostedZonePath:
    def test_adds_prefix(self):
        assert hosted_zone_path("Z1") == "/hostedzone/Z1"

    def test_keeps_prefix(self):
        assert hosted_zone_path("/hostedzone/Z1") == "/hostedzone/Z1"


# --- list_resource_record_sets ---

class TestListResourceRecordSets:
    def test_success(self, svc):
        inst, client = svc
        client.list_resource_record_sets.return_value = {
            "ResourceRecordSets": [
                {
                    "Name": "www.example.com.",
                    "Type": "A",
                    "TTL": 300,
                    "ResourceRecords": [{"Value": "10.0.0.2"}, {"Value": "10.0.0.1"}],
                },
                {
                    "Name": "www.example.com.",
                    "Type": "A",
                    "SetIdentifier": "primary",
                    "Failover": "PRIMARY",
                    "AliasTarget": {
                        "HostedZoneId": "Z2",
                        "DNSName": "lb.example.net.",
                        "EvaluateTargetHealth": False,
                    },
                },
            ]
        }
        records = inst.list_resource_record_sets("Z1", "www.example.com.", "A")
        client.list_resource_record_sets.assert_called_once_with(
            HostedZoneId="/hostedzone/Z1",
            StartRecordName="www.example.com.",
            StartRecordType="A",
        )
        assert isinstance(records[0], ValueRecordSet)
        assert records[0].resource_records == ("10.0.0.1", "10.0.0.2")
        assert isinstance(records[1], AliasRecordSet)
        assert records[1].set_identifier == "primary"

    def test_without_start_type(self, svc):
        inst, client = svc
        client.list_resource_record_sets.return_value = {"ResourceRecordSets": []}
        assert inst.list_resource_record_sets("Z1", "www.example.com.") == []
        client.list_resource_record_sets.assert_called_once_with(
            HostedZoneId="/hostedzone/Z1",
            StartRecordName="www.example.com.",
        )

    def test_not_found(self, svc):
        inst, client = svc
        client.list_resource_record_sets.side_effect = _client_error("NoSuchHostedZone")
        with pytest.raises(ZoneNotFoundError) as exc_info:
            inst.list_resource_record_sets("Z-missing", "www.example.com.")
        assert exc_info.value.code == "NoSuchHostedZone"


# --- change_resource_record_sets ---

class TestChangeResourceRecordSets:
    def _change(self, action="CREATE"):
        rs = ValueRecordSet(
            name="www.example.com.", type="A", ttl=300, resource_records=("192.168.1.2",)
        )
        return ChangeRequest(action=action, record_set=rs)

    def test_success(self, svc):
        inst, client = svc
        client.change_resource_record_sets.return_value = {
            "ChangeInfo": {"Id": "/change/C123", "Status": "PENDING", "Comment": "c"}
        }
        info = inst.change_resource_record_sets("Z1", self._change())
        assert info["id"] == "C123"
        assert info["status"] == "PENDING"
        args = client.change_resource_record_sets.call_args[1]
        assert args["HostedZoneId"] == "/hostedzone/Z1"
        change = args["ChangeBatch"]["Changes"][0]
        assert change["Action"] == "CREATE"
        assert change["ResourceRecordSet"] == {
            "Name": "www.example.com.",
            "Type": "A",
            "TTL": 300,
            "ResourceRecords": [{"Value": "192.168.1.2"}],
        }

    def test_invalid_batch(self, svc):
        inst, client = svc
        client.change_resource_record_sets.side_effect = _client_error(
            "InvalidChangeBatch", "already exists"
        )
        with pytest.raises(InvalidChangeBatchError, match="already exists"):
            inst.change_resource_record_sets("Z1", self._change())

    def test_prior_request(self, svc):
        inst, client = svc
        client.change_resource_record_sets.side_effect = _client_error("PriorRequestNotComplete")
        with pytest.raises(ThrottlingError):
            inst.change_resource_record_sets("Z1", self._change("UPSERT"))

    def test_generic_error(self, svc):
        inst, client = svc
        client.change_resource_record_sets.side_effect = _client_error("AccessDenied")
        with pytest.raises(ServiceError) as exc_info:
            inst.change_resource_record_sets("Z1", self._change("DELETE"))
        assert type(exc_info.value) is ServiceError
        assert exc_info.value.code == "AccessDenied"
        assert isinstance(exc_info.value.__cause__, ClientError)
