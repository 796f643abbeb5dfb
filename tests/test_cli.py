"""Tests for the dnsreconcile CLI."""

from unittest.mock import patch, MagicMock
import json
import pytest

from dnsreconcile.base.client import DNSClientBlueprint
from dnsreconcile.base.exceptions import InvalidChangeBatchError, ZoneNotFoundError
from dnsreconcile.cli import main


BASE_ARGS = ["--zone-id", "Z1", "--name", "www.example.com", "--type", "a"]


class TestCreate:
    def test_mock_create(self, capsys):
        main(["create", *BASE_ARGS, "--ttl", "300", "--value", "192.168.1.2", "--mock"])
        out = json.loads(capsys.readouterr().out)
        assert out["status"] == "changed"
        assert out["action"] == "CREATE"
        assert out["record_name"] == "www.example.com."

    def test_overwrite_upserts(self, capsys):
        main(["create", *BASE_ARGS, "--value", "1.1.1.1", "--overwrite", "--mock"])
        assert json.loads(capsys.readouterr().out)["action"] == "UPSERT"

    def test_alias_target(self, capsys):
        target = json.dumps({"HostedZoneId": "Z2", "DNSName": "lb.example.net."})
        with patch("dnsreconcile.factory.client_factory") as factory:
            client = MagicMock(spec=DNSClientBlueprint)
            client.list_resource_record_sets.return_value = []
            client.change_resource_record_sets.return_value = {"id": "C1"}
            factory.return_value = client
            main([
                "create", *BASE_ARGS,
                "--alias-target", target,
                "--set-identifier", "primary",
                "--failover", "primary",
            ])
        change = client.change_resource_record_sets.call_args[0][1]
        assert change.record_set.kind == "alias"
        assert change.record_set.failover == "PRIMARY"
        assert json.loads(capsys.readouterr().out)["change_id"] == "C1"

    def test_failed_write_exits_1(self, capsys):
        with patch("dnsreconcile.factory.client_factory") as factory:
            client = MagicMock(spec=DNSClientBlueprint)
            client.list_resource_record_sets.return_value = []
            client.change_resource_record_sets.side_effect = InvalidChangeBatchError("rejected")
            factory.return_value = client
            with pytest.raises(SystemExit) as exc_info:
                main(["create", *BASE_ARGS, "--value", "1.1.1.1"])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["status"] == "failed"

    def test_read_error_exits_1(self, capsys):
        with patch("dnsreconcile.factory.client_factory") as factory:
            client = MagicMock(spec=DNSClientBlueprint)
            client.list_resource_record_sets.side_effect = ZoneNotFoundError("no zone")
            factory.return_value = client
            with pytest.raises(SystemExit) as exc_info:
                main(["create", *BASE_ARGS, "--value", "1.1.1.1"])
        assert exc_info.value.code == 1
        assert "no zone" in capsys.readouterr().err


class TestDelete:
    def test_nothing_to_delete(self, capsys):
        main(["delete", *BASE_ARGS, "--mock"])
        assert json.loads(capsys.readouterr().out)["status"] == "unchanged"

    def test_mock_record_deleted(self, capsys):
        main(["delete", "--zone-id", "Z1", "--name", "www.mock.com", "--type", "A", "--mock"])
        out = json.loads(capsys.readouterr().out)
        assert out["status"] == "changed"
        assert out["action"] == "DELETE"


class TestInvalidInput:
    def test_bad_config_json(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", *BASE_ARGS, "--config", "{nope"])
        assert exc_info.value.code == 1
        assert "Invalid --config JSON" in capsys.readouterr().err

    @pytest.mark.parametrize("extra", [[], ["--mock"]])
    def test_config_not_an_object(self, capsys, extra):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", *BASE_ARGS, "--config", "[]", *extra])
        assert exc_info.value.code == 1
        assert "expected an object" in capsys.readouterr().err

    def test_alias_not_an_object(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", *BASE_ARGS, "--alias-target", '"lb.example.net."', "--mock"])
        assert exc_info.value.code == 1
        assert "Invalid --alias-target JSON" in capsys.readouterr().err

    def test_bad_alias_json(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", *BASE_ARGS, "--alias-target", "[", "--mock"])
        assert exc_info.value.code == 1

    def test_unknown_config_key(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", *BASE_ARGS, "--config", '{"project_id": "p"}'])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_unknown_type(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "--zone-id", "Z1", "--name", "x", "--type", "BOGUS"])
        assert exc_info.value.code == 2


class TestLogLevel:
    def test_log_level_applied(self, capsys):
        from dnsreconcile.base.logger import rec_logger

        with patch.object(rec_logger, "set_level") as set_level:
            main(["delete", *BASE_ARGS, "--mock", "--log-level", "debug"])
        set_level.assert_called_once_with("DEBUG")
        assert json.loads(capsys.readouterr().out)["status"] == "unchanged"
