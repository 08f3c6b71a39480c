"""Tests for the netint command line."""

import json

import pytest
from click.testing import CliRunner

from netint import __version__, cli
from netint.client import Client
from netint.errors import TransportFailure
from tests.conftest import RecordingFetcher, make_body


@pytest.fixture
def fetcher(monkeypatch):
    """Route CLI clients through a recording fetcher instead of the network."""
    recording = RecordingFetcher()

    def make_client(timeout):
        return Client(fetcher=recording, timeout=timeout)

    monkeypatch.setattr(cli, "Client", make_client)
    return recording


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test CLI argument handling and output."""

    def test_version(self, runner):
        result = runner.invoke(cli.main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_list(self, runner, fetcher):
        result = runner.invoke(cli.main, ["--list"])

        assert result.exit_code == 0
        assert "dallas" in result.output
        assert "tok" in result.output
        assert fetcher.calls == []

    def test_single_region(self, runner, fetcher):
        result = runner.invoke(cli.main, ["tokyo"])

        assert result.exit_code == 0, result.output
        assert fetcher.calls == ["http://netint-tok.linode.com/ping/samples"]
        assert "london" in result.output

    def test_defaults_to_all_regions(self, runner, fetcher):
        result = runner.invoke(cli.main, [])

        assert result.exit_code == 0, result.output
        assert len(fetcher.calls) == 6

    def test_all_flag_overrides_regions(self, runner, fetcher):
        result = runner.invoke(cli.main, ["dallas", "--all"])

        assert result.exit_code == 0, result.output
        assert len(fetcher.calls) == 6

    def test_unknown_region(self, runner, fetcher):
        result = runner.invoke(cli.main, ["paris"])

        assert result.exit_code == 1
        assert "paris" in result.output
        assert fetcher.calls == []

    def test_transport_failure(self, runner, fetcher):
        url = "http://netint-lon.linode.com/ping/samples"
        fetcher.errors[url] = TransportFailure(url, "HTTP 502 Bad Gateway", status_code=502)

        result = runner.invoke(cli.main, ["london"])

        assert result.exit_code == 1
        assert "502" in result.output

    def test_malformed_response(self, runner, fetcher):
        fetcher.body = make_body(overrides={"dallas": [[1, "x", "0", "0"]]})

        result = runner.invoke(cli.main, ["atlanta"])

        assert result.exit_code == 1
        assert "rtt" in result.output

    def test_json_export(self, runner, fetcher, tmp_path):
        out = tmp_path / "out" / "samples.json"

        result = runner.invoke(cli.main, ["dallas", "newark", "--json", str(out)])

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert list(data["overviews"]) == ["dallas", "newark"]
        assert data["meta"]["sources"] == [
            "http://netint-dal.linode.com/ping/samples",
            "http://netint-nwk.linode.com/ping/samples",
        ]
        assert data["overviews"]["newark"]["samples"]["tokyo"]["rtt"] == 12

    def test_far_future_epoch(self, runner, fetcher, tmp_path):
        """Epochs past year 9999 still print and export."""
        fetcher.body = make_body([2**40, "1", "0", "0"])
        out = tmp_path / "samples.json"

        result = runner.invoke(cli.main, ["dallas", "--json", str(out)])

        assert result.exit_code == 0, result.output
        assert result.exception is None
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["overviews"]["dallas"]["samples"]["london"]["timestamp"] is None
