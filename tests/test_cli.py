from __future__ import annotations

import json

import pytest

from treasury_yields import __version__, cli
from treasury_yields.data.cache.store import CurveCache
from treasury_yields.data.ingestion.treasury import TreasuryCurveIngestor
from treasury_yields.service import YieldQueryService


@pytest.fixture
def patched_service(monkeypatch, feed_xml, fake_client_factory, clock):
    def factory(responses):
        service = YieldQueryService(
            TreasuryCurveIngestor(fake_client_factory(responses)),
            cache=CurveCache(),
            clock=clock,
        )
        monkeypatch.setattr(cli, "build_service", lambda cfg: service)
        return service

    return factory


def test_version(capsys):
    cli.main(["version"])
    assert capsys.readouterr().out.strip() == __version__


def test_curve_json(patched_service, feed_xml, capsys):
    doc = feed_xml([("2024-01-15T00:00:00", {"BC_1MONTH": "4.25", "BC_2YEAR": "4.75"})])
    patched_service({"202401": doc})

    cli.main(["curve", "--json"])

    assert json.loads(capsys.readouterr().out) == [
        {"term": "1M", "rate": 4.25},
        {"term": "2Y", "rate": 4.75},
    ]


def test_curve_table(patched_service, feed_xml, capsys):
    doc = feed_xml([("2024-01-15T00:00:00", {"BC_30YEAR": "4.40"})])
    patched_service({"202401": doc})

    cli.main(["curve"])

    out = capsys.readouterr().out
    assert "30Y" in out
    assert "4.4" in out


def test_curve_unavailable(patched_service, capsys):
    patched_service({})
    cli.main(["curve"])
    assert "No yield curve available" in capsys.readouterr().out


def test_curve_with_config_file(patched_service, tmp_path, capsys):
    patched_service({})
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("cache:\n  ttl_minutes: 5\n")
    cli.main(["curve", "--json", "--config", str(cfg_path)])
    assert json.loads(capsys.readouterr().out) == []
