from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import pytest

from shipinfo import app as app_module
from shipinfo.adapters.perplexity import PerplexityClient
from shipinfo.adapters.report import REPORT_COLUMNS
from shipinfo.app import enrich_vessel_manifest
from shipinfo.domain.ports.lookup import LookupReply
from shipinfo.domain.types import LookupStatus
from tests.helpers.http import make_client_factory
from tests.helpers.lookup import FakeLookupClient, completion_body, reply_for

if TYPE_CHECKING:
    from shipinfo.config.perplexity import PerplexityConfig

EVER_GIVEN = {
    "vessel_name": "EVER GIVEN",
    "imo_number": "9811000",
    "country_of_construction": "Japan",
    "shipbuilder_name": "Imabari Shipbuilding",
    "ship_flag": "Panama",
    "year_built": "2018",
}


def _read_report(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        assert tuple(reader.fieldnames or ()) == REPORT_COLUMNS
        return list(reader)


def test_enrich_vessel_manifest_writes_one_row_per_unique_vessel(
    manifest_path: Path, tmp_path: Path
) -> None:
    output = tmp_path / "out.csv"
    client = FakeLookupClient.with_replies(
        [
            reply_for(EVER_GIVEN),
            reply_for({**EVER_GIVEN, "imo_number": "9680102", "country_of_construction": ""}),
            LookupReply(content=None, body='{"detail": "unauthorized"}'),
        ],
        [reply_for({"country_of_construction": "South Korea", "shipbuilder_name": "Hyundai Mipo"})],
    )

    result = enrich_vessel_manifest(manifest_path, output_path=output, client=client)

    rows = _read_report(output)
    assert result.written == len(rows) == 3
    assert result.output_path == output
    assert [row["vessel_name"] for row in rows] == ["EVER GIVEN", "STOLT TENACITY", "PACIFIC BASIN"]
    assert [row["ship_type"] for row in rows] == ["Container", "Tanker / Chemical Tanker", "Dry Bulk"]
    assert [row["lookup_status"] for row in rows] == ["success", "success_with_retry", "api_error"]
    assert rows[1]["country_of_construction"] == "South Korea"
    assert rows[1]["shipbuilder_name"] == "Hyundai Mipo"
    assert rows[2]["raw_response"] == '{"detail": "unauthorized"}'
    assert client.construction_calls == [("STOLT TENACITY", "9680102")]
    assert result.status_counts == {
        LookupStatus.SUCCESS: 1,
        LookupStatus.SUCCESS_WITH_RETRY: 1,
        LookupStatus.API_ERROR: 1,
    }


def test_enrich_vessel_manifest_respects_row_limit(manifest_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    client = FakeLookupClient.with_replies([reply_for(EVER_GIVEN)])

    result = enrich_vessel_manifest(manifest_path, output_path=output, rows=3, client=client)

    assert result.written == 1
    assert client.vessel_calls == ["EVER GIVEN"]


def test_enrich_vessel_manifest_missing_input_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        enrich_vessel_manifest(
            tmp_path / "missing.csv",
            output_path=tmp_path / "out.csv",
            client=FakeLookupClient(),
        )

    assert not (tmp_path / "out.csv").exists()


def test_enrich_vessel_manifest_closes_input_when_output_unwritable(
    monkeypatch: pytest.MonkeyPatch, manifest_path: Path, tmp_path: Path
) -> None:
    opened = []
    path_open = Path.open

    def recording_open(self: Path, *args: object, **kwargs: object):  # noqa: ANN202
        handle = path_open(self, *args, **kwargs)  # type: ignore[arg-type]
        opened.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", recording_open)

    with pytest.raises(FileNotFoundError):
        enrich_vessel_manifest(
            manifest_path,
            output_path=tmp_path / "no-such-dir" / "out.csv",
            client=FakeLookupClient(),
        )

    (manifest_handle,) = opened
    assert manifest_handle.closed


def test_enrich_vessel_manifest_builds_and_closes_perplexity_client(
    monkeypatch: pytest.MonkeyPatch,
    manifest_path: Path,
    tmp_path: Path,
    perplexity_config: PerplexityConfig,
) -> None:
    seen_prompts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_prompts.append(request.content.decode())
        return httpx.Response(200, json=completion_body('{"imo_number": "", "ship_flag": "HK"}'))

    built: list[PerplexityClient] = []

    def build() -> PerplexityClient:
        client = PerplexityClient(config=perplexity_config, client_factory=make_client_factory(handler))
        built.append(client)
        return client

    monkeypatch.setattr(app_module, "build_perplexity_client", build)

    result = enrich_vessel_manifest(manifest_path, output_path=tmp_path / "out.csv")

    assert result.written == 3
    assert len(seen_prompts) == 3
    assert built[0]._client is None  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    assert {row["ship_flag"] for row in _read_report(tmp_path / "out.csv")} == {"HK"}


def test_enrich_vessel_manifest_logs_summary(
    caplog: pytest.LogCaptureFixture, manifest_path: Path, tmp_path: Path
) -> None:
    output = tmp_path / "out.csv"
    client = FakeLookupClient.with_replies([reply_for(EVER_GIVEN)])

    with caplog.at_level(logging.INFO, logger="shipinfo.app"):
        enrich_vessel_manifest(manifest_path, output_path=output, rows=1, client=client)

    summary = next(r for r in caplog.records if r.msg.startswith("Successfully processed"))
    assert summary.args == (1, output)
    assert summary.getMessage() == f"Successfully processed 1 ships and wrote results to {output}"
