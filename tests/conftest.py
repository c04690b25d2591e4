from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shipinfo.config.http_resilience import ResilienceConfig, RetryPolicy
from shipinfo.config.perplexity import PerplexityConfig

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST_HEADER = (
    "BILL OF LADING,VESSEL NAME,QUANTITY UNIT,SHIP REGISTERED IN,CARRIER CODE,CARRIER NAME\n"
)


@pytest.fixture
def perplexity_config() -> PerplexityConfig:
    return PerplexityConfig(
        api_key="test-key",
        resilience=ResilienceConfig(
            name="perplexity",
            base_url="https://perplexity.test",
            retry=RetryPolicy(total=0),
            default_headers={"Authorization": "Bearer test-key"},
        ),
    )


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "manifest.csv"
    path.write_text(
        MANIFEST_HEADER
        + "BL1,EVER GIVEN,CNT,Panama,EGLV,Evergreen Marine\n"
        + "BL2,,DBK,Liberia,MSCU,MSC\n"
        + "BL3,EVER GIVEN,CNT,Panama,EGLV,Evergreen Marine\n"
        + "BL4,STOLT TENACITY,LBK,Marshall Islands,SNTM,Stolt Tankers\n"
        + "BL5,PACIFIC BASIN,DBK,Hong Kong,PBSL,Pacific Basin\n",
        encoding="utf-8",
    )
    return path
