"""Shared pyramid fixtures loaded from `tests/fixtures/pyramids.yaml`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "pyramids.yaml"


@dataclass(frozen=True)
class KnownPyramid:
    name: str
    levels: list[list[int]]
    expected: int


def load_known_pyramids() -> list[KnownPyramid]:
    obj: Any = yaml.safe_load(FIXTURES.read_text(encoding="utf-8"))
    return [
        KnownPyramid(name=name, levels=entry["levels"], expected=int(entry["expected"]))
        for name, entry in sorted(obj.items())
    ]


KNOWN_PYRAMIDS = load_known_pyramids()


@pytest.fixture(params=KNOWN_PYRAMIDS, ids=lambda k: k.name)
def known_pyramid(request: pytest.FixtureRequest) -> KnownPyramid:
    return request.param


@pytest.fixture
def known_by_name() -> dict[str, KnownPyramid]:
    return {k.name: k for k in KNOWN_PYRAMIDS}
