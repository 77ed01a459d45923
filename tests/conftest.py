"""Pytest fixtures and configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Generator

import pytest

from nzfcc.schemas.snapshot import Snapshot
from nzfcc.services.loader import load_snapshot
from nzfcc.services.registry import reset_taxonomy
from nzfcc.services.synthesizer import Taxonomy, synthesize


def make_entry(stable_id: str, name: str, group_id: str, group_name: str) -> dict[str, Any]:
    """Build one categories.json entry."""
    return {
        "_id": stable_id,
        "name": name,
        "groups": {"personal_finance": {"_id": group_id, "name": group_name}},
    }


@pytest.fixture
def sample_entries() -> list[dict[str, Any]]:
    """A small categories.json snapshot spanning four groups."""
    return [
        make_entry("nzfcc_001", "Cafes and restaurants", "group_01", "Lifestyle"),
        make_entry("nzfcc_002", "Bars, pubs, nightclubs", "group_01", "Lifestyle"),
        make_entry("nzfcc_003", "Supermarkets and grocery stores", "group_02", "Food"),
        make_entry("nzfcc_004", "Accounting", "group_03", "Professional Services"),
        make_entry("nzfcc_005", "Takeaways", "group_02", "Food"),
        make_entry("nzfcc_006", "Doctors and GPs", "group_04", "Health"),
    ]


@pytest.fixture
def sample_snapshot_text(sample_entries: list[dict[str, Any]]) -> str:
    """Sample snapshot serialized the way nzfcc.org publishes it."""
    return json.dumps(sample_entries, indent=2)


@pytest.fixture
def sample_snapshot(sample_snapshot_text: str) -> Snapshot:
    """Loaded sample snapshot."""
    return load_snapshot(sample_snapshot_text)


@pytest.fixture
def taxonomy(sample_snapshot: Snapshot) -> Taxonomy:
    """Enumerations synthesized from the sample snapshot."""
    return synthesize(sample_snapshot)


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_snapshot_text: str) -> Path:
    """Sample snapshot written to a categories.json file."""
    path = tmp_path / "categories.json"
    path.write_text(sample_snapshot_text, encoding="utf-8")
    return path


@pytest.fixture
def clean_registry() -> Generator[None, None, None]:
    """Drop the process-wide taxonomy before and after the test."""
    reset_taxonomy()
    yield
    reset_taxonomy()
