"""Unit tests for the taxonomy loader."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from conftest import make_entry
from nzfcc.core.exceptions import SnapshotParseError
from nzfcc.core.utils import snapshot_signature
from nzfcc.services.loader import load_snapshot, parse_snapshot


class TestLoadSnapshot:
    """Tests for reshaping a snapshot into records."""

    def test_keeps_every_category_in_order(self, sample_snapshot, sample_entries):
        ids = [c.stable_id for c in sample_snapshot.categories]
        assert ids == [e["_id"] for e in sample_entries]

    def test_category_fields(self, sample_snapshot):
        first = sample_snapshot.categories[0]
        assert first.stable_id == "nzfcc_001"
        assert first.display_name == "Cafes and restaurants"
        assert first.owning_group.stable_id == "group_01"
        assert first.owning_group.display_name == "Lifestyle"

    def test_groups_deduplicated_in_first_appearance_order(self, sample_snapshot):
        names = [g.display_name for g in sample_snapshot.groups]
        assert names == ["Lifestyle", "Food", "Professional Services", "Health"]

    def test_categories_share_group_record(self, sample_snapshot):
        cafes, bars = sample_snapshot.categories[0], sample_snapshot.categories[1]
        assert cafes.owning_group is bars.owning_group

    def test_signature(self, sample_snapshot, sample_snapshot_text):
        assert sample_snapshot.signature == snapshot_signature(sample_snapshot_text)

    def test_empty_snapshot(self):
        snapshot = load_snapshot("[]")
        assert snapshot.categories == ()
        assert snapshot.groups == ()

    def test_conflicting_group_name_keeps_first(self):
        text = json.dumps([
            make_entry("nzfcc_001", "Takeaways", "group_01", "Food"),
            make_entry("nzfcc_002", "Bakeries", "group_01", "Food and drink"),
        ])
        with patch("nzfcc.services.loader.logger") as mock_logger:
            snapshot = load_snapshot(text)

        assert len(snapshot.groups) == 1
        assert snapshot.groups[0].display_name == "Food"
        assert snapshot.categories[1].owning_group.display_name == "Food"
        mock_logger.warning.assert_called_once()

    def test_repeated_category_id(self):
        text = json.dumps([
            make_entry("nzfcc_001", "Takeaways", "group_01", "Food"),
            make_entry("nzfcc_002", "Bakeries", "group_01", "Food"),
            make_entry("nzfcc_001", "Butchers", "group_01", "Food"),
        ])
        with pytest.raises(SnapshotParseError) as exc_info:
            load_snapshot(text)
        assert "2._id" in exc_info.value.message
        assert exc_info.value.details == {"id": "nzfcc_001", "entries": [0, 2]}


class TestStrictSchema:
    """Tests for malformed snapshots."""

    def test_invalid_json(self):
        with pytest.raises(SnapshotParseError):
            parse_snapshot("[{")

    def test_top_level_must_be_array(self):
        with pytest.raises(SnapshotParseError):
            parse_snapshot('{"_id": "nzfcc_001"}')

    def test_missing_field(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        del entry["name"]
        with pytest.raises(SnapshotParseError) as exc_info:
            parse_snapshot(json.dumps([entry]))
        assert exc_info.value.details["errors"][0]["loc"] == (0, "name")

    def test_missing_group_field(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        del entry["groups"]["personal_finance"]["_id"]
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_wrong_type_is_not_coerced(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["_id"] = 1
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_unknown_top_level_field(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["description"] = "Fish and chips"
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_unknown_groups_field(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["groups"]["business"] = {"_id": "group_99", "name": "Retail"}
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_unknown_nested_group_field(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["groups"]["personal_finance"]["colour"] = "green"
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_plain_id_key_rejected(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["id"] = entry.pop("_id")
        with pytest.raises(SnapshotParseError):
            parse_snapshot(json.dumps([entry]))

    def test_error_message_names_location(self):
        entry = make_entry("nzfcc_001", "Takeaways", "group_01", "Food")
        entry["groups"]["personal_finance"]["name"] = None
        with pytest.raises(SnapshotParseError) as exc_info:
            load_snapshot(json.dumps([entry]))
        assert "0.groups.personal_finance.name" in exc_info.value.message
