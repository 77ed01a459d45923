from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from nzfcc.core.exceptions import SnapshotParseError
from nzfcc.core.logging import get_logger
from nzfcc.core.utils import snapshot_signature
from nzfcc.schemas.snapshot import CategoryRecord, GroupRecord, Snapshot, SnapshotCategory

logger = get_logger("nzfcc.services.loader")

_entries_adapter = TypeAdapter(list[SnapshotCategory])


def parse_snapshot(text: str) -> list[SnapshotCategory]:
    """Validate raw snapshot JSON against the strict categories.json schema.

    Raises:
        SnapshotParseError: on invalid JSON, a non-array document, missing or
            mistyped fields, or any field the schema does not know.
    """
    try:
        return _entries_adapter.validate_json(text)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_input=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise SnapshotParseError(
            f"Malformed taxonomy snapshot at {location or '<root>'}: {first.get('msg', e)}",
            {"errors": errors},
        ) from e


def load_snapshot(text: str) -> Snapshot:
    """Parse a snapshot and reshape it into category and group records.

    Categories keep snapshot order. Groups are deduplicated by stable ID and
    kept in order of first appearance.

    Raises:
        SnapshotParseError: on schema violations or a repeated category ID.
    """
    entries = parse_snapshot(text)

    groups: dict[str, GroupRecord] = {}
    categories: list[CategoryRecord] = []
    seen_ids: dict[str, int] = {}
    for index, entry in enumerate(entries):
        if entry.id in seen_ids:
            raise SnapshotParseError(
                f"Malformed taxonomy snapshot at {index}._id: category {entry.id} "
                f"already defined at entry {seen_ids[entry.id]}",
                {"id": entry.id, "entries": [seen_ids[entry.id], index]},
            )
        seen_ids[entry.id] = index

        raw_group = entry.groups.personal_finance
        group = groups.get(raw_group.id)
        if group is None:
            group = GroupRecord(stable_id=raw_group.id, display_name=raw_group.name)
            groups[raw_group.id] = group
        elif group.display_name != raw_group.name:
            logger.warning(
                f"Group {raw_group.id} is named {raw_group.name!r} by {entry.id}, "
                f"keeping first name {group.display_name!r}"
            )
        categories.append(
            CategoryRecord(stable_id=entry.id, display_name=entry.name, owning_group=group)
        )

    logger.info(f"Loaded {len(categories)} categories in {len(groups)} groups")
    return Snapshot(
        categories=tuple(categories),
        groups=tuple(groups.values()),
        signature=snapshot_signature(text),
    )
