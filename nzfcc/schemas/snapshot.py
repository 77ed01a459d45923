"""
Snapshot Models

Pydantic models for the NZFCC categories.json snapshot and the records the
loader reshapes it into.
"""

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Wire Models (categories.json)
# =============================================================================


class SnapshotGroup(BaseModel):
    """A group sub-record embedded in a snapshot entry."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., alias="_id", description="Group stable ID, e.g. 'group_...'")
    name: str


class SnapshotGroups(BaseModel):
    """The group classifications of a snapshot entry."""

    model_config = ConfigDict(extra="forbid", strict=True)

    personal_finance: SnapshotGroup


class SnapshotCategory(BaseModel):
    """One category entry of the snapshot."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., alias="_id", description="Category stable ID, e.g. 'nzfcc_...'")
    name: str
    groups: SnapshotGroups


# =============================================================================
# Records
# =============================================================================


class GroupRecord(BaseModel):
    """A distinct category group."""

    model_config = ConfigDict(frozen=True)

    stable_id: str
    display_name: str


class CategoryRecord(BaseModel):
    """A category code and the group that owns it."""

    model_config = ConfigDict(frozen=True)

    stable_id: str
    display_name: str
    owning_group: GroupRecord


class Snapshot(BaseModel):
    """A fully loaded snapshot: every category plus the deduplicated groups."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[CategoryRecord, ...]
    groups: tuple[GroupRecord, ...]
    signature: str = Field(..., description="SHA-256 of the raw snapshot text.")
