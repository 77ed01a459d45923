"""
NZFCC

Types and utilities for the New Zealand Financial Category Codes system,
https://nzfcc.org/explore/.

`CategoryGroup` and `NzfccCode` are built from the configured snapshot
(`NZFCC_SNAPSHOT_PATH`, default ./categories.json) on first access:

    from nzfcc import CategoryGroup, NzfccCode

    NzfccCode.CafesAndRestaurants.id()       # "nzfcc_..."
    NzfccCode.CafesAndRestaurants.group()    # CategoryGroup.Lifestyle
    CategoryGroup.parse("Household")         # CategoryGroup.Household
"""

from nzfcc.core.exceptions import (
    DuplicateIdentifierError,
    EmptyIdentifierError,
    GenerationError,
    InvalidIdentifierError,
    NzfccError,
    ParseCategoryGroupError,
    ParseNzfccCodeError,
    SnapshotNotFoundError,
    SnapshotParseError,
)

__version__ = "0.1.0"

__all__ = [
    "CategoryGroup",
    "NzfccCode",
    "DuplicateIdentifierError",
    "EmptyIdentifierError",
    "GenerationError",
    "InvalidIdentifierError",
    "NzfccError",
    "ParseCategoryGroupError",
    "ParseNzfccCodeError",
    "SnapshotNotFoundError",
    "SnapshotParseError",
]


def __getattr__(name: str):
    if name in ("CategoryGroup", "NzfccCode"):
        from nzfcc.services.registry import get_taxonomy

        return getattr(get_taxonomy(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
