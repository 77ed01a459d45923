"""
Taxonomy Enums

Base classes shared by the generated CategoryGroup and NzfccCode
enumerations. A member's value is its display name, so members render
and serialize as the name NZFCC publishes. Members are not strings: they
only equal themselves, and sort in snapshot order.

Per-member data (stable ID, owning group, code bucket) is attached once by
`bind_taxonomy` and never changes afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from functools import total_ordering

from nzfcc.core.exceptions import GenerationError, ParseCategoryGroupError, ParseNzfccCodeError


@total_ordering
class TaxonomyEnum(Enum):
    """Behaviour common to both taxonomy enumerations."""

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        names = type(self)._member_names_
        return names.index(self.name) < names.index(other.name)

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> tuple:
        """All members, in snapshot order."""
        return tuple(cls)

    @classmethod
    def parse(cls, value: str):
        """Resolve a display name to its member.

        Only an exact match succeeds; anything else raises the enumeration's
        parse error carrying the offending input.
        """
        member = cls._value2member_map_.get(value) if isinstance(value, str) else None
        if member is None:
            raise cls._parse_error(value)
        return member

    @classmethod
    def from_id(cls, stable_id: str):
        """Resolve a stable ID to its member."""
        for member in cls:
            if member._stable_id == stable_id:
                return member
        raise cls._parse_error(stable_id)

    @classmethod
    def _parse_error(cls, value: object) -> ValueError:
        raise NotImplementedError


class CategoryGroupBase(TaxonomyEnum):
    """Base for the possible NZFCC category groups."""

    def id(self) -> str:
        """Returns the ID of the category group, always prefixed by `group_`."""
        return self._stable_id

    def codes(self) -> tuple:
        """All NZFCC codes belonging to this group, in snapshot order."""
        return self._codes

    @classmethod
    def _parse_error(cls, value: object) -> ParseCategoryGroupError:
        return ParseCategoryGroupError(value)


class NzfccCodeBase(TaxonomyEnum):
    """Base for the New Zealand Financial Category Codes, see https://nzfcc.org/explore/."""

    def id(self) -> str:
        """Returns the ID of the NZFCC code, always prefixed by `nzfcc_`."""
        return self._stable_id

    def group(self) -> CategoryGroupBase:
        """The category group this code belongs to."""
        return self._group

    @classmethod
    def _parse_error(cls, value: object) -> ParseNzfccCodeError:
        return ParseNzfccCodeError(value)


def _check_keys(enum_cls: type[Enum], table: Mapping[str, str], table_name: str) -> None:
    members = set(enum_cls.__members__)
    keys = set(table)
    if members != keys:
        raise GenerationError(
            f"{table_name} does not cover {enum_cls.__name__} exactly",
            {
                "missing": sorted(members - keys),
                "unexpected": sorted(keys - members),
            },
        )


def bind_taxonomy(
    group_enum: type[CategoryGroupBase],
    code_enum: type[NzfccCodeBase],
    *,
    group_ids: Mapping[str, str],
    code_ids: Mapping[str, str],
    code_groups: Mapping[str, str],
) -> None:
    """Attach stable IDs and the code/group cross-reference to both enums.

    Args:
        group_enum: CategoryGroup enumeration
        code_enum: NzfccCode enumeration
        group_ids: group identifier -> group stable ID
        code_ids: code identifier -> code stable ID
        code_groups: code identifier -> owning group identifier

    Raises:
        GenerationError: if a table does not cover its enumeration exactly,
            a code names an unknown group, or a group owns no codes.
    """
    _check_keys(group_enum, group_ids, "group_ids")
    _check_keys(code_enum, code_ids, "code_ids")
    _check_keys(code_enum, code_groups, "code_groups")

    buckets: dict[str, list[NzfccCodeBase]] = {name: [] for name in group_enum.__members__}
    for code in code_enum:
        group_name = code_groups[code.name]
        if group_name not in buckets:
            raise GenerationError(
                f"{code_enum.__name__}.{code.name} belongs to unknown group {group_name!r}",
                {"code": code.name, "group": group_name},
            )
        buckets[group_name].append(code)

    empty = [name for name, codes in buckets.items() if not codes]
    if empty:
        raise GenerationError(
            f"{group_enum.__name__} has groups without codes: {', '.join(empty)}",
            {"groups": empty},
        )

    for group in group_enum:
        group._stable_id = group_ids[group.name]
        group._codes = tuple(buckets[group.name])
    for code in code_enum:
        code._stable_id = code_ids[code.name]
        code._group = group_enum[code_groups[code.name]]
