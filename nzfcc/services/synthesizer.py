from __future__ import annotations

from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from nzfcc.core.exceptions import DuplicateIdentifierError
from nzfcc.core.logging import LogContext, get_logger
from nzfcc.schemas.enums import CategoryGroupBase, NzfccCodeBase, TaxonomyEnum, bind_taxonomy
from nzfcc.schemas.snapshot import CategoryRecord, GroupRecord, Snapshot
from nzfcc.services.identifiers import code_identifier, group_identifier, validate_identifier

logger = get_logger("nzfcc.services.synthesizer")


class GroupRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    stable_id: str
    display_name: str


class CodeRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    stable_id: str
    display_name: str
    group_identifier: str


class TaxonomyTables(BaseModel):
    """Flat lookup tables for both enumerations, in snapshot order."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[GroupRow, ...]
    codes: tuple[CodeRow, ...]
    signature: str

    def group_ids(self) -> dict[str, str]:
        return {row.identifier: row.stable_id for row in self.groups}

    def code_ids(self) -> dict[str, str]:
        return {row.identifier: row.stable_id for row in self.codes}

    def code_groups(self) -> dict[str, str]:
        return {row.identifier: row.group_identifier for row in self.codes}


class Taxonomy:
    """The two synthesized enumerations of one snapshot."""

    def __init__(
        self,
        category_group: type[CategoryGroupBase],
        nzfcc_code: type[NzfccCodeBase],
        tables: TaxonomyTables,
    ) -> None:
        self.CategoryGroup = category_group
        self.NzfccCode = nzfcc_code
        self.tables = tables

    def __repr__(self) -> str:
        return (
            f"Taxonomy(groups={len(self.CategoryGroup)}, codes={len(self.NzfccCode)}, "
            f"signature={self.tables.signature[:12]})"
        )


def _assign_identifiers(
    names: Iterable[str],
    derive: Callable[[str], str],
    base: type[TaxonomyEnum],
    enum_name: str,
) -> list[str]:
    seen: dict[str, str] = {}
    identifiers = []
    for display_name in names:
        identifier = validate_identifier(derive(display_name), display_name, base)
        if identifier in seen:
            raise DuplicateIdentifierError(identifier, seen[identifier], display_name, enum_name)
        seen[identifier] = display_name
        identifiers.append(identifier)
    return identifiers


def build_group_rows(groups: Iterable[GroupRecord]) -> tuple[GroupRow, ...]:
    groups = list(groups)
    identifiers = _assign_identifiers(
        (g.display_name for g in groups), group_identifier, CategoryGroupBase, "CategoryGroup"
    )
    return tuple(
        GroupRow(identifier=identifier, stable_id=g.stable_id, display_name=g.display_name)
        for identifier, g in zip(identifiers, groups)
    )


def build_code_rows(
    categories: Iterable[CategoryRecord],
    group_rows: Iterable[GroupRow],
) -> tuple[CodeRow, ...]:
    categories = list(categories)
    group_by_id = {row.stable_id: row.identifier for row in group_rows}
    identifiers = _assign_identifiers(
        (c.display_name for c in categories), code_identifier, NzfccCodeBase, "NzfccCode"
    )
    return tuple(
        CodeRow(
            identifier=identifier,
            stable_id=c.stable_id,
            display_name=c.display_name,
            group_identifier=group_by_id[c.owning_group.stable_id],
        )
        for identifier, c in zip(identifiers, categories)
    )


def build_tables(snapshot: Snapshot) -> TaxonomyTables:
    """Derive identifiers for every group and code of a snapshot.

    Raises:
        DuplicateIdentifierError: two names in one enumeration collapse to
            the same identifier.
        InvalidIdentifierError: a name derives an empty or unusable identifier.
    """
    group_rows = build_group_rows(snapshot.groups)
    code_rows = build_code_rows(snapshot.categories, group_rows)
    return TaxonomyTables(groups=group_rows, codes=code_rows, signature=snapshot.signature)


def synthesize(snapshot: Snapshot, module: str | None = None) -> Taxonomy:
    """Build the CategoryGroup and NzfccCode enumerations in-process."""
    with LogContext(logger, "synthesize", groups=len(snapshot.groups), codes=len(snapshot.categories)):
        tables = build_tables(snapshot)
        module = module or __name__

        category_group = CategoryGroupBase(
            "CategoryGroup",
            [(row.identifier, row.display_name) for row in tables.groups],
            module=module,
        )
        nzfcc_code = NzfccCodeBase(
            "NzfccCode",
            [(row.identifier, row.display_name) for row in tables.codes],
            module=module,
        )
        bind_taxonomy(
            category_group,
            nzfcc_code,
            group_ids=tables.group_ids(),
            code_ids=tables.code_ids(),
            code_groups=tables.code_groups(),
        )
        return Taxonomy(category_group, nzfcc_code, tables)
