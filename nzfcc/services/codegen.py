"""Render the synthesized taxonomy as Python source.

The output depends only on the snapshot: no timestamps or paths are
embedded, so the same snapshot always renders byte-identical source.
"""

from __future__ import annotations

from nzfcc.services.synthesizer import CodeRow, GroupRow, TaxonomyTables

HEADER = '''"""NZFCC category groups and codes.

Generated by `nzfcc generate` from the NZFCC categories.json snapshot.
Do not edit by hand; regenerate from an updated snapshot instead.

Snapshot SHA-256: {signature}
"""

from nzfcc.schemas.enums import CategoryGroupBase, NzfccCodeBase, bind_taxonomy
'''


def render_group_enum(rows: tuple[GroupRow, ...]) -> str:
    lines = [
        "class CategoryGroup(CategoryGroupBase):",
        '    """An enum of the possible NZFCC category groups."""',
        "",
    ]
    for row in rows:
        lines.append(f"    #: The {row.display_name!r} group.")
        lines.append(f"    {row.identifier} = {row.display_name!r}")
    if not rows:
        lines.pop()
    return "\n".join(lines) + "\n"


def render_code_enum(rows: tuple[CodeRow, ...]) -> str:
    lines = [
        "class NzfccCode(NzfccCodeBase):",
        '    """All possible New Zealand Financial Category Codes, see https://nzfcc.org/explore/."""',
        "",
    ]
    for row in rows:
        lines.append(f"    #: The {row.display_name!r} category.")
        lines.append(f"    {row.identifier} = {row.display_name!r}")
    if not rows:
        lines.pop()
    return "\n".join(lines) + "\n"


def _render_table(name: str, table: dict[str, str]) -> list[str]:
    lines = [f"    {name}={{"]
    lines.extend(f"        {key!r}: {value!r}," for key, value in table.items())
    lines.append("    },")
    return lines


def render_binding(tables: TaxonomyTables) -> str:
    lines = ["bind_taxonomy(", "    CategoryGroup,", "    NzfccCode,"]
    lines += _render_table("group_ids", tables.group_ids())
    lines += _render_table("code_ids", tables.code_ids())
    lines += _render_table("code_groups", tables.code_groups())
    lines.append(")")
    return "\n".join(lines) + "\n"


def render_module(tables: TaxonomyTables) -> str:
    """Render a complete module defining CategoryGroup and NzfccCode."""
    blocks = [
        HEADER.format(signature=tables.signature),
        render_group_enum(tables.groups),
        render_code_enum(tables.codes),
        render_binding(tables),
    ]
    return "\n\n".join(blocks)
