from typing import Optional

from fastapi import APIRouter, HTTPException

from nzfcc.core.exceptions import ParseCategoryGroupError, ParseNzfccCodeError
from nzfcc.schemas.enums import CategoryGroupBase, NzfccCodeBase
from nzfcc.schemas.models import CodeResponse, GroupResponse
from nzfcc.services.registry import get_taxonomy
from nzfcc.services.synthesizer import Taxonomy

router = APIRouter()


def get_service() -> Taxonomy:
    return get_taxonomy()


def _group_response(group: CategoryGroupBase) -> GroupResponse:
    return GroupResponse(
        id=group.id(),
        name=group.value,
        identifier=group.name,
        code_count=len(group.codes()),
    )


def _code_response(code: NzfccCodeBase) -> CodeResponse:
    group = code.group()
    return CodeResponse(
        id=code.id(),
        name=code.value,
        identifier=code.name,
        group_id=group.id(),
        group_name=group.value,
    )


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/groups", response_model=list[GroupResponse])
def list_groups() -> list[GroupResponse]:
    """List all category groups in snapshot order."""
    return [_group_response(group) for group in get_service().CategoryGroup]


@router.get("/groups/{group_id}/codes", response_model=list[CodeResponse])
def list_group_codes(group_id: str) -> list[CodeResponse]:
    """List the NZFCC codes of one group."""
    try:
        group = get_service().CategoryGroup.from_id(group_id)
    except ParseCategoryGroupError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    return [_code_response(code) for code in group.codes()]


@router.get("/codes", response_model=list[CodeResponse])
def list_codes(name: Optional[str] = None) -> list[CodeResponse]:
    """List all NZFCC codes, or the one whose display name is `name`."""
    taxonomy = get_service()
    if name is None:
        return [_code_response(code) for code in taxonomy.NzfccCode]
    try:
        code = taxonomy.NzfccCode.parse(name)
    except ParseNzfccCodeError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    return [_code_response(code)]


@router.get("/codes/{code_id}", response_model=CodeResponse)
def get_code(code_id: str) -> CodeResponse:
    """Get one NZFCC code by stable ID."""
    try:
        code = get_service().NzfccCode.from_id(code_id)
    except ParseNzfccCodeError as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    return _code_response(code)
