from pydantic import BaseModel, Field


class GroupResponse(BaseModel):
    id: str = Field(..., description="Group stable ID, prefixed by 'group_'.")
    name: str
    identifier: str
    code_count: int


class CodeResponse(BaseModel):
    id: str = Field(..., description="NZFCC stable ID, prefixed by 'nzfcc_'.")
    name: str
    identifier: str
    group_id: str
    group_name: str
