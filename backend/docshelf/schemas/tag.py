from pydantic import BaseModel


class TagCreate(BaseModel):
    """Schema for creating a tag"""

    name: str | None = None
    color: str | None = None


class TagUpdate(BaseModel):
    """Schema for updating a tag; empty or missing fields are left unchanged"""

    name: str | None = None
    color: str | None = None


class TagResponse(BaseModel):
    """Schema for tag responses"""

    id: str
    name: str
    color: str | None

    class Config:
        from_attributes = True


class TagListResponse(BaseModel):
    tags: list[TagResponse]


class TagStatResponse(BaseModel):
    """Schema for a tag with its document usage count"""

    id: str
    name: str
    color: str | None
    count: int = 0

    class Config:
        from_attributes = True


class TagStatsResponse(BaseModel):
    stats: list[TagStatResponse]


class TagIdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
