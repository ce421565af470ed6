from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .domain.models import ListFilter, OrderBy


class ListRequestFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    meeting_ids: list[int] = Field(default_factory=list, alias="meetingIds")
    visible: bool = False

    def to_domain(self) -> ListFilter:
        return ListFilter(meeting_ids=list(self.meeting_ids), visible=self.visible)


class ListRequestOrderBy(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    attribute_name: str = Field("", alias="attributeName")
    direction: Literal["ASC", "DESC"] = "ASC"

    def to_domain(self) -> OrderBy:
        return OrderBy(attribute_name=self.attribute_name, direction=self.direction)


class ListRequest(BaseModel):
    filter: ListRequestFilter | None = None
    order: ListRequestOrderBy | None = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class GetRequest(BaseModel):
    id: int
