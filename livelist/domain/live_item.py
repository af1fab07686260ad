"""Live item models as returned by the live list backend."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TITLE = "no title"


class UserInfo(BaseModel):
    """Streamer information attached to a live item"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nickname: str


class LiveItem(BaseModel):
    """A single live stream entry"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="liveId")
    user_info: UserInfo = Field(alias="userInfo")
    title: Optional[str] = None
    cover_path: Optional[str] = Field(default=None, alias="coverPath")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Backends send numeric ids for some streams"""
        if isinstance(v, int):
            return str(v)
        return v


class LivePage(BaseModel):
    """One page of live items plus the cursor for the next one"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: List[LiveItem] = Field(default_factory=list, alias="liveList")
    next_id: Optional[str] = Field(default=None, alias="next")

    @field_validator("next_id", mode="before")
    @classmethod
    def normalize_cursor(cls, v):
        if v is None:
            return None
        v = str(v)
        return v or None


def display_title(item: LiveItem, default: str = DEFAULT_TITLE) -> str:
    """Return the item's title, or ``default`` when it is missing or blank."""
    if item.title is None or not item.title.strip():
        return default
    return item.title
