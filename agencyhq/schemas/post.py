from pydantic import BaseModel, Field, model_validator
from typing import List, Literal, Optional

PostStatus = Literal["idea", "production", "approved", "scheduled", "posted"]
Platform = Literal["instagram", "facebook", "tiktok", "linkedin", "twitter"]
MediaType = Literal["image", "video", "carousel"]

MAX_MEDIA_PER_POST = 20
TOO_MANY_MEDIA = f"a post holds at most {MAX_MEDIA_PER_POST} media files"


def media_count(media_url: Optional[str], media_urls: Optional[List[str]]) -> int:
    """Main media plus gallery entries."""
    return len(media_urls or []) + (1 if media_url else 0)


class Comment(BaseModel):
    author: str
    text: str
    date: str


class CommentCreate(BaseModel):
    text: str = Field(min_length=1)


class PostBase(BaseModel):
    title: str
    caption: Optional[str] = None
    media_url: Optional[str] = None
    media_urls: List[str] = []
    media_type: MediaType = "image"
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    platform: Platform = "instagram"

    @model_validator(mode="after")
    def check_media_count(self):
        if media_count(self.media_url, self.media_urls) > MAX_MEDIA_PER_POST:
            raise ValueError(TOO_MANY_MEDIA)
        return self


class PostCreate(PostBase):
    client_id: int
    status: PostStatus = "idea"


class PostUpdate(BaseModel):
    client_id: Optional[int] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    media_url: Optional[str] = None
    media_urls: Optional[List[str]] = None
    media_type: Optional[MediaType] = None
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    status: Optional[PostStatus] = None
    platform: Optional[Platform] = None


class StatusUpdate(BaseModel):
    status: PostStatus


class PostResponse(BaseModel):
    id: int
    client_id: int
    client_name: str = ""
    title: str
    caption: Optional[str] = None
    media_url: Optional[str] = None
    media_urls: List[str] = []
    media_type: Optional[str] = None
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    status: str
    platform: Optional[str] = None
    comments: List[Comment] = []
