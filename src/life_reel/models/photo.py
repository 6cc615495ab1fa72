"""Photo data model."""

from datetime import date, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Photo(BaseModel):
    """A dated photo or video. Media lives outside the package."""

    id: UUID = Field(default_factory=uuid4, description="Unique photo identifier")
    asset_identifier: str = Field(..., description="Opaque reference to external media storage")
    date_taken: datetime = Field(..., description="Capture timestamp")
    is_video: bool = Field(default=False)

    @property
    def capture_day(self) -> date:
        """Calendar day the photo was taken."""
        return self.date_taken.date()
