from pydantic import BaseModel, Field
from typing import Optional, Union


class ContentSnapshot(BaseModel):
    """State of a content record before or after a save, as the host reports it."""

    id: Union[int, str] = Field(..., title="Record ID")
    title: Optional[str] = Field(None, title="Title")
    body: Optional[str] = Field(None, title="Body")

    def differs_from(self, other: "ContentSnapshot") -> bool:
        """True when title or body changed; other fields never count."""
        return self.title != other.title or self.body != other.body

    class Config:
        extra = "ignore"
