"""Slack event envelope models with extracted fields."""

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    """A legacy Slack message attachment. Only the color bar is used."""

    color: str | None = None


class EventEnvelope(BaseModel):
    """The ``event`` object of a Slack Events API callback."""

    model_config = ConfigDict(populate_by_name=True)

    channel_id: str = Field(default="", alias="channel")
    text: str = ""
    attachments: list[Attachment] = []
