# /models.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------
# Excuse generation
# ----------------------------

class CustomOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: Optional[str] = None  # canonical style name; None = surprise me
    narrative_element_ids: Tuple[str, ...] = ()
    focus_id: Optional[str] = None


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    scenario: str
    audience: str
    custom_options: Optional[CustomOptions] = None


class ExcuseItem(BaseModel):
    title: str = Field(min_length=1)
    text: str = Field(min_length=1)

    @field_validator("title", "text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class ExcusePair(BaseModel):
    excuse1: ExcuseItem  # always the mundane excuse
    excuse2: ExcuseItem  # always written in comedicStyle
    comedicStyle: str


# ----------------------------
# Image generation
# ----------------------------

class Headshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    base64: str
    mime_type: str


class ImageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    excuse_text: str
    comedic_style: str  # canonical style name
    headshot: Optional[Headshot] = None


class GeneratedImage(BaseModel):
    mime_type: str = "image/png"
    base64: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


class ImageResponse(BaseModel):
    imageUrl: str


class ErrorResponse(BaseModel):
    error: str
