"""Image generation Pydantic models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from common.models import Gender


class GenerateRequest(BaseModel):
    """Body of POST /api/generate. Field names follow the browser client's camelCase."""
    model_config = ConfigDict(populate_by_name=True)

    image_base64: str = Field(..., alias="imageBase64", min_length=1, description="Base64 image payload without data URL prefix")
    mime_type: str = Field(..., alias="mimeType", min_length=1, description="Image MIME type (image/jpeg or image/png)")
    gender: Gender


class GenerateResponse(BaseModel):
    dataUrl: str = Field(..., description="data:<mimeType>;base64,<payload>")


class ErrorResponse(BaseModel):
    error: str


class InlineImage(BaseModel):
    """Inline image data pulled out of a Gemini content part."""
    mime_type: str = Field("image/png", description="Image MIME type reported by the model")
    data: str = Field(..., description="Base64-encoded image data")
    text: Optional[str] = Field(None, description="Text the model returned alongside the image, if any")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"
