"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


EXAMPLE_SHARE_ID = (
    "project_0b9e2f1a-1111-2222-3333-444455556666_20240115_093000_"
    "aabbccdd-5555-6666-7777-888899990000"
)


class EncodeRequest(BaseModel):
    """Request to encode a share id."""
    
    share_id: str = Field(..., description="Verbose share id minted by the backend", max_length=512)
    
    model_config = {
        "json_schema_extra": {
            "examples": [{"share_id": EXAMPLE_SHARE_ID}]
        }
    }


class EncodeResponse(BaseModel):
    """Compact share code for a share id."""
    
    share_id: str
    code: str = Field(..., description="Compact, URL-safe share code")


class DecodeResponse(BaseModel):
    """Share id recovered from a share code."""
    
    code: str
    share_id: str
    entity_type: str


class SlugifyRequest(BaseModel):
    """Request to slugify a title."""
    
    text: str = Field(..., description="Display title", max_length=2048)


class SlugifyResponse(BaseModel):
    text: str
    slug: str = Field(..., description="Lowercase hyphenated slug (may be empty)")


class LinkRequest(BaseModel):
    """Request to build a short link."""
    
    share_id: str = Field(..., description="Verbose share id minted by the backend", max_length=512)
    title: Optional[str] = Field(None, description="Display title used for the slug")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"share_id": EXAMPLE_SHARE_ID, "title": "Q3 Report: Revenue & Growth"}
            ]
        }
    }


class LinkResponse(BaseModel):
    """A built short link."""
    
    url: str = Field(..., description="Complete short link")
    code: str
    slug: str
    entity_type: str


class ResolutionResponse(BaseModel):
    """Result of resolving a vanity segment."""
    
    entity_type: str
    share_id: str
    decoded: bool = Field(..., description="False when the segment was passed through literally")
    target_path: str


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    entity_types: List[str] = Field(..., description="Supported entity types")
    timestamp: datetime = Field(..., description="Check timestamp")

