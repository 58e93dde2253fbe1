"""
Pydantic models for request body validation
"""
import re
from typing import Optional

from fastapi import HTTPException, Request
from pydantic import BaseModel, Field, ValidationError, field_validator

# Matches nested form keys such as "campground[title]"
NESTED_KEY = re.compile(r"^(\w+)\[(\w+)\]$")


class CampgroundIn(BaseModel):
    """
    Campground fields accepted from the new/edit forms
    """
    title: str = Field(..., min_length=1)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    image: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("price", "image", "description", "location", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Browsers submit empty inputs as empty strings"""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ReviewIn(BaseModel):
    body: str = Field(..., min_length=1)
    rating: float = Field(..., ge=1, le=5, allow_inf_nan=False)

    @field_validator("body", mode="before")
    @classmethod
    def strip_body(cls, v):
        return v.strip() if isinstance(v, str) else v


class CampgroundPayload(BaseModel):
    campground: CampgroundIn


class ReviewPayload(BaseModel):
    review: ReviewIn


def parse_nested_form(form):
    """Group "key[field]" form entries into {"key": {"field": value}}."""
    data = {}
    for key, value in form.multi_items():
        match = NESTED_KEY.match(key)
        if match:
            group = data.setdefault(match.group(1), {})
            if isinstance(group, dict):
                group[match.group(2)] = value
        else:
            data[key] = value
    return data


def _error_message(error):
    path = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing":
        return f'"{path}" is required'
    if error["type"] in ("float_parsing", "float_type"):
        return f'"{path}" must be a number'
    if error["type"] == "string_too_short":
        return f'"{path}" is not allowed to be empty'
    return f'"{path}" {error["msg"][0].lower()}{error["msg"][1:]}'


def validate_payload(model, data):
    """
    Validate a request body against a payload model.

    Raises:
        HTTPException: 400 with every failure message joined by a comma
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        message = ",".join(_error_message(error) for error in e.errors())
        raise HTTPException(status_code=400, detail=message)


async def validate_campground(request: Request) -> CampgroundIn:
    data = parse_nested_form(await request.form())
    return validate_payload(CampgroundPayload, data).campground


async def validate_review(request: Request) -> ReviewIn:
    data = parse_nested_form(await request.form())
    return validate_payload(ReviewPayload, data).review
