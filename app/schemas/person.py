"""
Person Pydantic Schemas

Validation rules for data submitted when creating a person.

Pydantic v2 Features Used:
- Field(): Define constraints and metadata
- field_validator: Validate and transform field values
- EmailStr: Built-in email validation (email-validator package)
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class PersonCreate(BaseModel):
    """
    Schema for creating a new person.

    Names and job title are required and may not be blank.
    The avatar is optional; a blank avatar is stored as NULL.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Given name",
        examples=["Matt"],
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Family name",
        examples=["Groff"],
    )
    email: EmailStr = Field(
        ...,
        description="Contact email address",
        examples=["matt@umbrage.com"],
    )
    job_title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Job title",
        examples=["Director of Engineering"],
    )
    avatar: str | None = Field(
        default=None,
        max_length=2048,
        description="Avatar image URL",
    )

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("first_name", "last_name", "job_title")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Reject values that are only whitespace."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()

    @field_validator("avatar")
    @classmethod
    def blank_avatar_is_none(cls, v: str | None) -> str | None:
        """Store a blank avatar as NULL."""
        if v is not None and not v.strip():
            return None
        return v
