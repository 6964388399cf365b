"""
Comment Pydantic Schemas
"""

from pydantic import BaseModel, Field, field_validator


class CommentCreate(BaseModel):
    """
    Schema for creating a comment on behalf of a person.

    `person_id` is not constrained here: an id that matches no person,
    the empty string included, is reported as NotFound by the lookup.
    """

    person_id: str = Field(
        ...,
        description="ID of the person writing the comment",
    )
    comment: str = Field(
        ...,
        min_length=1,
        description="Comment body",
        examples=["This is a comment from Matt Groff"],
    )

    @field_validator("comment")
    @classmethod
    def comment_must_not_be_empty(cls, v: str) -> str:
        """Validate that the body is not just whitespace."""
        if not v.strip():
            raise ValueError("Comment cannot be empty or whitespace")
        return v
