"""
Catalog import entries.

Each entry in an import file is validated into one of these models before
it touches the database. Unknown keys are ignored.
"""

from pydantic import BaseModel, Field, field_validator


class CatalogCategory(BaseModel):
    """A category entry from a catalog import file."""

    id: int
    name: str = Field(..., min_length=1)
    parent_id: int | None = None


class CatalogTrick(BaseModel):
    """
    A trick entry from a catalog import file.

    Attributes:
        slug: URL-friendly unique identifier (the upsert key)
        name: Display name
        weight: Relative likelihood of being picked for a combo
        difficulty: Numeric rating, if rated
        category_id: Category the trick belongs to
        takeoff_stance_id: Stance the trick starts from
        landing_stance_id: Stance the trick lands in
    """

    slug: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    weight: int = 1
    difficulty: int | None = None
    description: str | None = None
    execution_notes: str | None = None
    creator_name: str | None = None
    category_id: int | None = None
    takeoff_stance_id: int | None = None
    landing_stance_id: int | None = None
    rotation: int | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def _null_weight_is_default(cls, value: object) -> object:
        return 1 if value is None else value
