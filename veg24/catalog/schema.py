"""Pydantic models for catalog entries."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from veg24.types import DEFAULT_LOCALE


class Price(BaseModel):
    """Price of a product per unit.

    Attributes:
        current: Current selling price.
        unit: Unit the price applies to (e.g., 'kg').
    """

    model_config = ConfigDict(extra="forbid")

    current: int | float = Field(ge=0, description="Current price")
    unit: str = Field(min_length=1, description="Unit of sale")


class Product(BaseModel):
    """A catalog product.

    Attributes:
        id: Stable numeric identifier.
        name: Display name keyed by locale code; must include the default locale.
        price: Price and unit.
        stock: Units available.
        tags: Free-form labels (e.g., 'organic').
        image: Image URL.
    """

    model_config = ConfigDict(extra="forbid")

    id: int = Field(ge=1)
    name: dict[str, str]
    price: Price
    stock: int = Field(ge=0)
    tags: list[str] = Field(default_factory=list)
    image: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate the default locale name is present."""
        if DEFAULT_LOCALE.value not in v:
            raise ValueError(f"name must include '{DEFAULT_LOCALE.value}'")
        return v

    def display_name(self, locale: str) -> str:
        """Return the name for a locale, falling back to the default locale."""
        return self.name.get(locale) or self.name[DEFAULT_LOCALE.value]
