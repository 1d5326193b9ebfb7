"""Printify REST payloads (v1)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PrintifyImage(BaseModel):
    model_config = ConfigDict(extra="allow")

    src: str
    variant_ids: list[int] = Field(default_factory=list)
    position: str | None = None
    is_default: bool = False


class PrintifyVariant(BaseModel):
    """Printify variant; ``price`` is in minor units (cents)."""

    model_config = ConfigDict(extra="allow")

    id: int
    title: str = ""
    price: int = 0
    currency: str = "USD"
    is_enabled: bool = True
    sku: str | None = None


class PrintifyOption(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    type: str | None = None
    values: list[dict[str, Any]] = Field(default_factory=list)


class PrintifyProduct(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    description: str | None = None
    images: list[PrintifyImage] = Field(default_factory=list)
    variants: list[PrintifyVariant] = Field(default_factory=list)
    options: list[PrintifyOption] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    is_locked: bool = False
    visible: bool = True


class PrintifyProductPage(BaseModel):
    """Paged product listing (Laravel-style pagination envelope)."""

    model_config = ConfigDict(extra="allow")

    current_page: int = 1
    last_page: int = 1
    per_page: int | None = None
    total: int = 0
    next_page_url: str | None = None
    data: list[PrintifyProduct] = Field(default_factory=list)

    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page
