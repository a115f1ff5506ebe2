"""Catalog of standard drywall sheet sizes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from drywall.models.enums import SheetSize


class SheetCatalogEntry(BaseModel):
    """Dimensions of a single sheet size, in feet."""

    model_config = ConfigDict(frozen=True)

    width_ft: float = Field(gt=0)
    height_ft: float = Field(gt=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def area_sqft(self) -> float:
        return self.width_ft * self.height_ft


SHEET_CATALOG: dict[SheetSize, SheetCatalogEntry] = {
    SheetSize.FOUR_BY_EIGHT: SheetCatalogEntry(width_ft=4, height_ft=8),
    SheetSize.FOUR_BY_TEN: SheetCatalogEntry(width_ft=4, height_ft=10),
    SheetSize.FOUR_BY_TWELVE: SheetCatalogEntry(width_ft=4, height_ft=12),
}

# Cost estimates always price the 4x8 sheet regardless of the size hung.
COST_BASIS_SHEET = SheetSize.FOUR_BY_EIGHT


def get_sheet(size: SheetSize) -> SheetCatalogEntry:
    """Look up a sheet size, raising KeyError for sizes not in the catalog."""
    return SHEET_CATALOG[size]
