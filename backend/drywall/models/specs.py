"""Input records for the drywall estimators.

Each record is built from the host's current form values right before a
calculation and passed by value into a pure estimator function.
Non-finite numbers are rejected along with out-of-range ones.

Constructing a record directly raises ``pydantic.ValidationError``.
``DrywallEngine.build`` wraps that in ``InvalidInputError``, a
``DrywallError``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from drywall.models.enums import FinishLevel, MudType, ProjectType, SheetSize, StudSpacing

logger = logging.getLogger(__name__)


def _coerce_stud_spacing(value: Any) -> Any:
    # Forms send 16 / 24 as numbers as often as strings.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _finish_level_or_standard(value: Any) -> Any:
    if isinstance(value, FinishLevel):
        return value
    try:
        return FinishLevel(value)
    except ValueError:
        logger.warning("Unrecognized finish level %r; using 'standard'", value)
        return FinishLevel.STANDARD


def _mud_type_or_all_purpose(value: Any) -> Any:
    if isinstance(value, MudType):
        return value
    try:
        return MudType(value)
    except ValueError:
        logger.warning("Unrecognized mud type %r; using 'all_purpose'", value)
        return MudType.ALL_PURPOSE


class RoomSpec(BaseModel):
    """A rectangular room to be covered in drywall.

    Dimensions are in feet. Openings are subtracted from the wall area
    only, using average door and window sizes plus any extra square
    footage in ``other_opening_sqft``.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    length_ft: float = Field(ge=0)
    width_ft: float = Field(ge=0)
    ceiling_height_ft: float = Field(ge=0, default=8.0)
    include_walls: bool = True
    include_ceiling: bool = True
    door_count: int = Field(ge=0, default=0)
    window_count: int = Field(ge=0, default=0)
    other_opening_sqft: float = Field(ge=0, default=0.0)
    sheet_size: SheetSize = SheetSize.FOUR_BY_EIGHT
    waste_percent: int = Field(ge=0, default=10)
    stud_spacing: StudSpacing = StudSpacing.OC_16

    @field_validator("stud_spacing", mode="before")
    @classmethod
    def stud_spacing_from_number(cls, v: Any) -> Any:
        return _coerce_stud_spacing(v)


class CostSpec(BaseModel):
    """Input for a materials + labor cost range."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    area_sqft: float = Field(ge=0)
    project_type: ProjectType = ProjectType.DIY
    finish_level: FinishLevel = FinishLevel.STANDARD

    @field_validator("finish_level", mode="before")
    @classmethod
    def unknown_finish_level_is_standard(cls, v: Any) -> Any:
        return _finish_level_or_standard(v)


class MudSpec(BaseModel):
    """Input for a joint compound estimate."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    area_sqft: float = Field(ge=0)
    mud_type: MudType = MudType.ALL_PURPOSE
    coat_count: int = Field(ge=1, default=3)

    @field_validator("mud_type", mode="before")
    @classmethod
    def unknown_mud_type_is_all_purpose(cls, v: Any) -> Any:
        return _mud_type_or_all_purpose(v)


class ScrewSpec(BaseModel):
    """Input for a drywall screw estimate."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    area_sqft: float = Field(ge=0)
    stud_spacing: StudSpacing = StudSpacing.OC_16

    @field_validator("stud_spacing", mode="before")
    @classmethod
    def stud_spacing_from_number(cls, v: Any) -> Any:
        return _coerce_stud_spacing(v)


class TapeSpec(BaseModel):
    """Input for a joint tape estimate.

    Room dimensions are only read when ``include_corners`` is set, and
    must then be given explicitly.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    area_sqft: float = Field(ge=0)
    include_corners: bool = True
    length_ft: float = Field(ge=0, default=0.0)
    width_ft: float = Field(ge=0, default=0.0)
    ceiling_height_ft: float = Field(ge=0, default=0.0)

    @model_validator(mode="after")
    def corners_need_room_dimensions(self) -> TapeSpec:
        if not self.include_corners:
            return self
        required = ("length_ft", "width_ft", "ceiling_height_ft")
        missing = [name for name in required if name not in self.model_fields_set]
        if missing:
            msg = f"Corner tape needs the room dimensions; missing {', '.join(missing)}"
            raise ValueError(msg)
        return self


class ProjectOptions(BaseModel):
    """Options for the downstream estimators in a whole-room estimate.

    ``area_sqft`` overrides the area carried over from the sheet estimate.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    area_sqft: float | None = Field(default=None, ge=0)
    project_type: ProjectType = ProjectType.DIY
    finish_level: FinishLevel = FinishLevel.STANDARD
    mud_type: MudType = MudType.ALL_PURPOSE
    coat_count: int = Field(ge=1, default=3)
    include_corners: bool = True

    @field_validator("finish_level", mode="before")
    @classmethod
    def unknown_finish_level_is_standard(cls, v: Any) -> Any:
        return _finish_level_or_standard(v)

    @field_validator("mud_type", mode="before")
    @classmethod
    def unknown_mud_type_is_all_purpose(cls, v: Any) -> Any:
        return _mud_type_or_all_purpose(v)
