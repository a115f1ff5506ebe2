"""Domain models for the drywall estimators."""

from drywall.models.enums import (
    Confidence,
    FinishLevel,
    MudType,
    ProjectType,
    SheetSize,
    StudSpacing,
)
from drywall.models.estimate import (
    Assumption,
    CostEstimate,
    CostRange,
    MudEstimate,
    ProjectEstimate,
    ScrewEstimate,
    SheetEstimate,
    TapeEstimate,
)
from drywall.models.specs import (
    CostSpec,
    MudSpec,
    ProjectOptions,
    RoomSpec,
    ScrewSpec,
    TapeSpec,
)

__all__ = [
    "Assumption",
    "Confidence",
    "CostEstimate",
    "CostRange",
    "CostSpec",
    "FinishLevel",
    "MudEstimate",
    "MudSpec",
    "MudType",
    "ProjectEstimate",
    "ProjectOptions",
    "ProjectType",
    "RoomSpec",
    "ScrewEstimate",
    "ScrewSpec",
    "SheetEstimate",
    "SheetSize",
    "StudSpacing",
    "TapeEstimate",
    "TapeSpec",
]
