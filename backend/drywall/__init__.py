"""Drywall material and cost estimators.

Usage::

    from drywall import RoomSpec, create_default_engine

    engine = create_default_engine()
    estimate = engine.estimate_project(RoomSpec(length_ft=12, width_ft=10))
"""

from drywall.engine import DrywallEngine
from drywall.exceptions import DrywallError, InvalidInputError, ZeroAreaError
from drywall.factory import create_default_engine
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
    "DrywallEngine",
    "DrywallError",
    "FinishLevel",
    "InvalidInputError",
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
    "ZeroAreaError",
    "create_default_engine",
]
