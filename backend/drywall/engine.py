"""Engine facade over the five drywall estimators.

The estimators themselves are pure functions of a single record. The
engine adds the parts a host needs around them:

1. **Record building**: validate raw form values into input records,
   reporting bad values as ``InvalidInputError``.
2. **Area resolution**: downstream estimators take an explicit area, or
   the total area carried over from a sheet estimate, or a default.
3. **Whole-room estimates**: run all five estimators for one room and
   document the assumptions made along the way.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from drywall.data.sheet_sizes import COST_BASIS_SHEET
from drywall.estimators import cost, mud, screws, sheets, tape
from drywall.exceptions import InvalidInputError, ZeroAreaError
from drywall.models.enums import Confidence
from drywall.models.estimate import (
    Assumption,
    CostEstimate,
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

if TYPE_CHECKING:
    from collections.abc import Mapping

_Record = TypeVar("_Record", bound=BaseModel)

# Area used when the host has neither an explicit nor a carried-over area
DEFAULT_AREA_SQFT = 400.0

ENGINE_VERSION = "0.1.0"


class DrywallEngine:
    """Runs the drywall estimators on behalf of a host.

    Args:
        default_area_sqft: Area used by the cost, mud, screw and tape
            estimates when no area is given and none is carried over.

    Example::

        engine = DrywallEngine()
        room = engine.sheets(length_ft=12, width_ft=10, door_count=2)
        price = engine.cost(carried=room, project_type="professional")
    """

    def __init__(self, default_area_sqft: float = DEFAULT_AREA_SQFT) -> None:
        if not math.isfinite(default_area_sqft) or default_area_sqft <= 0:
            msg = f"default_area_sqft must be a positive finite number, got {default_area_sqft}"
            raise InvalidInputError(msg)
        self._default_area_sqft = default_area_sqft

    @property
    def default_area_sqft(self) -> float:
        return self._default_area_sqft

    @staticmethod
    def build(model: type[_Record], data: Mapping[str, Any]) -> _Record:
        """Validate raw values into an input record.

        Raises:
            InvalidInputError: If any value is out of range or not one of
                the allowed choices.
        """
        try:
            return model.model_validate(dict(data))
        except ValidationError as exc:
            msg = f"Invalid {model.__name__}: {exc}"
            raise InvalidInputError(msg) from exc

    def resolve_area(
        self,
        area_sqft: float | None = None,
        carried: SheetEstimate | None = None,
    ) -> float:
        """Pick the area for a downstream estimate.

        An explicit area wins, then the total (pre-waste) area of a carried
        sheet estimate, then the engine default.
        """
        if area_sqft is not None:
            return area_sqft
        if carried is not None:
            return carried.total_area_sqft
        return self._default_area_sqft

    # ------------------------------------------------------------------
    # Single estimators
    # ------------------------------------------------------------------

    def sheets(self, **values: Any) -> SheetEstimate:
        return sheets.estimate(self.build(RoomSpec, values))

    def cost(
        self,
        area_sqft: float | None = None,
        *,
        carried: SheetEstimate | None = None,
        **options: Any,
    ) -> CostEstimate:
        area = self.resolve_area(area_sqft, carried)
        return cost.estimate(self.build(CostSpec, {**options, "area_sqft": area}))

    def mud(
        self,
        area_sqft: float | None = None,
        *,
        carried: SheetEstimate | None = None,
        **options: Any,
    ) -> MudEstimate:
        area = self.resolve_area(area_sqft, carried)
        return mud.estimate(self.build(MudSpec, {**options, "area_sqft": area}))

    def screws(
        self,
        area_sqft: float | None = None,
        *,
        carried: SheetEstimate | None = None,
        **options: Any,
    ) -> ScrewEstimate:
        area = self.resolve_area(area_sqft, carried)
        return screws.estimate(self.build(ScrewSpec, {**options, "area_sqft": area}))

    def tape(
        self,
        area_sqft: float | None = None,
        *,
        carried: SheetEstimate | None = None,
        **options: Any,
    ) -> TapeEstimate:
        area = self.resolve_area(area_sqft, carried)
        return tape.estimate(self.build(TapeSpec, {**options, "area_sqft": area}))

    # ------------------------------------------------------------------
    # Whole room
    # ------------------------------------------------------------------

    def estimate_project(
        self,
        room: RoomSpec,
        options: ProjectOptions | None = None,
    ) -> ProjectEstimate:
        """Run all five estimators for a room.

        The room's total area (before waste) feeds the cost, mud, screw
        and tape estimates unless ``options.area_sqft`` overrides it.

        Raises:
            ZeroAreaError: If the resolved area is zero, before any cost
                figures are produced.
        """
        options = options or ProjectOptions()
        assumptions: list[Assumption] = []

        sheet_estimate = sheets.estimate(room)

        if options.area_sqft is not None:
            area = options.area_sqft
            assumptions.append(
                Assumption(
                    parameter="area_sqft",
                    assumed_value=f"{area:g}",
                    reasoning=(
                        "Area supplied explicitly; room area of "
                        f"{sheet_estimate.total_area_sqft:g} sq ft not used"
                    ),
                    confidence=Confidence.MEDIUM,
                )
            )
        else:
            area = sheet_estimate.total_area_sqft
            assumptions.append(
                Assumption(
                    parameter="area_sqft",
                    assumed_value=f"{area:g}",
                    reasoning="Carried over from net wall plus ceiling area, before waste",
                    confidence=Confidence.HIGH,
                )
            )

        if area == 0:
            msg = (
                "Room has no drywall area; include walls or ceiling "
                "with non-zero dimensions"
            )
            raise ZeroAreaError(msg)

        if room.sheet_size != COST_BASIS_SHEET:
            assumptions.append(
                Assumption(
                    parameter="sheet_size",
                    assumed_value=COST_BASIS_SHEET.value,
                    reasoning=(
                        f"Costs are priced per {COST_BASIS_SHEET} sheet, "
                        f"not the {room.sheet_size} sheets counted"
                    ),
                    confidence=Confidence.MEDIUM,
                )
            )

        cost_estimate = cost.estimate(
            CostSpec(
                area_sqft=area,
                project_type=options.project_type,
                finish_level=options.finish_level,
            )
        )
        mud_estimate = mud.estimate(
            MudSpec(area_sqft=area, mud_type=options.mud_type, coat_count=options.coat_count)
        )
        screw_estimate = screws.estimate(
            ScrewSpec(area_sqft=area, stud_spacing=room.stud_spacing)
        )
        tape_estimate = tape.estimate(
            TapeSpec(
                area_sqft=area,
                include_corners=options.include_corners,
                length_ft=room.length_ft,
                width_ft=room.width_ft,
                ceiling_height_ft=room.ceiling_height_ft,
            )
        )

        return ProjectEstimate(
            sheets=sheet_estimate,
            cost=cost_estimate,
            mud=mud_estimate,
            screws=screw_estimate,
            tape=tape_estimate,
            area_sqft=area,
            assumptions=assumptions,
        )
