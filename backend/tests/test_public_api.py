"""Tests for the public API surface of the drywall package.

Verifies that consumers can import everything they need from the top-level
``drywall`` package, use ``create_default_engine`` for quick setup, and
round-trip estimates through JSON serialization.
"""

from __future__ import annotations

import json

from drywall import (
    CostEstimate,
    CostRange,
    CostSpec,
    DrywallEngine,
    DrywallError,
    FinishLevel,
    InvalidInputError,
    MudSpec,
    MudType,
    ProjectEstimate,
    ProjectOptions,
    ProjectType,
    RoomSpec,
    ScrewSpec,
    SheetSize,
    StudSpacing,
    TapeSpec,
    ZeroAreaError,
    create_default_engine,
)


def _sample_room() -> RoomSpec:
    return RoomSpec(
        length_ft=14,
        width_ft=12,
        ceiling_height_ft=9,
        door_count=1,
        window_count=2,
        sheet_size=SheetSize.FOUR_BY_TWELVE,
        waste_percent=15,
    )


class TestPublicImports:
    def test_import_engine(self) -> None:
        assert DrywallEngine is not None
        assert callable(create_default_engine)

    def test_import_records(self) -> None:
        for record in (RoomSpec, CostSpec, MudSpec, ScrewSpec, TapeSpec, ProjectOptions):
            assert record is not None

    def test_import_enums(self) -> None:
        assert SheetSize is not None
        assert ProjectType is not None
        assert FinishLevel is not None
        assert MudType is not None
        assert StudSpacing is not None

    def test_error_hierarchy(self) -> None:
        assert issubclass(InvalidInputError, DrywallError)
        assert issubclass(ZeroAreaError, DrywallError)


class TestCreateDefaultEngine:
    def test_returns_engine(self) -> None:
        assert isinstance(create_default_engine(), DrywallEngine)

    def test_engine_can_produce_estimate(self) -> None:
        estimate = create_default_engine().estimate_project(_sample_room())
        assert isinstance(estimate, ProjectEstimate)
        assert estimate.sheets.sheets_needed > 0
        assert estimate.cost.total.low > 0


class TestJsonRoundTrip:
    def test_project_round_trip(self) -> None:
        original = create_default_engine().estimate_project(
            _sample_room(), ProjectOptions(project_type=ProjectType.PROFESSIONAL)
        )
        restored = ProjectEstimate.model_validate_json(original.model_dump_json())
        assert restored == original

    def test_cost_estimate_json_is_consumable(self) -> None:
        estimate = create_default_engine().cost(400)
        data = json.loads(estimate.model_dump_json())
        for key in ("materials", "labor", "total", "per_sqft"):
            assert set(data[key]) == {"low", "high"}
        restored = CostEstimate.model_validate(data)
        assert restored.total == CostRange(low=estimate.total.low, high=estimate.total.high)
