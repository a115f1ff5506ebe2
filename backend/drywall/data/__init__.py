"""Constant tables shared by the drywall estimators."""

from drywall.data.cost_rates import COST_RATES, CostRateTable
from drywall.data.sheet_sizes import SHEET_CATALOG, SheetCatalogEntry, get_sheet

__all__ = [
    "COST_RATES",
    "CostRateTable",
    "SHEET_CATALOG",
    "SheetCatalogEntry",
    "get_sheet",
]
