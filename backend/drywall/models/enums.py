"""Enums for the drywall domain models.

Closed choices for sheet sizes, mud types, stud spacing and pricing. Every member
has an entry in the matching constant table under ``drywall.data``.
"""

from enum import StrEnum


class SheetSize(StrEnum):
    """Standard drywall sheet dimensions, width x height in feet."""

    FOUR_BY_EIGHT = "4x8"
    FOUR_BY_TEN = "4x10"
    FOUR_BY_TWELVE = "4x12"


class ProjectType(StrEnum):
    """Who hangs and finishes the drywall."""

    DIY = "diy"
    PROFESSIONAL = "professional"


class FinishLevel(StrEnum):
    """Labor cost tiers grouped from the 0-5 drywall finish levels.

    basic = Level 0-2, standard = Level 3, smooth = Level 4,
    premium = Level 5.
    """

    BASIC = "basic"
    STANDARD = "standard"
    SMOOTH = "smooth"
    PREMIUM = "premium"


class MudType(StrEnum):
    """Joint compound types."""

    ALL_PURPOSE = "all_purpose"
    TOPPING = "topping"
    SETTING = "setting"


class StudSpacing(StrEnum):
    """On-center stud spacing in inches."""

    OC_16 = "16"
    OC_24 = "24"


class Confidence(StrEnum):
    """Confidence level for an assumed input value."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
