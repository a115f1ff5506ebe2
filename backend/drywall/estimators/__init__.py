"""The five drywall estimators.

Each module exposes a pure ``estimate(spec)`` function. Records built
directly raise ``pydantic.ValidationError`` on bad values; go through
``DrywallEngine.build`` (or the engine methods) to get
``InvalidInputError`` instead.
"""

from drywall.estimators import cost, mud, screws, sheets, tape

__all__ = ["cost", "mud", "screws", "sheets", "tape"]
