"""Diagnostics package.

Light-weight checks and tables over the event generator. `easter_scatter`
needs the optional `diagnostics` extras (numpy, matplotlib).
"""

__all__ = ["year_table", "easter_table", "easter_scatter", "invariants"]
