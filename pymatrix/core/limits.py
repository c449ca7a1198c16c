"""
Input limits and display settings.

These bounds belong to the code that produces matrices (readers,
generators) and the code that prints them. The algebra engine never
enforces them; it only has to tolerate values inside them.
"""

# Largest row or column count accepted from an input source
MAX_DIMENSION: int = 12

# Entries must satisfy abs(x) < ELEMENT_BOUND
ELEMENT_BOUND: float = 10000.0

# Decimal places used when rendering a matrix or a solution
DISPLAY_DECIMALS: int = 3

# Width of one printed cell (left-aligned)
DISPLAY_CELL_WIDTH: int = 13

__all__ = [
    'MAX_DIMENSION',
    'ELEMENT_BOUND',
    'DISPLAY_DECIMALS',
    'DISPLAY_CELL_WIDTH',
]
