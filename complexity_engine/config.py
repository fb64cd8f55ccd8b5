"""
Lookahead windows and scoring constants for the complexity engine.

Window sizes bound how far a recognizer looks from the line it is
evaluating. Shapes spanning more lines than these are not recognized.
"""

# Loop-region scan used by the structural detector
NESTED_SCAN_WINDOW = 20

# Optimizer windows (lines, starting at the evaluated line)
NESTED_LOOP_WINDOW = 20
LOOP_CONTEXT_WINDOW = 10
FIBONACCI_WINDOW = 10
TAIL_RECURSION_WINDOW = 15
BUBBLE_SORT_WINDOW = 8
SELECTION_SORT_WINDOW = 10
STRING_CONCAT_WINDOW = 5
SPACE_WINDOW = 5

# Optimizer windows centred on the evaluated line (before, after)
LOOKUP_WINDOW = (3, 3)
SORTED_HINT_WINDOW = (5, 5)

# Minimum linear lookups in LOOKUP_WINDOW to suggest a hash map
LOOKUP_THRESHOLD = 2

# Aggregate score
BASE_SCORE = 100
POLYNOMIAL_PENALTY = 20      # per exponent of O(n^k)
EXPONENTIAL_PENALTY = 40     # O(2^n)
LINEARITHMIC_PENALTY = 15    # O(n log n)
LINEAR_PENALTY = 10          # O(n), only while nothing worse was seen

PRIORITY_RANK = {
    "high": 3,
    "medium": 2,
    "low": 1,
}
