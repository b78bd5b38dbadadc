from enum import Enum

class SortOrder(Enum):
    """
    Enumeration of the directions a DigitList can be sorted in.

    Values:
        ASCENDING: Smallest digit at the head (most-significant position).
        DESCENDING: Largest digit at the head (most-significant position).
    """
    ASCENDING = 1
    DESCENDING = 2
