"""Pipe schedule classification of fabrication part specifications."""
from enum import Enum


class ScheduleClass(Enum):
    STD = 'STD'
    SCH10 = 'SCH10'
    SCH40 = 'SCH40'

    def __str__(self):
        return self.value


# Checked in order, first hit wins
_KEYWORDS = (
    ('SCH10', ScheduleClass.SCH10),
    ('SCH40', ScheduleClass.SCH40),
    ('STD', ScheduleClass.STD),
)


def classify(text):
    """Find schedule class for a specification description.

    Matching is case insensitive and ignores whitespace, so "Sch 40",
    "SCH40" and "carbon steel sch 40 welded" all give `SCH40`.

    Parameters
    ----------
    text : str or None
        Specification description of the part.

    Returns
    -------
    ScheduleClass
        Matched schedule class; `ScheduleClass.STD` if nothing matches.
    """
    if not text:
        return ScheduleClass.STD
    normalized = ''.join(text.split()).upper()
    for keyword, schedule in _KEYWORDS:
        if keyword in normalized:
            return schedule
    return ScheduleClass.STD
