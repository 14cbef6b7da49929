"""Calendar helpers used by the proration rules."""

import calendar
from datetime import date


def dias_no_mes(data: date) -> int:
    """Number of days in the month of the given date."""
    return calendar.monthrange(data.year, data.month)[1]


def ultimo_dia_do_mes(data: date) -> bool:
    """Check whether the date falls on the last day of its month."""
    return data.day == dias_no_mes(data)


def meses_entre(posterior: date, anterior: date) -> int:
    """
    Count full calendar months between two dates.

    A month only counts once the day of month is reached again, so
    2024-12-31 vs 2024-03-15 gives 9. When the later date is the last day
    of its month, it is treated as having reached any earlier day
    (2024-02-29 vs 2024-01-31 gives 1). The result is negative when
    ``posterior`` comes before ``anterior``.

    Args:
        posterior: The later date
        anterior: The earlier date

    Returns:
        Number of whole months (truncated towards zero)
    """
    if posterior < anterior:
        return -meses_entre(anterior, posterior)

    meses = (posterior.year - anterior.year) * 12 + (posterior.month - anterior.month)
    if posterior.day < anterior.day and not ultimo_dia_do_mes(posterior):
        meses -= 1
    return meses
