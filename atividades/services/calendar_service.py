import calendar
from datetime import date, timedelta
from typing import Tuple

SERVICE_YEAR_START_MONTH = 8  # setembro, zero-based


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """Primeiro e ultimo dia do mes (inclusivos). ``month`` e zero-based."""
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, 1), date(year, month + 1, last_day)


def add_months(start: date, months: int) -> date:
    index = start.month - 1 + months
    return date(start.year + index // 12, index % 12 + 1, 1)


def twelve_month_bounds(year: int, month: int) -> Tuple[date, date]:
    start = date(year, month + 1, 1)
    return start, add_months(start, 12) - timedelta(days=1)


def service_year_start(year: int, month: int) -> Tuple[int, int]:
    """Ano e mes (zero-based) de inicio do ano de servico que contem year/month."""
    if month >= SERVICE_YEAR_START_MONTH:
        return year, SERVICE_YEAR_START_MONTH
    return year - 1, SERVICE_YEAR_START_MONTH
