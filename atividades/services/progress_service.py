from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from atividades.models.user import UserRole
from atividades.services.activity_service import (
    list_activities_by_month,
    list_activities_by_service_year,
)
from atividades.services.calendar_service import service_year_start


def total_hours(activities: Iterable) -> float:
    total = sum((Decimal(str(activity.hours)) for activity in activities), Decimal('0'))
    return round(float(total), 1)


def format_hours(hours: float) -> str:
    hours = round(float(hours), 1)
    if hours == int(hours):
        return str(int(hours))
    return f'{hours:.1f}'


def remaining_hours(goal: float, done: float) -> float:
    return round(max(goal - done, 0), 1)


def monthly_goal_message(role: UserRole, month_hours: float) -> str:
    if role is UserRole.PUBLICADOR:
        return 'Publicador - Sem meta específica de horas.'

    remaining = remaining_hours(role.monthly_goal, month_hours)
    if remaining == 0:
        return f'{role.label} - Meta mensal atingida!'
    return f'{role.label} - Faltam {format_hours(remaining)} horas para a meta mensal.'


def annual_goal_message(role: UserRole, year_hours: float) -> str:
    remaining = remaining_hours(role.annual_goal, year_hours)
    if remaining == 0:
        return 'Meta anual atingida!'
    return f'Faltam {format_hours(remaining)} horas para a meta anual.'


def build_progress(user, year: int, month: int) -> Dict[str, Any]:
    """Resumo de progresso do mes (zero-based) frente as metas do papel.

    A meta anual so e acompanhada para pioneiros regulares, somando o ano
    de servico (setembro a agosto) que contem o mes consultado.
    """
    role = user.user_role
    month_hours = total_hours(list_activities_by_month(user.id, year, month))

    messages: List[str] = [monthly_goal_message(role, month_hours)]
    year_hours: Optional[float] = None
    remaining_year: Optional[float] = None
    service_year: Optional[Dict[str, int]] = None

    if role is UserRole.PIONEIRO_REGULAR:
        start_year, start_month = service_year_start(year, month)
        year_hours = total_hours(
            list_activities_by_service_year(user.id, start_year, start_month)
        )
        remaining_year = remaining_hours(role.annual_goal, year_hours)
        service_year = {'year': start_year, 'month': start_month}
        messages.append(annual_goal_message(role, year_hours))

    monthly_goal = role.monthly_goal
    return {
        'role': role.value,
        'year': year,
        'month': month,
        'monthlyGoal': monthly_goal,
        'annualGoal': role.annual_goal,
        'monthHours': month_hours,
        'remainingMonthHours': remaining_hours(monthly_goal, month_hours),
        'monthProgress': _percentage(month_hours, monthly_goal),
        'serviceYearStart': service_year,
        'serviceYearHours': year_hours,
        'remainingYearHours': remaining_year,
        'yearProgress': _percentage(year_hours, role.annual_goal) if year_hours is not None else None,
        'messages': messages,
    }


def _percentage(done: float, goal: float) -> float:
    if not goal:
        return 0.0
    return round(min(done / goal * 100, 100.0), 1)
