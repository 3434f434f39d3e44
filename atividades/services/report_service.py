from typing import Any, Dict, List, Optional

import pandas as pd

from atividades.models.activity import ActivityType
from atividades.services.activity_service import list_activities, list_activities_by_month

EXPORT_COLUMNS = ['id', 'date', 'type', 'hours', 'notes']


def _activities_frame(activities: List) -> pd.DataFrame:
    records = [
        {
            'id': activity.id,
            'date': activity.date.isoformat(),
            'type': activity.type,
            'hours': float(activity.hours),
            'notes': activity.notes or '',
        }
        for activity in activities
    ]
    return pd.DataFrame.from_records(records, columns=EXPORT_COLUMNS)


def hours_by_type(frame: pd.DataFrame) -> Dict[str, float]:
    totals = (
        frame.groupby('type')['hours'].sum()
        if not frame.empty
        else pd.Series(dtype='float64')
    )
    totals = totals.reindex(ActivityType.values(), fill_value=0.0)
    return {activity_type: round(float(hours), 1) for activity_type, hours in totals.items()}


def build_month_report(owner_id: int, year: int, month: int) -> Dict[str, Any]:
    frame = _activities_frame(list_activities_by_month(owner_id, year, month))
    by_type = hours_by_type(frame)

    return {
        'year': year,
        'month': month,
        'totalHours': round(float(frame['hours'].sum()), 1) if not frame.empty else 0.0,
        'activityCount': int(len(frame)),
        'hoursByType': by_type,
        'chart': [
            {'type': ActivityType(activity_type).label, 'hours': hours}
            for activity_type, hours in by_type.items()
        ],
    }


def export_activities_csv(owner_id: int, year: Optional[int] = None, month: Optional[int] = None) -> str:
    if year is not None and month is not None:
        activities = list_activities_by_month(owner_id, year, month)
    else:
        activities = list_activities(owner_id)

    frame = _activities_frame(activities)
    return frame.to_csv(index=False)
