"""Listening insights derived from aggregate views"""
from typing import Optional

from unwrapped_stats.models.views import AggregateView

PERSONA_BY_HOURS = {
    range(6, 12): "Morning Virtuoso",
    range(12, 18): "Afternoon Cruiser",
    range(18, 24): "Evening Connoisseur",
    range(0, 6): "Night Owl",
}

def listening_persona(hourly: AggregateView) -> Optional[str]:
    """Persona for the busiest hour of day, earliest hour on ties"""
    if not hourly.data or not any(hourly.data):
        return None
    peak_hour = max(range(len(hourly.data)), key=lambda hour: (hourly.data[hour], -hour))
    for hours, persona in PERSONA_BY_HOURS.items():
        if peak_hour in hours:
            return persona
    return "Versatile Listener"
