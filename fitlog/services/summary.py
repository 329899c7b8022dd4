"""Human-readable one-line summary of a workout record."""

from fitlog.schemas.workout import GymDetails, OutdoorDetails, WorkoutRecord


def format_summary(record: WorkoutRecord) -> str:
    base = (
        f"{record.date.isoformat()} | [{record.id}] {record.activity_name} - {record.category}"
        f" - {record.duration} minutes - {record.calories} kcal"
    )
    match record.details:
        case OutdoorDetails(weather_condition=weather):
            return f"{base} | Weather: {weather}"
        case GymDetails(equipment_used=equipment):
            return f"{base} | Equipment: {equipment}"
    return base
