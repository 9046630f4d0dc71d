from typing import Dict, Optional


def format_minutes(total_minutes: int) -> str:
    """Render a duration as "45 min", "2 hr" or "1 hr 30 min"."""
    if total_minutes < 60:
        return f"{total_minutes} min"
    hours, minutes = divmod(total_minutes, 60)
    if minutes == 0:
        return f"{hours} hr"
    return f"{hours} hr {minutes} min"


def format_recipe_times(
    prep_minutes: Optional[int], cook_minutes: Optional[int]
) -> Dict[str, Optional[str]]:
    present = [m for m in (prep_minutes, cook_minutes) if m is not None]
    return {
        "prep": format_minutes(prep_minutes) if prep_minutes is not None else None,
        "cook": format_minutes(cook_minutes) if cook_minutes is not None else None,
        "total": format_minutes(sum(present)) if present else None,
    }
