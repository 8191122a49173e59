from __future__ import annotations


def render_label(minutes: int) -> str:
    """Render a signed minute count, e.g. -75 -> "-1h 15min", 120 -> "2h", 0 -> "0min"."""
    hours, rest = divmod(abs(minutes), 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if rest or not hours:
        parts.append(f"{rest}min")

    sign = "-" if minutes < 0 else ""
    return sign + " ".join(parts)


def render_hours(minutes: int) -> str:
    """Signed HH:MM, used in reports."""
    hours, rest = divmod(abs(minutes), 60)
    sign = "-" if minutes < 0 else ""
    return f"{sign}{hours:02d}:{rest:02d}"
