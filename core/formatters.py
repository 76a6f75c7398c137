# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_count(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


# === number formatters ===


def format_gpa(gpa: float) -> str:
    return f"{gpa:.2f}"


def format_grade(grade: float | None) -> str:
    return "--" if grade is None else f"{grade:g}"


# === date formatters ===


def format_date_added(date_added: str) -> str:
    try:
        added = datetime.date.fromisoformat(date_added)

    except ValueError:
        # snapshots written elsewhere may carry a locale date string
        return date_added

    return added.strftime("%b %d, %Y")


def format_export_filename(export_date: datetime.date | None = None) -> str:
    export_date = export_date or datetime.date.today()

    return f"gpa-data-{export_date.isoformat()}.json"
