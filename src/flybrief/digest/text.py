"""Plain text rendering of site reports for the notification message."""

from __future__ import annotations

from flybrief.models import FlyablePeriod, SiteReport


def format_site_report(report: SiteReport) -> str:
    """Render one site's flyable periods as a text block."""
    lines = [f"{report.site.name} is flyable tomorrow:"]
    lines.extend(_format_period(p) for p in report.periods)
    return "\n".join(lines)


def _format_period(period: FlyablePeriod) -> str:
    return (
        f"- Starting at {period.start.strftime('%H:%M')} "
        f"for {period.duration_hours} hours. "
        f"Wind from {period.wind_min.miles_per_hour:.1f} "
        f"to {period.wind_max.miles_per_hour:.1f} MPH. "
        f"Direction from {period.wind_degree_min:.1f} "
        f"to {period.wind_degree_max:.1f} degrees. "
        f"Temperature from {period.temp_min.fahrenheit:.1f}F "
        f"to {period.temp_max.fahrenheit:.1f}F"
    )


def format_message(reports: list[SiteReport]) -> str:
    """Join the site blocks into one message, separated by a blank line."""
    return "\n\n".join(format_site_report(r) for r in reports)
