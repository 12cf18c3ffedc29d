"""Core notifier pipeline, shared by the CLI and scheduled runs.

Orchestrates: fetch -> classify -> merge -> format -> notify.
Returns structured results without printing or exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from flybrief.analysis.flyability import flyable_hours
from flybrief.analysis.periods import merge_periods
from flybrief.config import AppConfig
from flybrief.digest.text import format_message
from flybrief.fetch.open_weather_map import OpenWeatherMapClient
from flybrief.models import DayForecast, FlyingSite, SiteReport
from flybrief.notify.telegram import TelegramClient, send_notifications

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Reports for the sites that are flyable tomorrow, plus fetch failures."""

    reports: list[SiteReport] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class RunResult:
    """Structured result from one notifier run."""

    check: CheckResult
    message: str = ""
    sent: bool = False


def prepare_site_report(
    forecasts: list[DayForecast],
    site: FlyingSite,
    now: datetime | None = None,
) -> SiteReport | None:
    """Build tomorrow's report for a site, or None if there is nothing to report.

    "Tomorrow" is taken in the fixed offset of the forecast itself. No
    forecast for that date and no flyable hour both give None.
    """
    if not forecasts:
        return None

    now = now or datetime.now(timezone.utc)
    tz = forecasts[0].sunrise.tzinfo
    local_now = now.astimezone(tz) if tz is not None else now
    tomorrow = (local_now + timedelta(days=1)).date()

    forecast = next((f for f in forecasts if f.date == tomorrow), None)
    if forecast is None:
        logger.debug("%s: no forecast for %s", site.name, tomorrow.isoformat())
        return None

    hours = flyable_hours(site, forecast)
    if not hours:
        return None

    return SiteReport(site=site, periods=merge_periods(hours))


def check_sites(
    client: OpenWeatherMapClient,
    sites: list[FlyingSite],
    now: datetime | None = None,
) -> CheckResult:
    """Fetch and evaluate every site in declaration order.

    A site whose fetch fails is logged and recorded in ``errors``; the
    remaining sites are still checked.
    """
    result = CheckResult()
    for site in sites:
        try:
            forecasts = client.get_forecast(site.latitude, site.longitude)
        except Exception as exc:
            logger.warning("Failed to fetch forecast for %s", site.name, exc_info=True)
            result.errors.append(f"{site.name}: {exc}")
            continue

        report = prepare_site_report(forecasts, site, now=now)
        if report is None:
            logger.info("%s: not flyable tomorrow", site.name)
            continue
        logger.info("%s: %d flyable period(s)", site.name, len(report.periods))
        result.reports.append(report)
    return result


def execute_run(
    config: AppConfig,
    dry_run: bool = False,
    now: datetime | None = None,
    forecast_client: OpenWeatherMapClient | None = None,
    telegram_client: TelegramClient | None = None,
) -> RunResult:
    """Run the notifier once.

    The message is only sent when at least one site has a report and
    ``dry_run`` is off. Delivery errors propagate.
    """
    forecast_client = forecast_client or OpenWeatherMapClient(
        config.weather_api_url, config.weather_api_token
    )
    check = check_sites(forecast_client, config.sites, now=now)
    run = RunResult(check=check)

    if not check.reports:
        logger.info("No flyable sites tomorrow, nothing to send")
        return run

    run.message = format_message(check.reports)
    if dry_run:
        logger.info("Dry run, message not sent")
        return run

    telegram_client = telegram_client or TelegramClient(config.telegram.bot_token)
    send_notifications(telegram_client, config.telegram.chat_ids, run.message)
    run.sent = True
    return run
