import sys
import datetime
from dataclasses import dataclass

import pandas as pd

from config.settings import Config
from utils.logger import logger
from utils.expiry_calculator import (
    weekday_code,
    days_until_next_friday,
    ExpirationType,
    classify_expiration,
    is_expiration_today,
    calculate_day_difference,
    generate_expiration_dates,
)


@dataclass(frozen=True)
class ExpirationRecord:
    expiry: datetime.date
    label: str
    dte: int
    is_weekly: bool
    is_today: bool


def build_expiration_record(today, expiry):
    return ExpirationRecord(
        expiry=expiry,
        label=f"{expiry.year}-{expiry.month:02d}-{expiry.day:02d}",
        dte=calculate_day_difference(today, expiry),
        is_weekly=classify_expiration(expiry.day) == ExpirationType.WEEKLY,
        is_today=is_expiration_today(today, expiry),
    )


def format_expiration(record):
    """
    YYYY-MM-DD<TAB> DTE = n<TAB>[ [W]][ [TODAY]]
    """
    text = f"{record.label}\t DTE = {record.dte}\t"
    if record.is_weekly:
        text += " [W]"
    if record.is_today:
        text += " [TODAY]"
    return text


class ExpirationReporter:
    def __init__(self, today=None, count=Config.EXPIRATION_COUNT, stream=None):
        self.today = today or datetime.date.today()
        self.count = count
        self.stream = stream or sys.stdout

    def first_expiration(self):
        """
        Returns (date, None) for the next Friday on or after today,
        or (None, InvalidInput) if the weekday lookup fails.
        """
        result = days_until_next_friday(weekday_code(self.today))
        if not result.ok:
            return None, result.error
        return self.today + datetime.timedelta(days=result.offset), None

    def records(self):
        start, error = self.first_expiration()
        if error:
            return None, error
        dates = generate_expiration_dates(start, self.count)
        return [build_expiration_record(self.today, d) for d in dates], None

    def to_frame(self):
        """
        Tabular view of the schedule: one row per expiration, in generation order.
        """
        records, error = self.records()
        if error:
            logger.error(f"Cannot build expiration table: {error.message}")
            return None
        return pd.DataFrame(
            [{'expiry': r.expiry, 'dte': r.dte, 'weekly': r.is_weekly, 'today': r.is_today} for r in records],
            columns=['expiry', 'dte', 'weekly', 'today'],
        )

    def run(self):
        logger.info(f"Expiration report requested for {self.today.isoformat()}")

        records, error = self.records()
        if error:
            logger.error(f"Weekday lookup failed: {error.message}")
            print(f"Exception: {error.message}", file=self.stream)
            return Config.ERROR_EXIT_CODE

        if records:
            logger.info(f"Next expiration: {records[0].label} ({len(records)} dates)")
        for record in records:
            logger.debug(f"Expiration {record.label}: DTE={record.dte} weekly={record.is_weekly} today={record.is_today}")
            print(format_expiration(record), file=self.stream)

        return 0


def build_expiration_table(today=None, count=Config.EXPIRATION_COUNT):
    return ExpirationReporter(today=today, count=count).to_frame()


def run_report(today=None, stream=None):
    return ExpirationReporter(today=today, stream=stream).run()
