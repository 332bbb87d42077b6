# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, TypeAlias, cast

import pendulum

EpochMillis: TypeAlias = int


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_ms() -> EpochMillis:
    return datetime_to_ms(now_utc())


def datetime_to_ms(datetime: datetime.datetime) -> EpochMillis:
    # int_timestamp keeps whole seconds exact, microseconds are truncated to ms
    instance = pendulum.instance(datetime, tz="local")
    return instance.int_timestamp * 1000 + instance.microsecond // 1000


def datetime_to_ms_optional(
    datetime: Optional[datetime.datetime],
) -> Optional[EpochMillis]:
    if datetime is None:
        return None
    return datetime_to_ms(datetime)


def datetime_from_ms(millis: EpochMillis) -> pendulum.DateTime:
    seconds, remainder = divmod(millis, 1000)
    return pendulum.from_timestamp(seconds, tz="UTC").add(microseconds=remainder * 1000)


def local_date(reference: datetime.date) -> datetime.date:
    """Calendar day of ``reference`` in the local time zone.

    Naive datetimes are taken to be local already; plain dates are returned
    unchanged.
    """
    if isinstance(reference, datetime.datetime):
        return pendulum.instance(reference, tz="local").in_tz("local").date()
    return reference


def local_day_bounds_ms(reference: datetime.date) -> tuple[EpochMillis, EpochMillis]:
    """Inclusive [00:00:00.000, 23:59:59.999] of the local day of ``reference``."""
    day = local_date(reference)
    start = pendulum.datetime(day.year, day.month, day.day, tz="local")
    end = start.end_of("day")
    return datetime_to_ms(start), datetime_to_ms(end)


def week_dates(reference: datetime.date) -> list[datetime.date]:
    """The Monday-to-Sunday week containing ``reference``."""
    day = local_date(reference)
    monday = day - datetime.timedelta(days=day.weekday())
    return [monday + datetime.timedelta(days=offset) for offset in range(7)]


def today_local() -> datetime.date:
    return pendulum.today("local").date()


def ms_to_display_local_datetime_str(millis: EpochMillis) -> str:
    return datetime_from_ms(millis).in_tz("local").format("MMM D, YYYY h:mm A")


def ms_to_display_local_datetime_str_optional(
    millis: Optional[EpochMillis],
) -> Optional[str]:
    if millis is None:
        return None
    return ms_to_display_local_datetime_str(millis)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def date_to_display_str(date: datetime.date) -> str:
    return pendulum.date(date.year, date.month, date.day).format("YYYY-MM-DD ddd")
