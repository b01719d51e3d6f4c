"""Click parameter types shared by the awesomelib commands."""

from datetime import datetime

import click

from awesomelib.dates import parse_date
from awesomelib.errors import InvalidDateError


class DateParamType(click.ParamType):
    """Accept an ISO-8601 date or datetime and convert it to `datetime`."""

    name = "date"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return parse_date(str(value))
        except InvalidDateError:
            self.fail(
                f"{value!r} is not an ISO-8601 date (e.g. 2024-02-29)", param, ctx
            )


DATE = DateParamType()
