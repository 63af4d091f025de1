"""Date validator.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..mutators import date as mutators
from ..mutators.transformers import (
    to_format_transformer,
    to_iso_string_transformer,
    to_timestamp_transformer,
)
from ..rules import date as rules
from ..rules.types import date_rule
from .base import GLOBAL, SIBLING, BaseValidator

DateLike = date | datetime | str | int | float


class DateValidator(BaseValidator):
    """Validates dates.

    Input is parsed first: ``date``/``datetime`` instances, ISO 8601 strings and
    POSIX timestamps become naive ``datetime`` values (aware values are
    converted to UTC). Comparison targets given as strings that do not parse as
    dates are treated as field names.

    Example:
        ```python
        v.object({
            "starts_at": v.date().required().future(),
            "ends_at": v.date().required().after_sibling("starts_at"),
        })
        ```
    """

    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_mutator(mutators.to_date_mutator)
        self.add_rule(date_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, date)

    # ==================== Output ====================

    def to_iso_string(self):
        return self.add_transformer(to_iso_string_transformer)

    def to_timestamp(self):
        return self.add_transformer(to_timestamp_transformer)

    def to_format(self, format: str = "%Y-%m-%d"):
        """Format the output with ``strftime``."""
        return self.add_transformer(to_format_transformer, {"format": format})

    # ==================== Mutators ====================

    def to_start_of_day(self):
        return self.add_mutator(mutators.start_of_day_mutator)

    def to_end_of_day(self):
        return self.add_mutator(mutators.end_of_day_mutator)

    def add_days(self, days: int):
        return self.add_mutator(mutators.add_days_mutator, {"days": days})

    def add_hours(self, hours: int):
        return self.add_mutator(mutators.add_hours_mutator, {"hours": hours})

    # ==================== Comparisons ====================

    def _compare(self, rule, error_message, scope, target):
        instance = self.add_rule(rule, error_message)
        instance.options.update(dateOrField=target, scope=scope)
        return self

    def min(self, date_or_field: DateLike, error_message: str | None = None):
        """Date must be on or after a date or another field's date."""
        return self._compare(rules.min_date_rule, error_message, GLOBAL, date_or_field)

    def min_sibling(self, field: str, error_message: str | None = None):
        return self._compare(rules.min_date_rule, error_message, SIBLING, field)

    def max(self, date_or_field: DateLike, error_message: str | None = None):
        return self._compare(rules.max_date_rule, error_message, GLOBAL, date_or_field)

    def max_sibling(self, field: str, error_message: str | None = None):
        return self._compare(rules.max_date_rule, error_message, SIBLING, field)

    def before(self, date_or_field: DateLike, error_message: str | None = None):
        return self._compare(rules.before_date_rule, error_message, GLOBAL, date_or_field)

    def before_sibling(self, field: str, error_message: str | None = None):
        return self._compare(rules.before_date_rule, error_message, SIBLING, field)

    def after(self, date_or_field: DateLike, error_message: str | None = None):
        return self._compare(rules.after_date_rule, error_message, GLOBAL, date_or_field)

    def after_sibling(self, field: str, error_message: str | None = None):
        return self._compare(rules.after_date_rule, error_message, SIBLING, field)

    def between(self, start: DateLike, end: DateLike, error_message: str | None = None):
        rule = self.add_rule(rules.between_dates_rule, error_message)
        rule.options.update(startDate=start, endDate=end, scope=GLOBAL)
        return self

    def today(self, error_message: str | None = None):
        self.add_rule(rules.today_rule, error_message)
        return self

    def from_today(self, error_message: str | None = None):
        self.add_rule(rules.from_today_rule, error_message)
        return self

    def before_today(self, error_message: str | None = None):
        self.add_rule(rules.before_today_rule, error_message)
        return self

    def past(self, error_message: str | None = None):
        self.add_rule(rules.past_rule, error_message)
        return self

    def future(self, error_message: str | None = None):
        self.add_rule(rules.future_rule, error_message)
        return self

    def weekend(self, error_message: str | None = None):
        self.add_rule(rules.weekend_rule, error_message)
        return self

    def business_day(self, error_message: str | None = None):
        self.add_rule(rules.business_day_rule, error_message)
        return self

    def min_age(self, years: int, error_message: str | None = None):
        self.add_rule(rules.min_age_rule, error_message).options["minAge"] = years
        return self

    def max_age(self, years: int, error_message: str | None = None):
        self.add_rule(rules.max_age_rule, error_message).options["maxAge"] = years
        return self
