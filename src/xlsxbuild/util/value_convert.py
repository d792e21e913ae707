import numbers
from collections.abc import Callable
from datetime import date, datetime, time, tzinfo
from decimal import Decimal
from typing import Any

from ..conf import DEFAULT_CONTENT_POLICY
from ..spec import (
    CellContent,
    ContentBlank,
    ContentBoolean,
    ContentDatetime,
    ContentFormula,
    ContentNumber,
    ContentText,
    Formula,
    SpecContentPolicy,
)

################################################################################
# #region DatetimeConversion


def convert_to_local_datetime(value: date, *, time_zone: tzinfo | None) -> datetime:
    """
    Normalize a date-like value to a naive wall-clock ``datetime`` in ``time_zone``.

    - ``date``: midnight of that day.
    - naive ``datetime``: already wall-clock time, returned unchanged.
    - aware ``datetime``: converted into ``time_zone`` (system local zone when
      ``None``), then stripped of its tzinfo.

    Excel stores no zone, so with ``time_zone=None`` the written serial depends on
    the machine the workbook was built on.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value
        return value.astimezone(time_zone).replace(tzinfo=None)
    return datetime.combine(value, time.min)


# #endregion
################################################################################
# #region CellContentResolution


def _is_numeric(value: Any) -> bool:
    # complex is a numbers.Number but has no float widening
    return isinstance(value, (numbers.Real, Decimal))


def _to_blank(value: Any, policy: SpecContentPolicy) -> CellContent:
    return ContentBlank()


def _to_formula(value: Formula, policy: SpecContentPolicy) -> CellContent:
    return ContentFormula(value.text)


def _to_boolean(value: bool, policy: SpecContentPolicy) -> CellContent:
    return ContentBoolean(value)


def _to_number(value: Any, policy: SpecContentPolicy) -> CellContent:
    # large ints lose precision; out-of-range ones raise OverflowError
    return ContentNumber(float(value))


def _to_datetime(value: date, policy: SpecContentPolicy) -> CellContent:
    return ContentDatetime(convert_to_local_datetime(value, time_zone=policy.time_zone))


_TUP_CONTENT_RULES: tuple[
    tuple[Callable[[Any], bool], Callable[[Any, SpecContentPolicy], CellContent]], ...
] = (
    (lambda v: v is None, _to_blank),
    (lambda v: isinstance(v, Formula), _to_formula),
    # numpy.bool_ is neither bool nor a registered number: it resolves to text
    (lambda v: isinstance(v, bool), _to_boolean),
    (_is_numeric, _to_number),
    (lambda v: isinstance(v, date), _to_datetime),
)


def resolve_cell_content(
    value: Any, *, policy: SpecContentPolicy = DEFAULT_CONTENT_POLICY
) -> CellContent:
    """Map an arbitrary value to exactly one cell content variant.

    Rules are tried in order (blank, formula, boolean, number, date) and the
    first match wins; everything else becomes ``str(value)`` text.
    """
    for _predicate, _handler in _TUP_CONTENT_RULES:
        if _predicate(value):
            return _handler(value, policy)
    return ContentText(str(value))


# #endregion
################################################################################
