from datetime import date
from decimal import Decimal

import pytest

from src.flextime_account.flextime_account.accrual.calculator import OvertimeCalculator, round_half_up
from src.flextime_account.flextime_account.attendance.parser import parse_table
from src.flextime_account.flextime_account.core.enums import AccrualStrategyKind
from src.flextime_account.flextime_account.core.exceptions import ParseError
from src.flextime_account.flextime_account.policy.schema import Policy
from tests.tables import row, table, workweek

WEEKLY = Policy(weekly_hours=40)
DAILY = Policy(weekly_hours=40, accrual_strategy=AccrualStrategyKind.DAILY)


def calculate(text: str, policy: Policy = WEEKLY):
    return OvertimeCalculator().calculate(parse_table(text), policy)


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_end_to_end_week_of_8_5_hours(week_of_8_5_hours, policy):
    result = calculate(week_of_8_5_hours, policy)

    assert result.balance_minutes == 150
    assert result.balance_label == "2h 30min"
    assert result.last_considered_date == date(2022, 1, 7)


def test_calculation_is_idempotent(week_of_8_5_hours):
    records = parse_table(week_of_8_5_hours)
    calc = OvertimeCalculator()

    assert calc.calculate(records, WEEKLY) == calc.calculate(records, WEEKLY)


@pytest.mark.parametrize("hours,expected", [(1.5, 90), (-0.25, -15), (0, 0), (0.01, 1)])
def test_exact_quota_yields_starting_balance(hours, expected):
    text = table(*workweek(), *workweek(10, 14))
    result = calculate(text, Policy(weekly_hours=40, starting_balance_hours=hours))

    assert result.balance_minutes == expected


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_flex_day_contributes_no_worked_time(policy):
    text = table(*workweek(3, 6), row("07.01.2022", "9003 Gleittag", "08:00", "16:00"))
    result = calculate(text, policy)

    # Friday is present (no holiday), but worth zero minutes
    assert result.balance_minutes == -480
    assert result.balance_label == "-8h"


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_flex_day_without_times_keeps_date_present(policy):
    text = table(*workweek(3, 6), row("07.01.2022", "9003 Gleittag", "", ""))
    result = calculate(text, policy)

    assert result.balance_minutes == -480
    assert result.last_considered_date == date(2022, 1, 7)
    assert all(p.inferred_holidays == 0 for p in result.periods)


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_end_of_day_time_counts_to_midnight(policy):
    text = table(*workweek(3, 6), row("07.01.2022", start="16:00", end="24:00"))

    assert calculate(text, policy).balance_minutes == 0


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_trailing_vacation_is_not_last_date(policy):
    text = table(*workweek(3, 5), row("06.01.2022"), row("07.01.2022", "Urlaub(9001)"))
    result = calculate(text, policy)

    assert result.last_considered_date == date(2022, 1, 6)


def test_weekday_without_entries_is_inferred_holiday():
    text = table(*workweek(3, 6))
    result = calculate(text)

    (week,) = result.periods
    assert week.inferred_holidays == 1
    assert week.expected_minutes == 2400 - 480
    assert result.balance_minutes == 0


def test_weekend_without_entries_keeps_quota():
    result = calculate(table(*workweek()))

    (week,) = result.periods
    assert week.inferred_holidays == 0
    assert week.expected_minutes == 2400


def test_week_in_progress_closes_with_holidays():
    # only Monday worked so far: Tue-Fri count as holidays
    result = calculate(table(row("03.01.2022", start="08:00", end="17:00")))

    assert result.periods[0].inferred_holidays == 4
    assert result.balance_minutes == 60


def test_weekly_walk_spans_monday_to_sunday():
    result = calculate(table(row("05.01.2022"), row("11.01.2022")))

    assert [(p.start, p.end) for p in result.periods] == [
        (date(2022, 1, 3), date(2022, 1, 9)),
        (date(2022, 1, 10), date(2022, 1, 16)),
    ]


def test_multiple_entries_per_day_are_summed():
    rows = [row("03.01.2022", start="08:00", end="12:00"), row("03.01.2022", start="12:30", end="17:00")]
    result = calculate(table(*rows), DAILY)

    assert result.periods[0].worked_minutes == 510
    assert result.balance_minutes == 30


def test_reversed_times_count_as_absolute_duration():
    result = calculate(table(row("03.01.2022", start="16:00", end="08:00")), DAILY)
    assert result.balance_minutes == 0


@pytest.mark.parametrize("policy", [WEEKLY, DAILY])
def test_unsorted_input_gives_same_result(policy):
    rows = [*workweek(end="16:30"), row("10.01.2022")]
    assert calculate(table(*reversed(rows)), policy) == calculate(table(*rows), policy)


def test_weekend_entries_diverge_between_strategies():
    text = table(*workweek(), row("08.01.2022", start="08:00", end="12:00"))

    # weekly: Saturday is extra time on top of the met quota
    assert calculate(text, WEEKLY).balance_minutes == 240
    # daily: Saturday is charged a full day quota
    assert calculate(text, DAILY).balance_minutes == -240


def test_trailing_vacation_entry_diverges_between_strategies():
    text = table(*workweek(3, 6), row("07.01.2022", "9001 Urlaub", "08:00", "12:00"))

    # weekly: the vacation entry is still inside the last week and counted
    assert calculate(text, WEEKLY).balance_minutes == -240
    # daily: processing stops at the last non-vacation entry
    assert calculate(text, DAILY).balance_minutes == 0


def test_period_bounds_narrow_records():
    policy = Policy(weekly_hours=40, period_start=date(2022, 1, 4), period_end=date(2022, 1, 6))
    result = calculate(table(*workweek(end="16:30")), policy)

    # Mon and Fri are outside the period and become holidays
    assert result.periods[0].inferred_holidays == 2
    assert result.balance_minutes == 90
    assert result.last_considered_date == date(2022, 1, 6)


def test_fractional_quota_is_rounded_once():
    # 38.3h -> 459.6 min per day; Mon-Thu 8h, Fri holiday: 1920 - 1838.4 = 81.6
    result = calculate(table(*workweek(3, 6)), Policy(weekly_hours=Decimal("38.3")))
    assert result.balance_minutes == 82


def test_only_vacation_rows_raise():
    with pytest.raises(ParseError):
        calculate(table(row("03.01.2022", "9001 Urlaub")))


def test_period_without_rows_raises(week_of_8_5_hours):
    with pytest.raises(ParseError):
        calculate(week_of_8_5_hours, Policy(weekly_hours=40, period_start=date(2023, 1, 1)))


@pytest.mark.parametrize(
    "value,expected",
    [("0.5", 1), ("-0.5", 0), ("1.4", 1), ("-1.5", -1), ("-1.6", -2), ("81.6", 82)],
)
def test_round_half_up(value, expected):
    assert round_half_up(Decimal(value)) == expected
