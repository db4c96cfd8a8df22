from __future__ import annotations

import pytest

from srplus.domain.model import OutcomeStatus, Period, ValidationOutcome
from srplus.domain.validation import (
    EXALTED_COUNTER,
    RECENT_WINDOW,
    Expectation,
    classify,
    find_prior_claim,
    validate,
)
from tests.helpers.periods import make_period, make_roster


def _single_outcome(current: Period, history: list[Period]) -> ValidationOutcome:
    report = validate(current, history)
    assert len(report.outcomes) == 1
    return report.outcomes[0]


def test_new_player_with_counter_is_an_error() -> None:
    current = make_period("cur", {"Alice": [("itemA", 1)]})

    outcome = _single_outcome(current, [])

    assert outcome.status is OutcomeStatus.ERROR
    assert outcome.expected_counter == 0
    assert outcome.actual_counter == 1
    assert outcome.reason == "Expected 0, got 1 (New player)"


def test_same_item_continues_counter() -> None:
    current = make_period("cur", {"Bob": [("itemX", 3)]})
    history = [make_period("w1", {"Bob": [("itemX", 2)]})]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.OK
    assert outcome.expected_counter == 3
    assert outcome.reason is None


def test_item_change_resets_counter() -> None:
    current = make_period("cur", {"Cara": [("itemY", 0)]})
    history = [make_period("w1", {"Cara": [("itemZ", 2)]})]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.OK
    assert outcome.expected_counter == 0
    assert outcome.reason == 'Item changed from "itemZ"'


def test_new_player_with_exalted_counter_is_a_warning() -> None:
    current = make_period("cur", {"Dan": [("itemW", 2)]})
    history = [make_period(f"w{index}", {"Someone": [("other", 1)]}) for index in range(5)]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.WARNING
    assert outcome.expected_counter == 0
    assert outcome.reason == "Check for Exalted Status (New player)"


def test_participant_without_claims_is_an_error() -> None:
    current = make_period("cur", {"Eve": []})

    outcome = _single_outcome(current, [])

    assert outcome.status is OutcomeStatus.ERROR
    assert outcome.item_name == "N/A"
    assert outcome.actual_counter == 0
    assert outcome.expected_counter == 0
    assert outcome.reason == "No items found"


def test_gap_beyond_recent_window_resets_with_gap_annotation() -> None:
    current = make_period("cur", {"Gil": [("Band", 4)]})
    history = [
        make_period("w1"),
        make_period("w2"),
        make_period("w3"),
        make_period("w4", {"Gil": [("Band", 3)]}),
    ]

    outcome = _single_outcome(current, history)

    assert outcome.expected_counter == 0
    assert outcome.status is OutcomeStatus.ERROR
    assert outcome.reason == "Expected 0, got 4 (4+ week gap)"


def test_gap_with_exalted_counter_warns_with_gap_annotation() -> None:
    current = make_period("cur", {"Gil": [("Band", EXALTED_COUNTER)]})
    history = [
        make_period("w1"),
        make_period("w2"),
        make_period("w3"),
        make_period("w4", {"Gil": [("Band", 1)]}),
    ]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.WARNING
    assert outcome.reason == "Check for Exalted Status (4+ week gap)"


def test_continuation_from_older_week_is_annotated() -> None:
    current = make_period("cur", {"Max": [("Cleaver", 2)]})
    history = [
        make_period("w1", {"Other": [("x", 0)]}),
        make_period("w2", {"Other": [("x", 0)]}),
        make_period("w3", {"Max": [("Cleaver", 1)]}),
    ]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.OK
    assert outcome.expected_counter == 2
    assert outcome.reason == "Continued from 3 weeks ago"


def test_mismatch_on_continuation_appends_annotation() -> None:
    current = make_period("cur", {"Max": [("Cleaver", 5)]})
    history = [make_period("w1"), make_period("w2", {"Max": [("Cleaver", 1)]})]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.ERROR
    assert outcome.reason == "Expected 2, got 5 (Continued from 2 weeks ago)"


def test_exalted_counter_on_continuation_is_an_error() -> None:
    current = make_period("cur", {"Psst": [("Edge", EXALTED_COUNTER)]})
    history = [make_period("w1", {"Psst": [("Edge", 4)]})]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.ERROR
    assert outcome.reason == "Expected 5, got 2"


def test_names_match_case_insensitively_and_trimmed() -> None:
    current = make_period("cur", {"  gZeus ": [("band of accuria ", 2)]})
    history = [make_period("w1", {"Gzeus": [("Band of Accuria", 1)]})]

    outcome = _single_outcome(current, history)

    assert outcome.participant_name == "  gZeus "
    assert outcome.status is OutcomeStatus.OK
    assert outcome.expected_counter == 2


def test_most_recent_week_in_window_wins() -> None:
    current = make_period("cur", {"Ann": [("Ring", 1)]})
    history = [
        make_period("w1", {"Ann": [("Ring", 0)]}),
        make_period("w2", {"Ann": [("Ring", 7)]}),
    ]

    outcome = _single_outcome(current, history)

    assert outcome.expected_counter == 1
    assert outcome.status is OutcomeStatus.OK


def test_empty_roster_in_history_is_skipped() -> None:
    current = make_period("cur", {"Ann": [("Ring", 3)]})
    history = [
        make_period("w1", {"Ann": []}),
        make_period("w2", {"Ann": [("Ring", 2)]}),
    ]

    prior = find_prior_claim("Ann", history, max_periods=RECENT_WINDOW)

    assert prior is not None
    assert prior.week_index == 1
    assert _single_outcome(current, history).status is OutcomeStatus.OK


def test_recent_window_bounds_the_search() -> None:
    history = [make_period("w1"), make_period("w2", {"Ann": [("Ring", 2)]})]

    assert find_prior_claim("Ann", history, max_periods=1) is None
    assert find_prior_claim("Ann", history) is not None

    current = make_period("cur", {"Ann": [("Ring", 3)]})
    report = validate(current, history, recent_window=1)
    assert report.outcomes[0].reason == "Expected 0, got 3 (4+ week gap)"


def test_rejects_empty_recent_window() -> None:
    with pytest.raises(ValueError, match="Recent window"):
        validate(make_period("cur"), [], recent_window=0)


def test_report_counts_add_up() -> None:
    current = make_period(
        "cur",
        {
            "Ok": [("a", 0)],
            "Warn": [("b", 2)],
            "Err": [("c", 1)],
            "Empty": [],
        },
    )

    report = validate(current, [])

    assert report.period_id == "cur"
    assert report.total_participants == len(current.participants)
    assert report.ok_count == 1
    assert report.warning_count == 1
    assert report.error_count == 2
    assert report.ok_count + report.warning_count + report.error_count == report.total_participants
    assert {outcome.participant_name for outcome in report.outcomes} == {"Ok", "Warn", "Err", "Empty"}


def test_empty_current_period_yields_empty_report() -> None:
    report = validate(make_period("cur"), [make_period("w1", {"A": [("x", 1)]})])

    assert report.total_participants == 0
    assert report.outcomes == ()


def test_validate_is_deterministic() -> None:
    current = make_period("cur", {"A": [("x", 2)], "B": [("y", 1)]})
    history = [make_period("w1", {"A": [("x", 1)]}), make_period("w2", {"B": [("z", 3)]})]

    assert validate(current, history) == validate(current, history)


def test_expected_counter_ignores_observed_value() -> None:
    history = [make_period("w1", {"A": [("x", 4)]})]

    expectations = {
        validate(make_period("cur", {"A": [("x", actual)]}), history).outcomes[0].expected_counter
        for actual in (0, 1, 5, 9)
    }

    assert expectations == {5}


def test_history_accepts_any_sequence() -> None:
    current = make_period("cur", {"A": [("x", 2)]})
    history = (make_period("w1", {"A": [("x", 1)]}),)

    assert validate(current, history).outcomes[0].status is OutcomeStatus.OK


def test_classify_only_warns_on_resets() -> None:
    reset = Expectation(expected_counter=0, is_reset=True, annotation="New player")
    continued = Expectation(expected_counter=3, is_reset=False)

    assert classify(2, reset) == (OutcomeStatus.WARNING, "Check for Exalted Status (New player)")
    assert classify(0, reset) == (OutcomeStatus.OK, "New player")
    assert classify(3, continued) == (OutcomeStatus.OK, None)
    assert classify(2, continued) == (OutcomeStatus.ERROR, "Expected 3, got 2")


def test_roster_lookup_helper() -> None:
    roster = make_roster("Gzeus", ("Band", 1))

    assert roster.matches(" GZEUS")
    assert not roster.matches("Gzeu")


def test_item_change_with_exalted_counter_is_a_warning() -> None:
    current = make_period("cur", {"Cara": [("itemY", EXALTED_COUNTER)]})
    history = [make_period("w1", {"Cara": [("itemZ", 3)]})]

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.WARNING
    assert outcome.expected_counter == 0
    assert outcome.reason == 'Check for Exalted Status (Item changed from "itemZ")'


def test_gap_search_reaches_far_back_history() -> None:
    current = make_period("cur", {"Gil": [("Band", 0)]})
    history = [make_period(f"w{index}") for index in range(7)]
    history.append(make_period("w7", {"Gil": [("Band", 5)]}))

    outcome = _single_outcome(current, history)

    assert outcome.status is OutcomeStatus.OK
    assert outcome.expected_counter == 0
    assert outcome.reason == "4+ week gap"
