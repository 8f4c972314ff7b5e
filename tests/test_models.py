from __future__ import annotations

import datetime as dt

from livetest.core import Case, CaseOutcome, CaseResult, Report, Suite, TagFilter, select_cases


def _noop(suite: Suite) -> None:
    return None


def test_case_description() -> None:
    case = Case(label="opens menu", describe_label="Navigation", body=_noop)
    assert case.description == "Navigation: opens menu"
    assert case.tag is None


def test_suite_label_defaults_to_first_describe_label() -> None:
    suite = Suite(cases=[Case(label="a", describe_label="Navigation", body=_noop)])
    assert suite.label == "Navigation"
    assert len(suite) == 1
    assert Suite(cases=[]).label == ""


def test_tag_filter_membership() -> None:
    tag_filter = TagFilter.from_tags(["smoke", "auth"])
    assert tag_filter.matches(Case(label="a", describe_label="S", body=_noop, tag="smoke"))
    assert not tag_filter.matches(Case(label="b", describe_label="S", body=_noop, tag="slow"))
    assert not tag_filter.matches(Case(label="c", describe_label="S", body=_noop))
    assert "auth" in tag_filter


def test_tag_filter_from_tags_variants() -> None:
    assert TagFilter.from_tags(None) is None
    assert TagFilter.from_tags("smoke").tags == frozenset({"smoke"})
    empty = TagFilter.from_tags([])
    assert empty is not None
    assert not empty.matches(Case(label="a", describe_label="S", body=_noop, tag="smoke"))


def test_select_cases_preserves_order() -> None:
    first = Suite(cases=[Case(label=str(i), describe_label="A", body=_noop, tag="x" if i % 2 else None) for i in range(4)])
    second = Suite(cases=[Case(label="z", describe_label="B", body=_noop, tag="x")])
    everything = [case.description for _, case in select_cases([first, second], None)]
    assert everything == ["A: 0", "A: 1", "A: 2", "A: 3", "B: z"]
    tagged = [(suite.label, case.label) for suite, case in select_cases([first, second], TagFilter.from_tags(["x"]))]
    assert tagged == [("A", "1"), ("A", "3"), ("B", "z")]


def test_case_result_messages() -> None:
    passed = CaseResult.build("Form", "submits", CaseOutcome.success(), 0.5)
    failed = CaseResult.build("Form", "validates", CaseOutcome.failure("field missing"), 0.1)
    assert passed.message == "Form: submits  ✅"
    assert passed.fragment() == {"message": "Form: submits  ✅", "passed": True}
    assert "errorMessage" not in passed.to_dict()
    assert failed.message == "Form: validates  ❌\n   field missing"
    assert failed.to_dict() == {
        "describeLabel": "Form",
        "description": "Form: validates",
        "message": "Form: validates  ❌\n   field missing",
        "errorMessage": "field missing",
        "passed": False,
        "time": 0.1,
    }


def test_report_to_dict_shares_cases() -> None:
    results = [
        CaseResult.build("Form", "submits", CaseOutcome.success(), 0.5),
        CaseResult.build("Form", "validates", CaseOutcome.failure("nope"), 0.25),
    ]
    timestamp = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)
    report = Report.build(results, 1, 0.75, timestamp)
    assert report.full_results.test_cases is report.results
    assert not report.passed
    payload = report.to_dict()
    assert payload["errorCount"] == 1
    assert payload["duration"] == 0.75
    assert payload["fullResults"]["timestamp"] == "2024-05-01T12:00:00+00:00"
    assert payload["fullResults"]["testCases"] == payload["results"]
