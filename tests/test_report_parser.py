from __future__ import annotations

import json

import pytest

from scandalscope.errors import MalformedResponseError
from scandalscope.models.report import ScandalReport
from scandalscope.services.report_parser import extract_report

INCIDENT = {
    "onset": "2023年01月",
    "resolution": "2023年03月",
    "description": "配信中の発言が批判を集めた",
    "negativeRate": "30%",
    "positiveRate": "70%",
    "category": "発言ミス",
    "riskScore": "40",
    "impact": "フォロワー減少",
    "relatedNews": [{"title": "T", "link": "https://example.com/t", "summary": "S"}],
    "socialReactions": [
        {"comment": "これはちょっと良くないよね", "sourceUrl": "https://example.com/c1"},
        {"comment": "何が問題なのか分からない", "sourceUrl": ""},
    ],
}


def test_extract_report_skips_leading_prose():
    body = json.dumps({"incidents": [INCIDENT]}, ensure_ascii=False)
    raw = f"here is your answer: {body}"

    report = extract_report(raw)

    assert report == ScandalReport.model_validate(json.loads(raw[raw.index("{"):]))
    incident = report.incidents[0]
    assert incident.onset == "2023年01月"
    assert incident.risk_score == "40"
    assert incident.social_reactions[1].source_url == ""
    assert incident.related_news[0].link == "https://example.com/t"


def test_extract_report_serializes_with_camel_case_keys():
    report = extract_report(json.dumps({"incidents": [INCIDENT]}))
    dumped = report.model_dump(by_alias=True)

    incident = dumped["incidents"][0]
    assert incident["negativeRate"] == "30%"
    assert incident["socialReactions"][0]["sourceUrl"] == "https://example.com/c1"
    assert incident["relatedNews"][0]["summary"] == "S"


def test_extract_report_fails_without_brace():
    with pytest.raises(MalformedResponseError):
        extract_report("Sorry, I could not find anything.")


def test_extract_report_fails_on_empty_incident_list():
    with pytest.raises(MalformedResponseError):
        extract_report('{"incidents":[]}')


def test_extract_report_fails_when_incidents_missing():
    with pytest.raises(MalformedResponseError) as exc_info:
        extract_report('{"history": [{"onset": "2023年01月"}]}')
    assert "incidents" in str(exc_info.value)


def test_extract_report_fails_on_invalid_json():
    with pytest.raises(MalformedResponseError):
        extract_report('{"incidents": [{"onset": "2023年01月"}')


def test_extract_report_fails_on_trailing_text_after_document():
    with pytest.raises(MalformedResponseError):
        extract_report('{"incidents": [{"onset": "2023年01月"}]} Hope this helps!')


def test_extract_report_reports_field_level_errors():
    with pytest.raises(MalformedResponseError) as exc_info:
        extract_report('{"incidents": [{"onset": "2023年01月", "relatedNews": "none"}]}')

    assert "incidents.0.relatedNews" in str(exc_info.value)
    assert exc_info.value.errors


def test_extract_report_accepts_sparse_incident_and_coerces_numbers():
    report = extract_report('{"incidents":[{"onset":"2023年01月","riskScore":55,"negativeRate":null}]}')

    incident = report.incidents[0]
    assert incident.risk_score == "55"
    assert incident.negative_rate == ""
    assert incident.social_reactions == []


def test_max_risk_score_uses_highest_parseable_value():
    report = extract_report(
        '{"incidents":[{"riskScore":"40"},{"riskScore":"72点"},{"riskScore":"不明"}]}'
    )
    assert report.max_risk_score == 72
