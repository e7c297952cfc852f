"""Tests for the calendar and cycle Lambda handlers."""
import json
from unittest.mock import patch

import pytest

from src.handlers.calendar import handler as calendar_handler
from src.handlers.cycle import handler as cycle_handler

def _event(body):
    """Build an API Gateway proxy event."""
    return {"body": json.dumps(body)}

def test_calendar_handler_month_view(lambda_context):
    """Test a full month view with cycle and journal data."""
    response = calendar_handler(_event({
        "start_date": "2024-01-01",
        "year": 2024,
        "month": 2,
        "today": "2024-02-15",
        "entries": [
            {"id": "1", "date": "2024-02-03", "content": "Walk", "mood": "happy",
             "symptoms": [], "cycleDay": 34},
        ],
        "selected_date": "2024-02-03"
    }), lambda_context)

    assert response["statusCode"] == 200
    body = json.loads(response["body"])

    calendar = body["calendar"]
    assert calendar["title"] == "February 2024"
    assert len(calendar["cells"]) == 33
    assert calendar["cells"][0]["day_number"] is None
    assert calendar["cells"][6]["mood"] == "happy"
    assert calendar["cells"][6]["phase"] == "follicular"
    assert calendar["cells"][18]["is_today"] is True

    assert body["cycle"]["current_day"] == 46
    assert body["cycle"]["phase"] == "luteal"
    assert body["status"] == {"day": "Day 46 of your cycle", "phase": "Luteal Phase"}
    assert body["info"]["next_period"] == "Jan 29"
    assert body["info"]["fertile_window"] == "Jan 11–Jan 18"
    assert body["legend"] == ["Menstrual", "Follicular", "Ovulatory", "Luteal"]
    assert body["details"]["notes"] == "Walk"
    assert body["details"]["symptoms"] == "None"

def test_calendar_handler_navigation(lambda_context):
    """Test moving to the next month across a year boundary."""
    response = calendar_handler(_event({
        "year": 2024,
        "month": 12,
        "direction": 1,
        "today": "2024-12-10"
    }), lambda_context)

    body = json.loads(response["body"])
    assert response["statusCode"] == 200
    assert body["calendar"]["year"] == 2025
    assert body["calendar"]["month"] == 1
    assert body["cycle"]["phase"] == "unknown"
    assert body["info"]["next_period"] == "Unknown"
    assert body["details"] is None

def test_calendar_handler_invalid_month(lambda_context):
    """Test request validation errors."""
    response = calendar_handler(_event({"year": 2024, "month": 13}), lambda_context)

    assert response["statusCode"] == 400
    assert "error" in json.loads(response["body"])

def test_calendar_handler_invalid_selected_date(lambda_context):
    """Test an unparseable selected date is rejected."""
    response = calendar_handler(_event({
        "year": 2024,
        "month": 2,
        "selected_date": "Feb 3"
    }), lambda_context)

    assert response["statusCode"] == 400

def test_calendar_handler_malformed_body(lambda_context):
    """Test a body that is not JSON."""
    response = calendar_handler({"body": "{not json"}, lambda_context)
    assert response["statusCode"] == 400

def test_cycle_handler_set_period_start(lambda_context):
    """Test submitting a new period start."""
    response = cycle_handler(_event({
        "start_date": "2024-01-01",
        "period_start": "2024-03-01",
        "today": "2024-03-05"
    }), lambda_context)

    assert response["statusCode"] == 200
    body = json.loads(response["body"])
    assert body["updated"] is True
    assert body["cycle"]["start_date"] == "2024-03-01"
    assert body["cycle"]["current_day"] == 5
    assert body["cycle"]["phase"] == "menstrual"
    assert body["info"]["next_period"] == "Mar 29"
    assert body["info"]["fertile_window"] == "Mar 11–Mar 18"

def test_cycle_handler_future_period_start_clamped(lambda_context):
    """Test a future period start shows day 1."""
    response = cycle_handler(_event({
        "period_start": "2024-03-10",
        "today": "2024-03-05"
    }), lambda_context)

    body = json.loads(response["body"])
    assert response["statusCode"] == 200
    assert body["cycle"]["current_day"] == 1
    assert body["status"]["day"] == "Day 1 of your cycle"

def test_cycle_handler_status_only(lambda_context):
    """Test refreshing the current cycle without an update."""
    response = cycle_handler(_event({
        "start_date": "2024-01-01",
        "today": "2024-01-16"
    }), lambda_context)

    body = json.loads(response["body"])
    assert body["updated"] is False
    assert body["cycle"]["current_day"] == 16
    assert body["status"]["phase"] == "Luteal Phase"

def test_cycle_handler_unconfigured(lambda_context):
    """Test the status of a cycle without a start date."""
    response = cycle_handler({"body": None}, lambda_context)

    body = json.loads(response["body"])
    assert response["statusCode"] == 200
    assert body["cycle"]["start_date"] is None
    assert body["status"]["phase"] == "Unknown Phase"
    assert body["info"]["fertile_window"] == "Unknown"

@pytest.mark.parametrize("period_start", ["", "03/01/2024", "2024-02-30"])
def test_cycle_handler_invalid_period_start(lambda_context, period_start):
    """Test malformed period start input is rejected before the engine."""
    response = cycle_handler(_event({"period_start": period_start}), lambda_context)

    assert response["statusCode"] == 400
    assert "error" in json.loads(response["body"])

@pytest.mark.parametrize("body", [
    {"year": 10000, "month": 1},
    {"year": 0, "month": 1},
    {"year": 1, "month": 1, "direction": -1},
    {"year": 9999, "month": 12, "direction": 1},
])
def test_calendar_handler_year_out_of_range(lambda_context, body):
    """Test years outside the date range are client errors."""
    response = calendar_handler(_event(body), lambda_context)

    assert response["statusCode"] == 400
    assert "error" in json.loads(response["body"])

def test_calendar_handler_last_supported_month(lambda_context):
    """Test the month view of December 9999."""
    response = calendar_handler(_event({"year": 9999, "month": 12, "today": "2024-01-01"}), lambda_context)

    body = json.loads(response["body"])
    assert response["statusCode"] == 200
    assert body["calendar"]["cells"][-1]["day_number"] == 31

def test_calendar_handler_start_date_too_late(lambda_context):
    """Test a held start date whose projections overflow is rejected."""
    response = calendar_handler(_event({
        "start_date": "9999-12-20",
        "year": 2024,
        "month": 1
    }), lambda_context)

    assert response["statusCode"] == 400

def test_cycle_handler_period_start_too_late(lambda_context):
    """Test a period start whose next period overflows is rejected."""
    response = cycle_handler(_event({"period_start": "9999-12-20"}), lambda_context)
    assert response["statusCode"] == 400

    response = cycle_handler(_event({"start_date": "9999-12-20"}), lambda_context)
    assert response["statusCode"] == 400

@pytest.mark.parametrize("raw_body", ["[]", "\"2024-01-01\"", "42"])
def test_handlers_reject_non_object_body(lambda_context, raw_body):
    """Test JSON bodies that are not objects are client errors."""
    assert calendar_handler({"body": raw_body}, lambda_context)["statusCode"] == 400
    assert cycle_handler({"body": raw_body}, lambda_context)["statusCode"] == 400

def test_calendar_handler_empty_selected_date(lambda_context):
    """Test an empty selected date is rejected like any malformed date."""
    response = calendar_handler(_event({"year": 2024, "month": 2, "selected_date": ""}), lambda_context)
    assert response["statusCode"] == 400

def test_calendar_handler_unexpected_error_logged(lambda_context):
    """Test unexpected failures return 500 and are logged on a single line."""
    with patch("src.handlers.calendar.build_month_view", side_effect=RuntimeError("boom")), \
            patch("src.handlers.calendar.log_exception") as mock_log:
        response = calendar_handler(_event({}), lambda_context)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"error": "boom"}
    mock_log.assert_called_once()
    assert mock_log.call_args.kwargs["extra"] == {"error_type": "RuntimeError"}

def test_cycle_handler_unexpected_error_logged(lambda_context):
    """Test unexpected cycle failures return 500 and are logged."""
    with patch("src.handlers.cycle.process_cycle_request", side_effect=RuntimeError("boom")), \
            patch("src.handlers.cycle.log_exception") as mock_log:
        response = cycle_handler(_event({}), lambda_context)

    assert response["statusCode"] == 500
    mock_log.assert_called_once()
