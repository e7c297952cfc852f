"""
Lambda handler for the calendar month view.
"""
from typing import Dict, List, Optional
from datetime import date
import json

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, Field, ValidationError

from src.models.calendar import CalendarMonth
from src.models.cycle import Cycle, CycleSummary
from src.models.journal import JournalEntry, JournalDetails
from src.services.calendar import build_calendar_month
from src.services.calendar_grid import navigate_month
from src.services.constants import CYCLE_LENGTH, CALENDAR_PHASES
from src.services.cycle import update_cycle, unconfigured_cycle, cycle_summary
from src.services.exceptions import CycleCalendarError
from src.services.journal import JournalIndex, journal_details, date_key_for
from src.utils.formatters import format_cycle_info, format_cycle_status
from src.utils.logging import logger, log_exception
from src.utils.parsers import parse_optional_date, validate_period_start

tracer = Tracer()

class CalendarRequest(BaseModel):
    """Calendar month view request model."""
    start_date: Optional[date] = None
    year: Optional[int] = Field(None, ge=1, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)
    direction: int = 0
    entries: List[JournalEntry] = Field(default_factory=list)
    selected_date: Optional[str] = None
    today: Optional[date] = None
    cycle_length: int = Field(CYCLE_LENGTH, ge=1)

class CalendarResponse(BaseModel):
    """Calendar month view response model."""
    calendar: CalendarMonth
    cycle: Cycle
    summary: CycleSummary
    status: Dict[str, str]
    info: Dict[str, str]
    legend: List[str]
    details: Optional[JournalDetails] = None

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle calendar month view requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = CalendarRequest.model_validate_json(event.get('body') or '{}')
        response = build_month_view(request)

        return {
            'statusCode': 200,
            'body': response.model_dump_json()
        }

    except (ValidationError, CycleCalendarError) as e:
        logger.warning('Invalid calendar request', extra={'error': str(e)})
        return {
            'statusCode': 400,
            'body': json.dumps({'error': str(e)})
        }

    except Exception as e:
        log_exception(logger, 'Failed to build calendar view', extra={
            'error_type': type(e).__name__
        })
        return {
            'statusCode': 500,
            'body': json.dumps({'error': str(e)})
        }

def build_month_view(request: CalendarRequest) -> CalendarResponse:
    """
    Build the calendar month view for a request.

    Args:
        request: Calendar month view request

    Returns:
        Calendar response with annotated cells and cycle information
    """
    today = request.today or date.today()
    year = request.year or today.year
    month = request.month or today.month
    if request.direction:
        year, month = navigate_month(year, month, request.direction)

    if request.start_date:
        start_date = validate_period_start(request.start_date)
        cycle = update_cycle(start_date, today, request.cycle_length)
    else:
        cycle = unconfigured_cycle()

    journal = JournalIndex(request.entries)
    calendar = build_calendar_month(year, month, cycle, journal, today, request.cycle_length)
    summary = cycle_summary(cycle, today, request.cycle_length)

    details = None
    selected = parse_optional_date(request.selected_date, field="selected date")
    if selected:
        details = journal_details(date_key_for(selected), journal.lookup(selected))

    logger.info("Calendar view built", extra={
        "year": year,
        "month": month,
        "configured": cycle.is_configured,
        "entries": len(journal)
    })

    return CalendarResponse(
        calendar=calendar,
        cycle=cycle,
        summary=summary,
        status=format_cycle_status(summary),
        info=format_cycle_info(summary),
        legend=[phase.label for phase in CALENDAR_PHASES],
        details=details
    )
