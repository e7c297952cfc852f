"""
Lambda handler for cycle status and period start updates.
"""
from typing import Dict, Optional
from datetime import date
import json

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, Field, ValidationError

from src.models.cycle import Cycle, CycleSummary, SetPeriodStart
from src.services.constants import CYCLE_LENGTH
from src.services.cycle import apply_action, refresh_cycle, unconfigured_cycle, cycle_summary
from src.services.exceptions import CycleCalendarError
from src.utils.formatters import format_cycle_info, format_cycle_status
from src.utils.logging import logger, log_exception
from src.utils.parsers import parse_period_start, validate_period_start

tracer = Tracer()

class CycleRequest(BaseModel):
    """Cycle request model.

    start_date is the period start the client currently holds; period_start
    is the raw value of the "new period start" form field.
    """
    start_date: Optional[date] = None
    period_start: Optional[str] = None
    today: Optional[date] = None
    cycle_length: int = Field(CYCLE_LENGTH, ge=1)

class CycleResponse(BaseModel):
    """Cycle response model."""
    cycle: Cycle
    summary: CycleSummary
    status: Dict[str, str]
    info: Dict[str, str]
    updated: bool

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle cycle status and update requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = CycleRequest.model_validate_json(event.get('body') or '{}')
        response = process_cycle_request(request)

        return {
            'statusCode': 200,
            'body': response.model_dump_json()
        }

    except (ValidationError, CycleCalendarError) as e:
        logger.warning('Invalid cycle request', extra={'error': str(e)})
        return {
            'statusCode': 400,
            'body': json.dumps({'error': str(e)})
        }

    except Exception as e:
        log_exception(logger, 'Failed to process cycle request', extra={
            'error_type': type(e).__name__
        })
        return {
            'statusCode': 500,
            'body': json.dumps({'error': str(e)})
        }

def process_cycle_request(request: CycleRequest) -> CycleResponse:
    """
    Compute the current cycle, applying a new period start if one was sent.

    Args:
        request: Cycle request

    Returns:
        Cycle response with the resulting cycle and display values

    Raises:
        InvalidDateError: If period_start is present but not a valid date
    """
    today = request.today or date.today()

    if request.start_date:
        start_date = validate_period_start(request.start_date)
        cycle = refresh_cycle(Cycle(start_date=start_date), today, request.cycle_length)
    else:
        cycle = unconfigured_cycle()

    updated = False
    if request.period_start is not None:
        action = SetPeriodStart(start_date=parse_period_start(request.period_start))
        cycle = apply_action(cycle, action, today, request.cycle_length)
        updated = True

    summary = cycle_summary(cycle, today, request.cycle_length)
    return CycleResponse(
        cycle=cycle,
        summary=summary,
        status=format_cycle_status(summary),
        info=format_cycle_info(summary),
        updated=updated
    )
