"""
Lambda handlers package for AWS Lambda functions.
"""
from .calendar import handler as calendar_handler
from .cycle import handler as cycle_handler

__all__ = ["calendar_handler", "cycle_handler"]
