"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from typing import Optional

@dataclass
class FakeLambdaContext:
    """Minimal Lambda context for handler tests."""
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a fake Lambda context."""
    return FakeLambdaContext()
