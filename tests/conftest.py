"""Shared pytest fixtures for the naegele test suite.

Fixtures defined here are available to all test modules (unit, integration,
evaluation) without any import.

No AWS credentials are required: the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call,
and WOA tests read time from ``fixed_clock`` rather than the wall clock.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# The assistant reads MODEL_ARN on first use; give it a sentinel so tests
# that build an agent never fail on a missing variable.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


@pytest.fixture(autouse=True)
def _fresh_assistant_settings():
    """Drop the cached AssistantSettings so monkeypatched env vars are seen."""
    from naegele.config import get_assistant_settings

    get_assistant_settings.cache_clear()
    yield
    get_assistant_settings.cache_clear()


# ---------------------------------------------------------------------------
# Clock fixtures
# ---------------------------------------------------------------------------

def local_timestamp(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> float:
    """POSIX time of a local wall-clock moment, the same way the WOA code converts dates."""
    return datetime.datetime(year, month, day, hour, minute).timestamp()


@pytest.fixture
def fixed_clock():
    """Factory for a clock frozen at a local wall-clock moment.

    Usage: ``clock = fixed_clock(2024, 1, 11, 15, 30)``.
    """
    def _make(year: int, month: int, day: int, hour: int = 0, minute: int = 0):
        now = local_timestamp(year, month, day, hour, minute)
        return lambda: now

    return _make


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``, no AWS credentials needed.

    The mock's ``invoke`` return value mimics the minimal Bedrock response
    shape so that any code path that calls ``model.invoke()`` directly receives
    a structurally valid dict.
    """
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The tool registry, system prompt and message list are live; the
    underlying model never makes a Bedrock API call.
    """
    with patch("naegele.agent.BedrockModel", return_value=mock_bedrock_model):
        from naegele.agent import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def known_lnmp() -> str:
    """An LNMP whose EDD (08/10/2024) is used across several test modules."""
    return "01/01/2024"


@pytest.fixture
def leap_day_lnmp() -> str:
    """A valid leap-day date (2024 is a leap year)."""
    return "29/02/2024"


@pytest.fixture
def non_leap_feb_29() -> str:
    """Calendar-impossible: 2023 is not a leap year."""
    return "29/02/2023"
