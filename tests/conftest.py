"""Pytest configuration and shared fixtures."""
import io
import os

import pytest
from hypothesis import Verbosity, settings

from arithmetic_calculator.core.dispatcher import Dispatcher

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def dispatcher() -> Dispatcher:
    """Provide a Dispatcher instance."""
    return Dispatcher()


@pytest.fixture
def stdout() -> io.StringIO:
    """Provide an in-memory output stream for the shell."""
    return io.StringIO()
