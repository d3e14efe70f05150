import pytest

from rangegen.core.config import StepperSettings, set_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test with default settings, independent of the environment."""
    set_settings(StepperSettings())
    yield
    set_settings(None)
