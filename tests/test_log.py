"""
Logging tests

Verbosity gating and the component column.
"""

import pytest
from loguru import logger

from nausicaa.lib.log import LOG, state_connectToLogger, verbosity_get
from nausicaa.models import ProgramState


@pytest.fixture
def messages():
    """Capture formatted log records; disconnect the state afterwards"""
    captured = []
    handler_id = logger.add(captured.append, format="{extra[component]}|{message}")
    yield captured
    logger.remove(handler_id)
    state_connectToLogger(None)


class TestLOG:
    """Test LOG() gating by the connected state"""

    def test_silent_without_state(self, messages):
        """Nothing is logged without a connected state"""
        state_connectToLogger(None)

        LOG("hello", level=1)

        assert messages == []
        assert verbosity_get() == 0

    def test_verbosity_gate(self, messages):
        """Messages above the verbosity are dropped"""
        state_connectToLogger(ProgramState(verbosity=2))

        LOG("shown", level=2)
        LOG("hidden", level=3)

        assert [m.strip() for m in messages] == ["-|shown"]

    def test_component_column(self, messages):
        """Component path fills the component column"""
        state_connectToLogger(ProgramState(verbosity=3))

        LOG("Compiling", level=2, component="ui/Button.html")

        assert messages[0].strip() == "ui/Button.html|Compiling"
