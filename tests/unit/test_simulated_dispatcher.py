"""
Unit tests for the simulated email dispatcher.
"""

from careers.infrastructure.notifications import SimulatedEmailDispatcher


class TestSimulatedEmailDispatcher:

    async def test_send_records_message(self):
        """Sending always succeeds and is recorded."""
        dispatcher = SimulatedEmailDispatcher(sender="careers@haryak.com", delay_seconds=0)

        sent = await dispatcher.send("a@x.com", "Subject", "Body")

        assert sent is True
        assert dispatcher.sent == [{
            "from": "careers@haryak.com",
            "to": "a@x.com",
            "subject": "Subject",
            "body": "Body",
        }]

    def test_default_delay(self):
        """Delivery is simulated with a two second delay."""
        assert SimulatedEmailDispatcher(sender="x@y.com").delay_seconds == 2.0
