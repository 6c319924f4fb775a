import io
import unittest

from selfquiz.app import explain
from selfquiz.app.events import EventBus, GRADED


class ExplainTests(unittest.TestCase):
    def tearDown(self) -> None:
        explain.enable(False)

    def test_disabled_by_default_is_silent(self) -> None:
        out = io.StringIO()
        explain.trace("graded", {"correct": True}, stream=out)
        self.assertEqual(out.getvalue(), "")

    def test_one_line_json(self) -> None:
        explain.enable(True)
        out = io.StringIO()
        explain.trace("graded", {"position": 0, "correct": True}, stream=out)
        self.assertEqual(out.getvalue(), '[EXPLAIN] graded :: {"position":0,"correct":true}\n')

    def test_attach_traces_bus_events(self) -> None:
        explain.enable(True)
        bus = EventBus()
        explain.attach(bus)
        out = io.StringIO()
        bus.subscribe(GRADED, lambda payload: explain.trace("seen", payload, stream=out))
        bus.emit(GRADED, {"id": 7})
        self.assertIn('[EXPLAIN] seen :: {"id":7}', out.getvalue())


if __name__ == "__main__":
    unittest.main()
