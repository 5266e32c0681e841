import json
import unittest

from app import app as flask_app  # noqa: E402
from app import state_to_json     # noqa: E402
from game import play             # noqa: E402


class TestFlaskAPIEdges(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _post(self, path, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def _assert_400(self, r):
        self.assertEqual(r.status_code, 400)
        d = r.get_json()
        self.assertFalse(d["ok"])
        self.assertIn("error", d)
        return d

    def test_given_missing_state_when_posting_then_400(self):
        for path in ("/api/move", "/api/jump", "/api/toggle", "/api/view"):
            self._assert_400(self._post(path, {"cell": 0, "step": 0}))

    def test_given_non_json_body_when_posting_move_then_400(self):
        r = self.client.post("/api/move", data="not json", content_type="text/plain")
        d = self._assert_400(r)
        self.assertIn("state required", d["error"])

    def test_given_out_of_range_cell_when_move_then_400(self):
        state = state_to_json(play([]))
        for cell in (9, -1, "4", None, True):
            self._assert_400(self._post("/api/move", {"state": state, "cell": cell}))

    def test_given_out_of_range_step_when_jump_then_400(self):
        state = state_to_json(play([0, 4]))
        d = self._assert_400(self._post("/api/jump", {"state": state, "step": 3}))
        self.assertIn("step", d["error"])

    def test_given_tampered_history_when_posting_then_400(self):
        state = state_to_json(play([0, 4]))
        state["history"][2]["board"]["squares"][4] = "X"
        state["history"][2]["player"] = "X"
        self._assert_400(self._post("/api/view", {"state": state}))

    def test_given_bad_mark_when_posting_then_400(self):
        state = state_to_json(play([0]))
        state["history"][1]["board"]["squares"][0] = "Z"
        self._assert_400(self._post("/api/move", {"state": state, "cell": 1}))

    def test_given_malformed_history_entries_when_posting_then_400(self):
        for history in ([], "abc", [1, 2], [{"board": {"squares": "x"}}], [{"board": {}}]):
            state = {"history": history, "stepNumber": 0}
            self._assert_400(self._post("/api/view", {"state": state}))

    def test_given_cursor_out_of_range_when_posting_then_400(self):
        state = state_to_json(play([0]))
        state["stepNumber"] = 5
        self._assert_400(self._post("/api/toggle", {"state": state}))

    def test_given_array_body_when_posting_then_400(self):
        for path in ("/api/move", "/api/jump", "/api/toggle", "/api/view"):
            d = self._assert_400(self._post(path, [1, 2]))
            self.assertIn("body must be an object", d["error"])

    def test_given_loosely_typed_state_fields_when_posting_then_400(self):
        for field, value in (("sortedAsc", "false"), ("stepNumber", 1.9), ("stepNumber", True)):
            state = state_to_json(play([0]))
            state[field] = value
            d = self._assert_400(self._post("/api/view", {"state": state}))
            self.assertIn(field, d["error"])

    def test_given_first_step_with_row_when_posting_then_400(self):
        state = state_to_json(play([0]))
        state["history"][0]["row"] = 5
        self._assert_400(self._post("/api/view", {"state": state}))


if __name__ == "__main__":
    unittest.main(verbosity=2)
