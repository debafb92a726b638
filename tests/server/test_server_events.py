import datetime as dt
import json
import unittest

from server.events import StickyEventStore, make_event, parse_command


class ServerEventsTests(unittest.TestCase):
    def test_make_event_serializes_timestamp_and_payload(self) -> None:
        now = dt.datetime(2026, 2, 21, 10, 0, tzinfo=dt.timezone.utc)
        raw = make_event("tick", now_fn=lambda: now, display="24:59", is_running=True)
        payload = json.loads(raw)

        self.assertEqual("tick", payload["type"])
        self.assertEqual(now.isoformat(), payload["timestamp"])
        self.assertEqual("24:59", payload["display"])
        self.assertTrue(payload["is_running"])

    def test_make_event_keeps_glyphs_unescaped(self) -> None:
        raw = make_event("tick", session_display="●○○○")
        self.assertIn("●○○○", raw)

    def test_parse_command_accepts_json_objects_only(self) -> None:
        self.assertEqual({"command": "start"}, parse_command('{"command": "start"}'))
        self.assertEqual({"command": "pause"}, parse_command(b'{"command": "pause"}'))
        self.assertIsNone(parse_command("start"))
        self.assertIsNone(parse_command("[1, 2]"))
        self.assertIsNone(parse_command(""))

    def test_sticky_store_ignores_non_sticky_events(self) -> None:
        store = StickyEventStore()
        store.remember("hello", '{"type":"hello"}')
        self.assertEqual([], store.snapshot())

    def test_sticky_store_snapshot_follows_stable_order(self) -> None:
        store = StickyEventStore()
        store.remember("tick", '{"type":"tick","n":1}')
        store.remember("error", '{"type":"error","n":2}')
        store.remember("phase_change", '{"type":"phase_change","n":3}')

        decoded_types = [json.loads(item)["type"] for item in store.snapshot()]
        self.assertEqual(["phase_change", "error", "tick"], decoded_types)

    def test_sticky_store_overwrites_latest_event_by_type(self) -> None:
        store = StickyEventStore()
        store.remember("tick", '{"type":"tick","remaining_secs":10}')
        store.remember("tick", '{"type":"tick","remaining_secs":9}')
        snapshot = store.snapshot()

        self.assertEqual(1, len(snapshot))
        self.assertEqual(9, json.loads(snapshot[0])["remaining_secs"])


if __name__ == "__main__":
    unittest.main()
