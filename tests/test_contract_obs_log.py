from __future__ import annotations

import io
import os
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

from tickmark.due import is_before_today
from tickmark.ticks import generate_ticks


class TestObservabilityContract(unittest.TestCase):
    def test_silent_by_default(self) -> None:
        buf = io.StringIO()
        with patch.dict(os.environ, {"TICKMARK_OBS_LOG": ""}), redirect_stderr(buf):
            generate_ticks("2025-11-20T00:00:00+09:00", "2025-11-22T00:00:00+09:00", "day", tz="Asia/Tokyo")
        self.assertEqual(buf.getvalue(), "")

    def test_enabled_lines(self) -> None:
        buf = io.StringIO()
        with patch.dict(os.environ, {"TICKMARK_OBS_LOG": "1"}), redirect_stderr(buf):
            generate_ticks("2025-11-20T00:00:00+09:00", "2025-11-22T00:00:00+09:00", "day", tz="Asia/Tokyo")
            is_before_today("2025-11-23T00:00:00+09:00", "2025-11-24T00:30:00+09:00", "Asia/Tokyo")
        lines = buf.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(
            lines[0],
            "[tickmark.ticks] ticks.ok mode=day n=3 first=2025-11-20 last=2025-11-22",
        )
        self.assertEqual(
            lines[1],
            "[tickmark.due] due.cmp due_day=2025-11-23 ref_day=2025-11-24 tz=Asia/Tokyo",
        )

    def test_logged_tz_is_the_resolved_name(self) -> None:
        buf = io.StringIO()
        with patch.dict(os.environ, {"TICKMARK_OBS_LOG": "1"}), redirect_stderr(buf):
            is_before_today("2025-11-23T00:00:00+09:00", "2025-11-24T00:30:00+09:00", None)
            is_before_today("2025-11-23T00:00:00+09:00", "2025-11-24T00:30:00+09:00", "jst")
        lines = buf.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        for line in lines:
            self.assertTrue(line.endswith(" tz=Asia/Tokyo"), line)


if __name__ == "__main__":
    unittest.main(verbosity=2)
