from __future__ import annotations

import datetime as dt
import json
import os
import subprocess
import sys
import unittest
from pathlib import Path

from tickmark.due import is_before_today, is_overdue
from tickmark.errors import AmbiguousInstantError, InvalidTimezoneError

REPO_ROOT = Path(__file__).resolve().parents[1]
PY = os.environ.get("PYTHON", sys.executable)

JST = dt.timezone(dt.timedelta(hours=9))

DUE_TODAY = "2025-11-24T00:00:00+09:00"
DUE_YESTERDAY = "2025-11-23T00:00:00+09:00"
# 10:00 JST on 2025-11-24 (01:00 UTC, same civil day in both zones)
NOW_MORNING = "2025-11-24T10:00:00+09:00"
# 00:30 JST on 2025-11-24 (still 2025-11-23 in UTC)
NOW_JUST_AFTER_MIDNIGHT = "2025-11-24T00:30:00+09:00"


def _run_py(code: str, *, env: dict) -> subprocess.CompletedProcess:
    e = os.environ.copy()
    e.update(env)
    e["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + e.get("PYTHONPATH", "")
    return subprocess.run(
        [PY, "-c", code],
        cwd=str(REPO_ROOT),
        env=e,
        text=True,
        capture_output=True,
    )


class TestDueCompareContract(unittest.TestCase):
    def test_due_today_is_not_before_today(self) -> None:
        self.assertFalse(is_before_today(DUE_TODAY, NOW_MORNING, "Asia/Tokyo"))
        self.assertFalse(is_before_today(DUE_TODAY, NOW_JUST_AFTER_MIDNIGHT, "Asia/Tokyo"))

    def test_due_yesterday_is_before_today(self) -> None:
        self.assertTrue(is_before_today(DUE_YESTERDAY, NOW_MORNING, "Asia/Tokyo"))
        self.assertTrue(is_before_today(DUE_YESTERDAY, NOW_JUST_AFTER_MIDNIGHT, "Asia/Tokyo"))

    def test_future_due_is_not_before_today(self) -> None:
        self.assertFalse(is_before_today("2025-11-25T00:00:00+09:00", NOW_MORNING, "Asia/Tokyo"))

    def test_same_day_earlier_instant_is_not_before_today(self) -> None:
        # Instant comparison would call this overdue; the civil day is the same.
        self.assertFalse(
            is_before_today("2025-11-24T09:00:00+09:00", "2025-11-24T18:00:00+09:00", "Asia/Tokyo")
        )

    def test_utc_bucketing_misclassifies_jst_due_today(self) -> None:
        # In UTC the due instant lands on 11-23 while "now" is already 11-24.
        self.assertTrue(is_before_today(DUE_TODAY, NOW_MORNING, "UTC"))
        self.assertFalse(is_before_today(DUE_TODAY, NOW_MORNING, "Asia/Tokyo"))

    def test_accepts_datetimes_and_epoch_ms(self) -> None:
        due = dt.datetime(2025, 11, 23, tzinfo=JST)
        now_ms = int(dt.datetime(2025, 11, 24, 10, tzinfo=JST).timestamp()) * 1000
        self.assertTrue(is_before_today(due, now_ms, "Asia/Tokyo"))

    def test_default_timezone_is_jst(self) -> None:
        self.assertFalse(is_before_today(DUE_TODAY, NOW_MORNING))
        self.assertTrue(is_before_today(DUE_YESTERDAY, NOW_MORNING))

    def test_invalid_timezone_raises(self) -> None:
        with self.assertRaises(InvalidTimezoneError):
            is_before_today(DUE_TODAY, NOW_MORNING, "No/Such_Zone")
        with self.assertRaises(InvalidTimezoneError):
            is_before_today(DUE_TODAY, NOW_MORNING, "local")

    def test_offsetless_due_raises(self) -> None:
        with self.assertRaises(AmbiguousInstantError):
            is_before_today("2025-11-24", NOW_MORNING, "Asia/Tokyo")

    def test_is_overdue_status_rules(self) -> None:
        self.assertTrue(is_overdue(DUE_YESTERDAY, NOW_MORNING, "Asia/Tokyo", status="in_progress"))
        self.assertFalse(is_overdue(DUE_YESTERDAY, NOW_MORNING, "Asia/Tokyo", status="completed"))
        self.assertFalse(is_overdue(DUE_YESTERDAY, NOW_MORNING, "Asia/Tokyo", status=" Completed "))
        self.assertFalse(is_overdue(None, NOW_MORNING, "Asia/Tokyo"))
        self.assertFalse(is_overdue(DUE_TODAY, NOW_MORNING, "Asia/Tokyo"))


class TestDueCompareProcessTimezoneContract(unittest.TestCase):
    def test_results_are_invariant_across_process_tz(self) -> None:
        code = r'''
import json, time
if hasattr(time, "tzset"):
    time.tzset()
from tickmark.due import is_before_today
from tickmark.ticks import generate_ticks
now = "2025-11-24T00:30:00+09:00"
res = {
  "due_today": is_before_today("2025-11-24T00:00:00+09:00", now, "Asia/Tokyo"),
  "due_yesterday": is_before_today("2025-11-23T00:00:00+09:00", now, "Asia/Tokyo"),
  "ticks": [t.to_dict() for t in generate_ticks(
      "2025-11-20T00:00:00+09:00", "2025-11-30T00:00:00+09:00", "day", "ja", tz="Asia/Tokyo")],
}
print(json.dumps(res, sort_keys=True, ensure_ascii=False))
'''
        outputs = []
        for tz in ("UTC", "America/Los_Angeles", "Asia/Tokyo", "Pacific/Kiritimati"):
            p = _run_py(code, env={"TZ": tz})
            self.assertEqual(p.returncode, 0, p.stdout + "\n" + p.stderr)
            outputs.append(p.stdout.strip())

        self.assertEqual(len(set(outputs)), 1, outputs)
        res = json.loads(outputs[0])
        self.assertFalse(res["due_today"])
        self.assertTrue(res["due_yesterday"])
        self.assertEqual(len(res["ticks"]), 11)


if __name__ == "__main__":
    unittest.main(verbosity=2)
