import unittest

from pomodoro import BasicTimer


class BasicTimerTests(unittest.TestCase):
    def test_new_timer_is_idle_with_full_remaining_seconds(self) -> None:
        for duration in (0, 1, 300, 3661):
            timer = BasicTimer(duration)
            self.assertEqual(duration, timer.remaining_secs)
            self.assertEqual(duration, timer.duration_secs)
            self.assertEqual("idle", timer.status)

    def test_negative_duration_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BasicTimer(-1)
        with self.assertRaises(ValueError):
            BasicTimer(10).set_duration(-5)

    def test_tick_reduces_remaining_by_one_while_running(self) -> None:
        timer = BasicTimer(300)
        timer.start()
        timer.tick()
        self.assertEqual(299, timer.remaining_secs)
        self.assertEqual("running", timer.status)

    def test_idle_and_paused_timers_do_not_tick(self) -> None:
        timer = BasicTimer(300)
        for _ in range(5):
            timer.tick()
        self.assertEqual(300, timer.remaining_secs)

        timer.start()
        timer.tick()
        timer.pause()
        for _ in range(5):
            timer.tick()
        self.assertEqual(299, timer.remaining_secs)
        self.assertEqual("paused", timer.status)

    def test_ticking_duration_times_finishes_and_stays_finished(self) -> None:
        timer = BasicTimer(3)
        timer.start()
        for _ in range(3):
            timer.tick()
        self.assertEqual(0, timer.remaining_secs)
        self.assertEqual("finished", timer.status)
        self.assertTrue(timer.is_finished)

        timer.tick()
        self.assertEqual(0, timer.remaining_secs)
        self.assertEqual("finished", timer.status)

    def test_finished_timer_cannot_be_restarted(self) -> None:
        timer = BasicTimer(1)
        timer.start()
        timer.tick()
        self.assertTrue(timer.is_finished)

        timer.start()
        self.assertEqual("finished", timer.status)
        self.assertFalse(timer.is_running)

    def test_zero_duration_timer_finishes_on_first_tick(self) -> None:
        timer = BasicTimer(0)
        self.assertFalse(timer.is_finished)
        timer.start()
        timer.tick()
        self.assertEqual(0, timer.remaining_secs)
        self.assertTrue(timer.is_finished)

    def test_pause_only_affects_running_timer(self) -> None:
        timer = BasicTimer(10)
        timer.pause()
        self.assertEqual("idle", timer.status)

        timer.start()
        timer.pause()
        timer.pause()
        self.assertEqual("paused", timer.status)

        timer.start()
        self.assertEqual("running", timer.status)

    def test_reset_restores_full_duration_from_any_state(self) -> None:
        timer = BasicTimer(2)
        timer.start()
        timer.tick()
        timer.reset()
        self.assertEqual(2, timer.remaining_secs)
        self.assertEqual("idle", timer.status)

        timer.start()
        timer.tick()
        timer.tick()
        self.assertTrue(timer.is_finished)
        timer.reset()
        self.assertEqual(2, timer.remaining_secs)
        self.assertEqual("idle", timer.status)

    def test_set_duration_discards_running_countdown(self) -> None:
        timer = BasicTimer(300)
        timer.start()
        timer.tick()
        timer.set_duration(600)
        self.assertEqual(600, timer.remaining_secs)
        self.assertEqual(600, timer.duration_secs)
        self.assertEqual("idle", timer.status)

    def test_set_duration_makes_finished_timer_startable(self) -> None:
        timer = BasicTimer(1)
        timer.start()
        timer.tick()
        timer.set_duration(5)
        timer.start()
        self.assertEqual("running", timer.status)

    def test_display_formats(self) -> None:
        self.assertEqual("02:05", BasicTimer(125).display())
        self.assertEqual("1:01:01", BasicTimer(3661).display())
        self.assertEqual("00:00", BasicTimer(0).display())
        self.assertEqual("59:59", BasicTimer(3599).display())
        self.assertEqual("1:00:00", BasicTimer(3600).display())

    def test_tray_title_uses_stopwatch_icon(self) -> None:
        self.assertEqual("⏱ 05:00", BasicTimer(300).tray_title())


if __name__ == "__main__":
    unittest.main()
