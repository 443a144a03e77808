from waveviewer.application.poller import PositionPoller


class _Flag:
    def __init__(self, values):
        self.values = list(values)

    def __call__(self):
        return self.values.pop(0) if self.values else False


def test_start_refreshes_and_schedules_next_tick(scheduler, logger):
    refreshes = []
    poller = PositionPoller(scheduler, lambda: refreshes.append(1), lambda: True, interval_ms=17, logger=logger)

    assert poller.start() is True

    assert refreshes == [1]
    assert scheduler.jobs[0][1] == 17
    assert poller.running is True


def test_start_twice_does_not_double_schedule(scheduler):
    poller = PositionPoller(scheduler, lambda: None, lambda: True)
    poller.start()

    assert poller.start() is False
    assert scheduler.pending == 1


def test_inactive_tick_refreshes_once_and_stops(scheduler, logger):
    refreshes = []
    poller = PositionPoller(scheduler, lambda: refreshes.append(1), _Flag([True, True, False]), logger=logger)

    poller.start()
    scheduler.run_all()

    assert len(refreshes) == 3
    assert poller.running is False
    assert scheduler.pending == 0
    assert logger.infos == ["Stopped updating timestamp and waveform index"]


def test_cancel_removes_pending_tick(scheduler):
    poller = PositionPoller(scheduler, lambda: None, lambda: True)
    poller.start()
    job = scheduler.jobs[0][0]

    poller.cancel()

    assert scheduler.cancelled == [job]
    assert scheduler.pending == 0
    assert poller.running is False


def test_cancel_failure_is_logged(scheduler, logger):
    def _fail(_job):
        raise RuntimeError("gone")

    poller = PositionPoller(scheduler, lambda: None, lambda: True, logger=logger)
    poller.start()
    scheduler.after_cancel = _fail

    poller.cancel()

    assert logger.exceptions == ["Failed to cancel position poll"]
    assert poller.running is False


def test_interval_is_at_least_one_millisecond(scheduler):
    poller = PositionPoller(scheduler, lambda: None, lambda: True, interval_ms=0)
    poller.start()
    assert scheduler.jobs[0][1] == 1
