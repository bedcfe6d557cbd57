import pytest

from saffron2d.batch import Batch, BatchError, BatchStatus


def run(batch: Batch) -> None:
    batch.execute()
    assert batch.wait(5.0)


def test_jobs_run_in_order_and_finish():
    batch = Batch("loader")
    seen = []
    batch.submit(lambda: seen.append(1), "first")
    batch.submit(lambda: seen.append(2), "second")
    batch.submit(lambda: seen.append(3), "third")
    run(batch)
    assert seen == [1, 2, 3]
    assert batch.status() is BatchStatus.FINISHED
    assert batch.progress() == 100.0
    assert batch.jobs_done() == 3
    assert batch.jobs_left() == 0
    assert batch.job_count() == 3


def test_initial_state():
    batch = Batch("empty")
    assert batch.status() is BatchStatus.PREPARING
    assert batch.job_status() == ""
    assert batch.progress() == 0.0
    assert batch.job_count() == 0


def test_job_status_reports_running_job_then_finalizing():
    batch = Batch("status")
    observed = []
    batch.submit(lambda: observed.append(batch.job_status()), "Loading things")
    run(batch)
    assert observed == ["Loading things"]
    assert batch.job_status() == "Finalizing"


def test_custom_finalizing_status():
    batch = Batch("status")
    batch.submit(lambda: None, "job")
    batch.set_finalizing_status("Preparing frames")
    run(batch)
    assert batch.job_status() == "Preparing frames"


def test_events_are_invoked():
    batch = Batch("events")
    events = []
    batch.on_started.subscribe(lambda: events.append("started"))
    batch.on_finished.subscribe(lambda: events.append("finished"))
    batch.submit(lambda: events.append("job"), "job")
    run(batch)
    assert events == ["started", "job", "finished"]


def test_submit_after_finish_raises():
    batch = Batch("closed")
    batch.submit(lambda: None, "job")
    run(batch)
    with pytest.raises(BatchError):
        batch.submit(lambda: None, "late")


def test_force_exit_from_job_skips_remaining():
    batch = Batch("exit")
    seen = []

    def stop():
        seen.append("stop")
        batch.force_exit()

    batch.submit(stop, "stop")
    batch.submit(lambda: seen.append("never"), "skipped")
    run(batch)
    assert seen == ["stop"]
    assert batch.jobs_done() == 1
    assert batch.jobs_left() == 1
    assert batch.status() is BatchStatus.FINISHED


def test_reset_allows_reuse():
    batch = Batch("reuse")
    batch.submit(lambda: None, "job")
    run(batch)
    batch.reset()
    assert batch.status() is BatchStatus.PREPARING
    assert batch.job_count() == 0
    assert batch.jobs_done() == 0
    assert batch.progress() == 0.0
    seen = []
    batch.submit(lambda: seen.append("again"), "again")
    run(batch)
    assert seen == ["again"]


def test_wait_without_execute_is_immediate():
    assert Batch("idle").wait(0.1) is True