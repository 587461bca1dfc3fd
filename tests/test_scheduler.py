import threading


def test_timer_fires_at_deadline(scheduler, clock):
    fired = []
    scheduler.call_later(500, lambda: fired.append("a"))
    clock.advance(499)
    scheduler.tick()
    assert fired == []
    scheduler.tick(current=0.5)
    assert fired == ["a"]
    clock.advance(100)
    scheduler.tick()
    assert fired == ["a"]


def test_timers_fire_in_deadline_order(scheduler):
    fired = []
    scheduler.call_later(300, lambda: fired.append("late"))
    scheduler.call_later(100, lambda: fired.append("early"))
    scheduler.tick(current=1.0)
    assert fired == ["early", "late"]


def test_cancelled_timer_never_fires(scheduler):
    fired = []
    handle = scheduler.call_later(10, lambda: fired.append(1))
    assert scheduler.pending_timers == 1
    handle.cancel()
    handle.cancel()
    assert not handle.active
    assert scheduler.pending_timers == 0
    scheduler.tick(current=1.0)
    assert fired == []


def test_frame_callbacks_run_once(scheduler):
    calls = []
    scheduler.request_frame(lambda: calls.append(1))
    scheduler.tick()
    scheduler.tick()
    assert calls == [1]


def test_tick_order(scheduler):
    order = []
    scheduler.call_later(0, lambda: order.append("timer"))
    scheduler.request_frame(lambda: order.append("frame"))
    scheduler.post(order.append, "ui")
    scheduler.tick()
    assert order == ["ui", "frame", "timer"]


def test_post_from_worker_thread(scheduler):
    results = []
    worker = threading.Thread(target=scheduler.post, args=(results.append, 42))
    worker.start()
    worker.join()
    assert results == []
    scheduler.tick()
    assert results == [42]


def test_callback_errors_are_logged_and_isolated(scheduler, capsys):
    calls = []

    def boom():
        raise RuntimeError("boom")

    scheduler.request_frame(boom)
    scheduler.request_frame(lambda: calls.append("after"))
    scheduler.call_later(0, boom)
    scheduler.tick()

    assert calls == ["after"]
    out = capsys.readouterr().out
    assert "[SCHED][FRAME][ERR] RuntimeError('boom')" in out
    assert "[SCHED][TIMER][ERR]" in out


def test_clear_drops_everything(scheduler):
    calls = []
    handle = scheduler.call_later(0, lambda: calls.append("timer"))
    scheduler.request_frame(lambda: calls.append("frame"))
    scheduler.clear()
    scheduler.tick(current=10.0)
    assert calls == []
    assert not handle.active
