# -*- coding: ascii -*-

import os
import datetime

import pytest

from cwindows.mainloop import MainLoop

class FakeClock:
    def __init__(self):
        self.now = 0.0
    def __call__(self):
        return self.now

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def fake_loop(clock):
    loop = MainLoop(clock)
    yield loop
    loop.close()

def test_timeouts_fire_in_registration_order(fake_loop, clock):
    fired = []
    fake_loop.add_timeout(1, lambda l: fired.append('a'))
    fake_loop.add_timeout(1, lambda l: fired.append('b'))
    fake_loop.add_timeout(2, lambda l: fired.append('c'))
    fake_loop.run_iteration(False)
    assert fired == []
    clock.now = 1
    fake_loop.run_iteration(False)
    assert fired == ['a', 'b']
    clock.now = 5
    fake_loop.run_iteration(False)
    assert fired == ['a', 'b', 'c']

def test_repeating_timeout(fake_loop, clock):
    fired = []
    def tick(loop):
        fired.append(clock.now)
        return len(fired) < 3
    fake_loop.add_timeout(datetime.timedelta(seconds=2), tick)
    for now in range(1, 10):
        clock.now = now
        fake_loop.run_iteration(False)
    assert fired == [2, 4, 6]

def test_remove_timeout(fake_loop, clock):
    fired = []
    token = fake_loop.add_timeout(1, lambda l: fired.append(1))
    fake_loop.remove_timeout(token)
    clock.now = 2
    fake_loop.run_iteration(False)
    assert fired == []

def test_zero_span_repeating_timeout_fires_once_per_iteration(fake_loop):
    fired = []
    def tick(loop):
        fired.append(1)
        return True
    fake_loop.add_timeout(0, tick)
    fake_loop.run_iteration(False)
    assert len(fired) == 1
    fake_loop.run_iteration(False)
    assert len(fired) == 2

def test_idle_handlers(fake_loop):
    calls = []
    def idle():
        calls.append(1)
        return len(calls) < 2
    fake_loop.add_idle(idle)
    for i in range(4):
        fake_loop.run_iteration(False)
    assert calls == [1, 1]

def test_watch(fake_loop):
    rd, wr = os.pipe()
    try:
        seen = []
        def readable(loop):
            seen.append(os.read(rd, 10))
            return len(seen) < 2
        fake_loop.add_watch(rd, readable)
        with pytest.raises(ValueError):
            fake_loop.add_watch(rd, readable)
        fake_loop.run_iteration(False)
        assert seen == []
        os.write(wr, b'x')
        fake_loop.run_iteration(False)
        assert seen == [b'x']
        os.write(wr, b'y')
        fake_loop.run_iteration(False)
        os.write(wr, b'z')
        fake_loop.run_iteration(False)
        assert seen == [b'x', b'y']
    finally:
        os.close(rd)
        os.close(wr)

def test_watches_run_before_timeouts(fake_loop, clock):
    rd, wr = os.pipe()
    try:
        order = []
        def readable(loop):
            os.read(rd, 10)
            order.append('watch')
            return True
        fake_loop.add_watch(rd, readable)
        fake_loop.add_timeout(0, lambda l: order.append('timeout'))
        fake_loop.add_idle(lambda: order.append('idle'))
        os.write(wr, b'x')
        fake_loop.run_iteration(False)
        assert order == ['watch', 'timeout', 'idle']
    finally:
        os.close(rd)
        os.close(wr)

def test_stop_ends_run(fake_loop):
    counter = []
    def idle():
        counter.append(1)
        if len(counter) == 3:
            fake_loop.stop()
        return True
    fake_loop.add_idle(idle)
    fake_loop.run()
    assert len(counter) == 3
    assert not fake_loop.running

def test_wakeup_interrupts_wait(loop):
    loop.wakeup()
    # Would block forever without the wakeup.
    loop.run_iteration(True)
    assert not loop.events_pending()

def test_nested_iteration(fake_loop, clock):
    order = []
    def outer(loop):
        order.append('outer')
        loop.run_iteration(False)
        return False
    fake_loop.add_timeout(0, outer)
    fake_loop.add_timeout(0, lambda l: order.append('inner'))
    fake_loop.run_iteration(False)
    assert order == ['outer', 'inner']
