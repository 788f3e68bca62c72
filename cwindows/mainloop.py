# -*- coding: ascii -*-

"""
A readiness-based event loop

MainLoop multiplexes file descriptor readiness watches, timeouts and idle
handlers on a single thread. The application registers the terminal's
input descriptor with it; programs add their own timeouts (for example, to
update status displays periodically) and watches alongside.

All callbacks run on the thread that iterates the loop, and may run a
nested iteration themselves (which is how modal dialogs opened from a
key handler receive input).
"""

import os as _os
import time as _time
import heapq as _heapq
import errno as _errno
import itertools as _itertools
import selectors as _selectors

READ = _selectors.EVENT_READ
WRITE = _selectors.EVENT_WRITE

class Watch:
    """
    A registered readiness watch

    Returned by MainLoop.add_watch() and accepted by remove_watch().
    """
    def __init__(self, fd, condition, callback):
        "Initializer"
        self.fd = fd
        self.condition = condition
        self.callback = callback
        self.removed = False
    def __repr__(self):
        return '<Watch fd=%r>' % (self.fd,)

class Timeout:
    """
    A registered timeout

    Returned by MainLoop.add_timeout() and accepted by remove_timeout().
    """
    def __init__(self, period, callback):
        "Initializer"
        self.period = period
        self.callback = callback
        self.removed = False
    def __repr__(self):
        return '<Timeout period=%r>' % (self.period,)

def _seconds(span):
    "Convert a number of seconds or a timedelta into seconds"
    if hasattr(span, 'total_seconds'):
        return span.total_seconds()
    return float(span)

class MainLoop:
    """
    The event scheduler

    Attributes:
    clock  : A nullary function returning the current (monotonic) time
             in seconds. Replaceable for testing.
    running: Whether run() should continue iterating.
    """
    def __init__(self, clock=None):
        "Initializer"
        self.clock = clock or _time.monotonic
        self.running = False
        self._selector = _selectors.DefaultSelector()
        self._timeouts = []
        self._idle = []
        self._counter = _itertools.count()
        self._wakeup = _os.pipe()
        for fd in self._wakeup:
            _os.set_blocking(fd, False)
        self._selector.register(self._wakeup[0], READ, None)
    def close(self):
        "Release the resources held by the loop"
        if self._wakeup is None: return
        self._selector.unregister(self._wakeup[0])
        for fd in self._wakeup:
            _os.close(fd)
        self._wakeup = None
        self._selector.close()
    def add_watch(self, fd, callback, condition=READ):
        """
        Invoke callback whenever fd is ready

        callback is called with the loop as the only argument, and returns
        whether to keep watching. Only one watch per descriptor is
        allowed. Returns a token for remove_watch().
        """
        watch = Watch(fd, condition, callback)
        try:
            self._selector.register(fd, condition, watch)
        except KeyError:
            raise ValueError('fd %r is already watched' % (fd,))
        return watch
    def remove_watch(self, watch):
        "Stop watching the descriptor of the given watch"
        if watch.removed: return
        watch.removed = True
        self._selector.unregister(watch.fd)
    def add_timeout(self, span, callback):
        """
        Invoke callback after span has elapsed

        span is a number of seconds or a timedelta. callback is called with
        the loop as the only argument; if it returns true, it is scheduled
        again after the same span. Timeouts falling due at the same time
        fire in the order of registration. Returns a token for
        remove_timeout().
        """
        timeout = Timeout(_seconds(span), callback)
        self._schedule(timeout, self.clock())
        return timeout
    def remove_timeout(self, timeout):
        "Cancel the given timeout"
        timeout.removed = True
    def _schedule(self, timeout, now):
        "Internal helper for adding a timeout to the queue"
        _heapq.heappush(self._timeouts,
            (now + timeout.period, next(self._counter), timeout))
    def add_idle(self, callback):
        """
        Invoke callback on every iteration

        callback takes no arguments and returns whether to keep it
        installed. Returns callback for remove_idle().
        """
        self._idle.append(callback)
        return callback
    def remove_idle(self, callback):
        "Uninstall the given idle handler"
        try:
            self._idle.remove(callback)
        except ValueError:
            pass
    def wakeup(self):
        """
        Interrupt a blocking wait

        May be called from any callback (or a signal handler); the current
        or next wait returns immediately.
        """
        if self._wakeup is None: return
        try:
            _os.write(self._wakeup[1], b'\0')
        except OSError as exc:
            if exc.errno != _errno.EAGAIN: raise
    def stop(self):
        "Make run() return after the current iteration"
        self.running = False
        self.wakeup()
    def _wait_time(self, wait):
        "Compute how long select() may block"
        if not wait or self._idle:
            return 0
        while self._timeouts and self._timeouts[0][2].removed:
            _heapq.heappop(self._timeouts)
        if not self._timeouts:
            return None
        return max(0, self._timeouts[0][0] - self.clock())
    def events_pending(self, wait=False):
        """
        Return whether run_iteration() would have anything to do

        If wait is true, block until that is the case.
        """
        ready = self._selector.select(self._wait_time(wait))
        if any(key.data is not None for key, mask in ready):
            return True
        if self._idle:
            return True
        return bool(self._timeouts and
                    self._timeouts[0][0] <= self.clock())
    def run_iteration(self, wait=True):
        """
        Process one batch of events

        If wait is true, block until at least one watch is ready, a
        timeout falls due, or wakeup() is called; otherwise, only process
        what is ready right now. Ready watches are dispatched first, then
        due timeouts, then idle handlers.
        """
        for key, mask in self._selector.select(self._wait_time(wait)):
            watch = key.data
            if watch is None:
                self._drain_wakeup()
                continue
            if watch.removed:
                continue
            if not watch.callback(self):
                self.remove_watch(watch)
        self._run_timeouts()
        self._run_idle()
    def _drain_wakeup(self):
        "Internal helper for resetting the wakeup pipe"
        try:
            while _os.read(self._wakeup[0], 512):
                pass
        except BlockingIOError:
            pass
    def _run_timeouts(self):
        """
        Fire all due timeouts

        Repeating timeouts are rescheduled after the whole batch, so that
        each fires at most once per iteration.
        """
        now = self.clock()
        again = []
        while self._timeouts and self._timeouts[0][0] <= now:
            timeout = _heapq.heappop(self._timeouts)[2]
            if timeout.removed:
                continue
            if timeout.callback(self):
                again.append(timeout)
            else:
                timeout.removed = True
        for timeout in again:
            if not timeout.removed:
                self._schedule(timeout, now)
    def _run_idle(self):
        "Run the idle handlers"
        for callback in self._idle[:]:
            if not callback():
                self.remove_idle(callback)
    def run(self):
        "Iterate until stop() is called"
        self.running = True
        while self.running:
            self.run_iteration()
