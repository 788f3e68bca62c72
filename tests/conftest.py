# -*- coding: ascii -*-

import pytest

from cwindows import Application, MainLoop, MemoryDriver, RootContainer, \
    Widget

class Recorder(Widget):
    """
    A focusable widget logging the keys it is offered

    The results of the process_* methods are taken from the hot, key and
    cold sets of keys.
    """
    def __init__(self, x=0, y=0, w=1, h=1, log=None, hot=(), key=(),
                 cold=()):
        Widget.__init__(self, x, y, w, h, can_focus=True)
        self.log = [] if log is None else log
        self.hot, self.key, self.cold = set(hot), set(key), set(cold)
        self.mouse = []
    def process_hot_key(self, key):
        self.log.append(('hot', self, key))
        return key in self.hot
    def process_key(self, key):
        self.log.append(('key', self, key))
        return key in self.key
    def process_cold_key(self, key):
        self.log.append(('cold', self, key))
        return key in self.cold
    def process_mouse(self, event):
        self.mouse.append(event)

@pytest.fixture
def driver():
    return MemoryDriver(24, 80)

@pytest.fixture
def root(driver):
    return RootContainer(None, driver, 24, 80)

@pytest.fixture
def loop():
    loop = MainLoop()
    yield loop
    loop.close()

@pytest.fixture
def app(driver, loop):
    app = Application(driver, loop, resize_poll=0, alt_timeout=0)
    yield app
    app.shutdown()
