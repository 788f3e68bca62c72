# -*- coding: ascii -*-

"""
The application: terminal session, top-level stack, and input dispatch

An Application owns a terminal driver and an event loop. Containers are
run on it as top-level (modal) containers: each one is pushed onto a
stack, receives all input while it is on top, and is popped when its
running flag goes false. The terminal is taken over when the first
container is pushed and restored when the last one is popped.

Example:
    app = Application()
    win = Frame(0, 0, 40, 10, 'Hello')
    win.add(Button(2, 2, 'Quit', callback=lambda b: app.stop()))
    app.run(win)
"""

import logging as _logging
import curses as _curses

from . import keys as _keys
from .core import ColorScheme, RootContainer, Handlers, FILL_HORIZONTAL, \
    FILL_VERTICAL
from .driver import CursesDriver, translate
from .mainloop import MainLoop
from .frames import Dialog
from .widgets import Label, Button

_log = _logging.getLogger(__name__)

def make_palette(driver, use_color):
    """
    Build the color schemes of an application

    Returns a dictionary mapping scheme names ('base', 'dialog', 'error',
    'menu') to ColorScheme-s. If use_color is false, only monochrome
    attributes are used.
    """
    if use_color:
        pairs = {}
        def color(fg, bg):
            if (fg, bg) not in pairs:
                pairs[fg, bg] = driver.make_color(fg, bg)
            return pairs[fg, bg]
        base = ColorScheme(color(_curses.COLOR_WHITE, _curses.COLOR_BLUE),
            color(_curses.COLOR_BLACK, _curses.COLOR_CYAN),
            _curses.A_BOLD | color(_curses.COLOR_YELLOW, _curses.COLOR_BLUE),
            _curses.A_BOLD | color(_curses.COLOR_YELLOW, _curses.COLOR_CYAN))
        dialog = ColorScheme(color(_curses.COLOR_BLACK, _curses.COLOR_WHITE),
            color(_curses.COLOR_BLACK, _curses.COLOR_CYAN),
            color(_curses.COLOR_BLUE, _curses.COLOR_WHITE),
            color(_curses.COLOR_BLUE, _curses.COLOR_CYAN))
        menu = ColorScheme(color(_curses.COLOR_BLACK, _curses.COLOR_CYAN),
            color(_curses.COLOR_WHITE, _curses.COLOR_BLACK),
            _curses.A_BOLD | color(_curses.COLOR_YELLOW, _curses.COLOR_CYAN),
            _curses.A_BOLD | color(_curses.COLOR_YELLOW, _curses.COLOR_BLACK))
        error = _curses.A_BOLD | color(_curses.COLOR_WHITE, _curses.COLOR_RED)
    else:
        base = ColorScheme(_curses.A_NORMAL, _curses.A_REVERSE,
                           _curses.A_BOLD, _curses.A_REVERSE | _curses.A_BOLD)
        dialog = ColorScheme(_curses.A_REVERSE, _curses.A_NORMAL,
                             _curses.A_BOLD, _curses.A_NORMAL)
        menu = ColorScheme(_curses.A_REVERSE, _curses.A_NORMAL,
                           _curses.A_REVERSE | _curses.A_BOLD, _curses.A_BOLD)
        error = _curses.A_BOLD
    return {'base': base, 'dialog': dialog, 'menu': menu,
            'error': ColorScheme(error, error, dialog.hot_normal, error)}

class RunState:
    """
    The handle of a container pushed by Application.begin()

    Usable as a context manager; leaving the context ends the container's
    run (at most once).

    Attributes:
    app      : The Application.
    container: The container.
    parent   : The container's container before it was pushed.
    ended    : Whether Application.end() has been called on this.
    """
    def __init__(self, app, container, parent):
        "Initializer"
        self.app = app
        self.container = container
        self.parent = parent
        self.ended = False
    def __enter__(self):
        return self
    def __exit__(self, *exc_info):
        self.dispose()
    def dispose(self):
        "End the run of the container"
        self.app.end(self)

class Application:
    """
    A terminal UI session

    Attributes:
    driver     : The terminal Driver.
    mainloop   : The MainLoop the input is read by.
    root       : The RootContainer representing the screen.
    palette    : The color schemes (see make_palette()); built when the
                 terminal is taken over.
    toplevels  : The stack of running containers (the last is on top).
    iteration  : Handlers invoked (without arguments) after every event
                 loop iteration of run_loop().
    active     : Whether the terminal is currently taken over.
    alt_timeout: How long (in seconds) to wait for a key following Escape
                 before taking the Escape on its own.
    """
    def __init__(self, driver=None, mainloop=None, **kwds):
        """
        Initializer

        driver defaults to a new CursesDriver, and mainloop to a new
        MainLoop. Additional keyword arguments are:
        disable_color: Use monochrome attributes even if the terminal
                       supports colors (default False).
        alt_timeout  : The alt_timeout attribute (default 0.05).
        resize_poll  : The interval (in seconds) at which the terminal size
                       is checked while idle (default 0.25); zero or None
                       disables the polling.
        """
        self.driver = driver or CursesDriver()
        self.mainloop = mainloop or MainLoop()
        self.disable_color = kwds.get('disable_color', False)
        self.alt_timeout = kwds.get('alt_timeout', 0.05)
        self.resize_poll = kwds.get('resize_poll', 0.25)
        self.root = RootContainer(self, self.driver)
        self.palette = {}
        self.toplevels = []
        self.iteration = Handlers()
        self.active = False
        self._dims = None
        self._watch = None
        self._poll = None
    @property
    def lines(self):
        "The height of the screen"
        return self.root.h
    @property
    def cols(self):
        "The width of the screen"
        return self.root.w
    @property
    def top(self):
        "The topmost running container, or None"
        return self.toplevels[-1] if self.toplevels else None
    def init(self):
        """
        Take over the terminal

        Done implicitly by begin(); does nothing if already done. Raises
        TerminalError if the terminal cannot be set up.
        """
        if self.active: return
        self.driver.init()
        self.active = True
        self.palette = make_palette(self.driver, not self.disable_color and
                                    self.driver.has_colors())
        self._dims = self.driver.get_dims()
        self.root.resize(*self._dims)
        self.driver.set_timeout(0)
        self._watch = self.mainloop.add_watch(self.driver.fileno(),
                                              self._on_input)
        if self.resize_poll:
            self._poll = self.mainloop.add_timeout(self.resize_poll,
                                                   self._on_poll)
        _log.debug('Session started (%sx%s)', self.cols, self.lines)
    def shutdown(self):
        "Restore the terminal"
        if not self.active: return
        self.active = False
        self.mainloop.remove_watch(self._watch)
        if self._poll is not None:
            self.mainloop.remove_timeout(self._poll)
        self._watch = self._poll = None
        self.driver.shutdown()
        _log.debug('Session ended')
    def _fit(self, container):
        "Apply the fill flags of a top-level container"
        if container.fill & FILL_HORIZONTAL:
            container.w = max(0, self.root.w - container.x)
        if container.fill & FILL_VERTICAL:
            container.h = max(0, self.root.h - container.y)
    def begin(self, container):
        """
        Push container onto the stack of top-level containers

        The container is laid out, focused, and drawn. Returns a RunState
        to pass to run_loop() and end() (or to use as a context manager).
        """
        self.init()
        state = RunState(self, container, container.container)
        container.container = self.root
        self.toplevels.append(container)
        container.running = True
        _log.debug('Begin %r (depth %s)', container, len(self.toplevels))
        try:
            container.prepare()
            self._fit(container)
            container.size_changed()
            container.focus_first()
            container.redraw()
            container.position_cursor()
            self.driver.refresh()
        except BaseException:
            self.end(state)
            raise
        if len(self.toplevels) > 1:
            # Keys buffered before container was pushed.
            self.mainloop.add_timeout(0, self._resume_input)
        return state
    def run_loop(self, state, wait=True):
        """
        Process events until the container of state stops running

        If wait is false, a single batch of ready events is processed
        without blocking. Returns whether the container is still running.
        """
        container = state.container
        while container.running:
            self.mainloop.run_iteration(wait)
            self.iteration()
            if not wait: break
        return container.running
    def end(self, state):
        """
        Pop the container of state from the stack

        The remaining containers are redrawn; if none remain, the terminal
        is restored. Ending the same state again does nothing; ending a
        container that is not on the stack raises ValueError.
        """
        if state.ended: return
        container = state.container
        if container not in self.toplevels:
            raise ValueError('%r is not running' % (container,))
        state.ended = True
        self.toplevels.remove(container)
        container.running = False
        container.container = state.parent
        _log.debug('End %r (depth %s)', container, len(self.toplevels))
        if self.toplevels:
            self.refresh()
            # Keys typed ahead while container was closing.
            self.mainloop.add_timeout(0, self._resume_input)
        else:
            self.shutdown()
    def run(self, container):
        "Run container as a modal top-level container until it stops"
        with self.begin(container) as state:
            self.run_loop(state)
    def stop(self):
        "Stop the topmost container"
        if self.toplevels:
            self.toplevels[-1].running = False
        self.mainloop.wakeup()
    def refresh(self):
        "Redraw the whole screen"
        self.root.redraw()
        for c in self.toplevels:
            c.redraw()
        if self.toplevels:
            self.toplevels[-1].position_cursor()
        self.driver.refresh()
    def add_timeout(self, span, callback):
        "Schedule callback on the event loop; see MainLoop.add_timeout()"
        return self.mainloop.add_timeout(span, callback)
    def add_idle(self, callback):
        "Install an idle handler; see MainLoop.add_idle()"
        return self.mainloop.add_idle(callback)
    def _on_input(self, loop):
        "Readiness callback of the terminal"
        self.process_input()
        return True
    def _on_poll(self, loop):
        "Periodic resize check"
        if self.toplevels:
            self.check_resize()
        return True
    def _resume_input(self, loop):
        if self.active and self.toplevels:
            self.process_input()
        return False
    def check_resize(self):
        """
        Re-layout and redraw everything if the screen size changed

        Returns whether it did.
        """
        changed = self.driver.check_resize()
        dims = self.driver.get_dims()
        if not changed and dims == self._dims:
            return False
        self._dims = dims
        self.root.resize(*dims)
        _log.debug('Screen resized to %sx%s', self.cols, self.lines)
        for c in self.toplevels:
            self._fit(c)
            c.size_changed()
        self.refresh()
        return True
    def process_input(self):
        """
        Read and dispatch the pending keys

        Stops early when the topmost container stops running, so that the
        remaining keys arrive at whatever is on top afterwards.
        """
        while self.toplevels:
            top = self.toplevels[-1]
            ch = self.driver.getch()
            if ch == -1:
                self.check_resize()
                break
            elif ch == _curses.KEY_RESIZE:
                self.check_resize()
                continue
            self.process_char(ch)
            if not top.running:
                break
    def process_char(self, ch):
        """
        Dispatch a key as read from the driver

        Mouse events are decoded and delivered to the topmost container,
        and resizes are applied. An Escape immediately followed by an
        ordinary key is combined into an Alt chord; everything else goes to
        process_key().
        """
        if ch == _keys.KEY_ESC:
            self.driver.set_timeout(int(self.alt_timeout * 1000))
            k = self.driver.getch()
            self.driver.set_timeout(0)
            if k in (_curses.KEY_MOUSE, _curses.KEY_RESIZE):
                # Not an Alt chord; take the Escape on its own.
                self.process_key(ch)
                ch = k
            elif k != -1:
                ch = _keys.alt(k)
        if ch == _curses.KEY_RESIZE:
            self.check_resize()
        elif ch == _curses.KEY_MOUSE:
            event = self.driver.getmouse()
            if event is not None and self.toplevels:
                top = self.toplevels[-1]
                top.process_mouse(translate(event, top.x, top.y))
        else:
            self.process_key(ch)
        if self.toplevels and self.active:
            self.toplevels[-1].position_cursor()
            self.driver.refresh()
    def process_key(self, ch):
        """
        Dispatch a key to the topmost container

        The key is offered as a hot key, then to the focused widget, then
        as a cold key. If nobody wants it, Ctrl-C stops the container,
        Ctrl-Z suspends the program, Tab (and Down/Right) move the focus
        forwards, and Shift-Tab (and Up/Left) backwards. Returns whether
        the key was used.
        """
        top = self.toplevels[-1]
        if top.process_hot_key(ch):
            return True
        if top.process_key(ch):
            return True
        if top.process_cold_key(ch):
            return True
        if ch == _keys.CTRL_C:
            self.stop()
        elif ch == _keys.CTRL_Z:
            self.driver.suspend()
            self.driver.redraw_window()
            self.refresh()
        elif ch in (_keys.KEY_TAB, _curses.KEY_DOWN, _curses.KEY_RIGHT):
            if not top.focus_next():
                top.focus_next()
            self.driver.refresh()
        elif ch in (_curses.KEY_BTAB, _curses.KEY_UP, _curses.KEY_LEFT):
            if not top.focus_prev():
                top.focus_prev()
            self.driver.refresh()
        else:
            return False
        return True
    def msg(self, error, caption, text):
        """
        Show a message box and wait until it is dismissed

        text may span multiple lines. If error is true, the box uses the
        "error" color scheme.
        """
        lines = text.split('\n')
        width = max(len(caption) + 8, max(len(l) for l in lines) + 8)
        d = Dialog(width, len(lines) + 7, caption,
                   scheme='error' if error else 'dialog')
        for i, l in enumerate(lines):
            d.add(Label(1, i + 1, l))
        def dismiss(button):
            d.running = False
        d.add_button(Button(0, 0, 'Ok', True, callback=dismiss))
        self.run(d)
    def error(self, caption, text, *args):
        "Show an error message; text is %-formatted with args, if any"
        if args: text = text % args
        self.msg(True, caption, text)
    def info(self, caption, text, *args):
        "Show an informational message; text is %-formatted with args"
        if args: text = text % args
        self.msg(False, caption, text)
