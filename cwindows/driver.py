# -*- coding: ascii -*-

"""
Terminal drivers

A driver is the capability the toolkit draws through and reads input
from. The Driver class documents the interface; CursesDriver implements it
on top of the curses module, MemoryDriver keeps an in-memory screen (for
testing and headless use), and NullDriver discards everything (it backs
widgets that are not attached to any application yet).
"""

import os as _os
import sys as _sys
import errno as _errno
import signal as _signal
import shutil as _shutil
import logging as _logging
import collections as _collections
import curses as _curses

_log = _logging.getLogger(__name__)

class TerminalError(Exception):
    "The terminal could not be set up for the UI"

MouseEvent = _collections.namedtuple('MouseEvent', 'x y buttons')
MouseEvent.__doc__ = """
A mouse event

x and y are relative to whatever receives the event (screen coordinates
when decoded by a driver); buttons is a mask of curses.BUTTON* flags.
"""

def translate(event, dx, dy):
    "Return event with its coordinates decreased by dx/dy"
    return event._replace(x=event.x - dx, y=event.y - dy)

BUTTON_CLICKS = (_curses.BUTTON1_CLICKED | _curses.BUTTON1_PRESSED |
                 _curses.BUTTON1_RELEASED)

class Driver:
    """
    The terminal capability consumed by the toolkit

    All coordinates are (line, column) pairs in screen space. Attributes
    are opaque integers as handed out by make_color() (or plain curses
    attributes).

    Attributes:
    acs: A mapping from box-drawing part names ('ulcorner', 'urcorner',
         'llcorner', 'lrcorner', 'hline', 'vline') to characters that
         addch() accepts. Valid after init().
    """
    def __init__(self):
        "Initializer"
        self.acs = {'ulcorner': '+', 'urcorner': '+', 'llcorner': '+',
                    'lrcorner': '+', 'hline': '-', 'vline': '|'}
    def init(self):
        """
        Take over the terminal

        Raises TerminalError if that is not possible.
        """
        raise NotImplementedError
    def shutdown(self):
        "Restore the terminal to its original state"
        raise NotImplementedError
    def get_dims(self):
        "Return the current (lines, columns) of the screen"
        raise NotImplementedError
    def check_resize(self):
        """
        Synchronize with the terminal's actual size

        Returns whether the size changed since the last check.
        """
        return False
    def has_colors(self):
        "Return whether colors may be used"
        return False
    def make_color(self, fg, bg):
        "Allocate a color pair and return an attribute selecting it"
        raise NotImplementedError
    def set_timeout(self, ms):
        """
        Set how long getch() blocks

        A negative value blocks indefinitely, zero does not block at all.
        """
        raise NotImplementedError
    def getch(self):
        """
        Read one key

        Returns -1 if no input is available within the timeout,
        curses.KEY_RESIZE if the terminal was resized, or
        curses.KEY_MOUSE if a mouse event is ready for getmouse().
        """
        raise NotImplementedError
    def getmouse(self):
        "Return the pending mouse event as a MouseEvent, or None"
        raise NotImplementedError
    def move(self, line, col):
        "Move the output position (and the visible cursor)"
        raise NotImplementedError
    def addch(self, ch):
        "Output a single character at the output position"
        raise NotImplementedError
    def addstr(self, text):
        "Output a string at the output position"
        raise NotImplementedError
    def attrset(self, attr):
        "Set the attribute used for subsequent output"
        raise NotImplementedError
    def refresh(self):
        "Make all output so far visible"
        raise NotImplementedError
    def redraw_window(self):
        "Force a full repaint of the screen on the next refresh()"
        raise NotImplementedError
    def suspend(self):
        "Suspend the process (as Ctrl-Z would outside raw mode)"
        raise NotImplementedError
    def fileno(self):
        "Return the file descriptor that becomes readable on input"
        raise NotImplementedError

class NullDriver(Driver):
    """
    A driver that discards all output and never has input

    Widgets that are not attached to an application draw to this.
    """
    def init(self):
        pass
    def shutdown(self):
        pass
    def get_dims(self):
        return (24, 80)
    def make_color(self, fg, bg):
        return 0
    def set_timeout(self, ms):
        pass
    def getch(self):
        return -1
    def getmouse(self):
        return None
    def move(self, line, col):
        pass
    def addch(self, ch):
        pass
    def addstr(self, text):
        pass
    def attrset(self, attr):
        pass
    def refresh(self):
        pass
    def redraw_window(self):
        pass
    def suspend(self):
        pass
    def fileno(self):
        return -1

class CursesDriver(Driver):
    """
    A driver for a real terminal, using curses

    The terminal is put into raw mode (so that Ctrl-C and Ctrl-Z arrive as
    keys), echo is disabled, special keys are decoded, and mouse reporting
    is enabled.

    Attributes:
    window: The curses standard screen, once initialized.
    """
    def __init__(self):
        "Initializer"
        Driver.__init__(self)
        self.window = None
        self._last_pair = 0
        self._size = None
    def init(self):
        "Take over the terminal"
        if not _sys.stdin.isatty():
            raise TerminalError('standard input is not a terminal')
        try:
            self.window = _curses.initscr()
        except _curses.error as exc:
            raise TerminalError('cannot initialize curses: %s' % (exc,))
        try:
            _curses.raw()
            _curses.noecho()
            self.window.keypad(True)
            if _curses.has_colors():
                _curses.start_color()
            _curses.mousemask(_curses.ALL_MOUSE_EVENTS)
        except _curses.error as exc:
            _curses.endwin()
            raise TerminalError('cannot configure terminal: %s' % (exc,))
        self.acs = {'ulcorner': _curses.ACS_ULCORNER,
                    'urcorner': _curses.ACS_URCORNER,
                    'llcorner': _curses.ACS_LLCORNER,
                    'lrcorner': _curses.ACS_LRCORNER,
                    'hline': _curses.ACS_HLINE,
                    'vline': _curses.ACS_VLINE}
        self._size = self.get_dims()
        _log.debug('curses initialized, screen is %sx%s', self._size[1],
                   self._size[0])
    def shutdown(self):
        "Restore the terminal"
        if self.window is None: return
        self.window.keypad(False)
        _curses.noraw()
        _curses.echo()
        _curses.endwin()
        self.window = None
        _log.debug('curses shut down')
    def get_dims(self):
        "Return the screen size"
        return self.window.getmaxyx()
    def check_resize(self):
        """
        Synchronize curses with the terminal size

        curses only notices resizes when it delivers KEY_RESIZE; this
        queries the terminal directly so that a resize is also picked up
        while no keys arrive.
        """
        size = _shutil.get_terminal_size()
        if _curses.is_term_resized(size.lines, size.columns):
            _curses.resizeterm(size.lines, size.columns)
        dims = self.get_dims()
        changed = (dims != self._size)
        self._size = dims
        return changed
    def has_colors(self):
        "Return whether the terminal supports colors"
        return _curses.has_colors()
    def make_color(self, fg, bg):
        "Allocate a new color pair"
        self._last_pair += 1
        _curses.init_pair(self._last_pair, fg, bg)
        return _curses.color_pair(self._last_pair)
    def set_timeout(self, ms):
        "Set the blocking timeout of getch()"
        self.window.timeout(ms)
    def getch(self):
        "Read a key"
        return self.window.getch()
    def getmouse(self):
        "Decode the pending mouse event"
        try:
            _id, x, y, _z, bstate = _curses.getmouse()
        except _curses.error:
            return None
        return MouseEvent(x, y, bstate)
    def move(self, line, col):
        "Move the output position"
        try:
            self.window.move(line, col)
        except _curses.error:
            pass
    def addch(self, ch):
        "Output a character"
        # Writing to the bottom-right cell moves the cursor off-screen,
        # which curses reports as an error after having drawn the cell.
        try:
            self.window.addch(ch)
        except _curses.error:
            pass
    def addstr(self, text):
        "Output a string"
        try:
            self.window.addstr(text)
        except _curses.error:
            pass
    def attrset(self, attr):
        "Set the output attribute"
        self.window.attrset(attr)
    def refresh(self):
        "Update the physical screen"
        self.window.refresh()
    def redraw_window(self):
        "Force a full repaint"
        self.window.redrawwin()
    def suspend(self):
        "Stop the process group, as the terminal would for Ctrl-Z"
        _log.debug('suspending')
        _os.killpg(0, _signal.SIGTSTP)
    def fileno(self):
        "Return the input file descriptor"
        return _sys.stdin.fileno()

class MemoryDriver(Driver):
    """
    A driver rendering into memory and reading scripted input

    Output ends up in a character grid (and a parallel attribute grid)
    that can be inspected via text() and attr_at(). Input is queued via
    feed() and feed_mouse(); a pipe is kept readable while input is queued
    so that the driver can be watched by a MainLoop like a terminal.

    Attributes:
    lines, cols: The screen size.
    cursor     : The current output position as a (line, col) pair.
    attr       : The current output attribute.
    timeout    : The last value passed to set_timeout().
    refreshes  : How often refresh() has been called.
    suspended  : How often suspend() has been called.
    active     : Whether the driver is between init() and shutdown().
    pairs      : The (fg, bg) pairs allocated via make_color().
    """
    def __init__(self, lines=24, cols=80, colors=True):
        "Initializer"
        Driver.__init__(self)
        self.lines = lines
        self.cols = cols
        self.colors = colors
        self.cursor = (0, 0)
        self.attr = 0
        self.timeout = -1
        self.refreshes = 0
        self.suspended = 0
        self.redraws = 0
        self.active = False
        self.pairs = []
        self._keys = _collections.deque()
        self._mouse = _collections.deque()
        self._pipe = None
        self._resized = False
        self.clear()
    def clear(self):
        "Blank the whole screen"
        self.chars = [[' '] * self.cols for i in range(self.lines)]
        self.attrs = [[0] * self.cols for i in range(self.lines)]
    def init(self):
        "Start the session"
        self.active = True
        if self._pipe is None:
            self._pipe = _os.pipe()
            for fd in self._pipe:
                _os.set_blocking(fd, False)
        if self._keys: self._signal()
    def shutdown(self):
        "End the session"
        self.active = False
        if self._pipe is not None:
            for fd in self._pipe:
                _os.close(fd)
            self._pipe = None
    def resize(self, lines, cols):
        """
        Change the screen size

        The contents are discarded, and a KEY_RESIZE is queued as a real
        terminal would deliver it.
        """
        self.lines, self.cols = lines, cols
        self.clear()
        self._resized = True
        self.feed(_curses.KEY_RESIZE)
    def _signal(self):
        "Make the input pipe readable"
        if self._pipe is None: return
        try:
            _os.write(self._pipe[1], b'.')
        except OSError as exc:
            if exc.errno != _errno.EAGAIN: raise
    def _drain(self):
        "Make the input pipe unreadable again"
        if self._pipe is None: return
        try:
            while _os.read(self._pipe[0], 4096):
                pass
        except BlockingIOError:
            pass
    def feed(self, *keys):
        """
        Queue input

        Each argument is either a key code or a string whose characters
        are queued individually.
        """
        for k in keys:
            if isinstance(k, str):
                self._keys.extend(ord(c) for c in k)
            else:
                self._keys.append(k)
        self._signal()
    def feed_mouse(self, x, y, buttons=_curses.BUTTON1_CLICKED):
        "Queue a mouse event at screen position (x, y)"
        self._mouse.append(MouseEvent(x, y, buttons))
        self.feed(_curses.KEY_MOUSE)
    def pending(self):
        "Return how many keys are still queued"
        return len(self._keys)
    def get_dims(self):
        return (self.lines, self.cols)
    def check_resize(self):
        changed, self._resized = self._resized, False
        return changed
    def has_colors(self):
        return self.colors
    def make_color(self, fg, bg):
        self.pairs.append((fg, bg))
        # Same layout as ncurses' COLOR_PAIR().
        return len(self.pairs) << 8
    def set_timeout(self, ms):
        self.timeout = ms
    def getch(self):
        if self._keys:
            return self._keys.popleft()
        self._drain()
        return -1
    def getmouse(self):
        if not self._mouse: return None
        return self._mouse.popleft()
    def move(self, line, col):
        self.cursor = (line, col)
    def addch(self, ch):
        if not isinstance(ch, str):
            ch = chr(ch) if ch < 256 else '?'
        line, col = self.cursor
        if 0 <= line < self.lines and 0 <= col < self.cols:
            self.chars[line][col] = ch
            self.attrs[line][col] = self.attr
        self.cursor = (line, col + 1)
    def addstr(self, text):
        for ch in text:
            self.addch(ch)
    def attrset(self, attr):
        self.attr = attr
    def refresh(self):
        self.refreshes += 1
    def redraw_window(self):
        self.redraws += 1
    def suspend(self):
        self.suspended += 1
    def fileno(self):
        if self._pipe is None:
            raise TerminalError('driver not initialized')
        return self._pipe[0]
    def text(self, line):
        "Return the characters of the given screen line"
        return ''.join(self.chars[line])
    def attr_at(self, line, col):
        "Return the attribute the given cell was drawn with"
        return self.attrs[line][col]
