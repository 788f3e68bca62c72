# -*- coding: ascii -*-

"""
A simple curses-based windowing toolkit for Python

cwindows implements widgets that are placed at fixed positions inside
containers, a focus and key dispatch engine, bordered frames and modal
dialogs, scrolling lists, a pull-down menu bar, and an Application that
runs containers as a stack of modal top-level windows on an event loop.

A typical use would look like this:
>>> app = Application()
>>> # A dialog centered on the screen.
... d = Dialog(40, 10, 'Greeting')
>>> d.add(Label(1, 1, 'Hello, world!'))
>>> # Pressing the button (or Return, since it is the default) closes the
... # dialog; so does Escape.
... def close(button):
...     d.running = False
>>> d.add_button(Button(0, 0, 'Ok', True, callback=close))
>>> # Run it.
... app.run(d)

Everything is drawn through a Driver; tests and headless programs can use
MemoryDriver instead of the curses-backed default.
"""

from .keys import KEY_ALT, alt, is_alt, hotkey_of
from .driver import TerminalError, MouseEvent, Driver, CursesDriver, \
    MemoryDriver, NullDriver
from .mainloop import MainLoop
from .core import Handlers, ColorScheme, Widget, Decoration, Container, \
    RootContainer, NULL_CONTAINER, FILL_NONE, FILL_HORIZONTAL, \
    FILL_VERTICAL, FILL_BOTH
from .widgets import Label, TrimLabel, Entry, Button, CheckBox
from .frames import FrameDecoration, DialogDecoration, Frame, Dialog
from .listview import ListProvider, TextListProvider, ListView
from .menu import MenuItem, MenuBarItem, MenuBar
from .application import Application, RunState

__all__ = ['KEY_ALT', 'alt', 'is_alt', 'hotkey_of', 'TerminalError',
           'MouseEvent', 'Driver', 'CursesDriver', 'MemoryDriver',
           'NullDriver', 'MainLoop', 'Handlers', 'ColorScheme', 'Widget',
           'Decoration', 'Container', 'RootContainer', 'NULL_CONTAINER',
           'FILL_NONE', 'FILL_HORIZONTAL', 'FILL_VERTICAL', 'FILL_BOTH',
           'Label', 'TrimLabel', 'Entry', 'Button', 'CheckBox',
           'FrameDecoration', 'DialogDecoration', 'Frame', 'Dialog',
           'ListProvider', 'TextListProvider', 'ListView', 'MenuItem',
           'MenuBarItem', 'MenuBar', 'Application', 'RunState']
