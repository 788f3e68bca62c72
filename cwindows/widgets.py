# -*- coding: ascii -*-

"""
Basic widgets

Labels for static text, a single-line Entry, push Buttons and CheckBoxes.
All of them are one line high and draw with the colors of their
container.
"""

import curses as _curses

from . import keys as _keys
from .core import Widget, Handlers, FILL_HORIZONTAL, fit

class Label(Widget):
    """
    A mere piece of text

    Attributes:
    color: An attribute to draw with instead of the container's normal
           color, or None.
    """
    def __init__(self, x, y, text, **kwds):
        """
        Initializer

        The width is that of text; the color keyword argument initializes
        the color attribute.
        """
        Widget.__init__(self, x, y, len(text), 1, **kwds)
        self.color = kwds.get('color', None)
        self._text = text
    @property
    def text(self):
        """
        The text displayed

        Assigning erases the previous text before drawing the new one.
        """
        return self._text
    @text.setter
    def text(self, value):
        self._set_text(value)
        self.w = len(value)
    def _set_text(self, value):
        "Internal text assignment helper"
        self.driver.attrset(self.color_normal)
        self.move(self.y, self.x)
        self.driver.addstr(' ' * len(self._text))
        self._text = value
        self.redraw()
    def redraw(self):
        "Draw the text"
        if self.color is not None:
            self.driver.attrset(self.color)
        else:
            self.driver.attrset(self.color_normal)
        self.move(self.y, self.x)
        self.driver.addstr(self._text)

def trim_middle(text, width):
    """
    Shorten text to width by replacing its middle with an ellipsis

    Below five columns, text is cut off instead.
    """
    if len(text) <= width:
        return text
    if width < 5:
        return text[:max(width, 0)]
    return text[:width // 2 - 2] + '...' + text[len(text) - width // 2 + 1:]

class TrimLabel(Label):
    """
    A Label that shortens its text to a fixed width

    If the label fills its container horizontally, the width follows the
    container. The text attribute always holds the untrimmed text.
    """
    def __init__(self, x, y, w, text, **kwds):
        "Initializer"
        Label.__init__(self, x, y, text, **kwds)
        self.original = text
        self.w = w
        self._text = trim_middle(text, w)
    @property
    def text(self):
        return self.original
    @text.setter
    def text(self, value):
        self.original = value
        self._set_text(trim_middle(value, self.w))
    def do_size_changed(self):
        "Re-trim the text if the width follows the container"
        if self.fill & FILL_HORIZONTAL:
            self._text = trim_middle(self.original, self.w)

class Entry(Widget):
    """
    A single-line text editor

    The visible window scrolls horizontally to keep the edit point in
    view. The following (emacs-style) editing keys are supported:
    Backspace (^?): Delete the character before the edit point.
    Home      (^A): Move to the beginning of the text.
    Left      (^B): Move one character backwards.
    Delete    (^D): Delete the character at the edit point.
    End       (^E): Move to the end of the text.
    Right     (^F): Move one character forwards.
    ^K            : Kill (cut) the text from the edit point to the end.
    ^Y            : Yank (insert) the text killed last.
    All printable characters are inserted at the edit point.

    Attributes:
    point  : The edit point (an index into the text).
    first  : The index of the first visible character.
    changed: Handlers invoked (with the entry) after an edit.
    """
    def __init__(self, x, y, w, text='', **kwds):
        "Initializer"
        Widget.__init__(self, x, y, w, 1, **kwds)
        self.can_focus = kwds.get('can_focus', True)
        self._text = text or ''
        self.point = len(self._text)
        self.first = self.point - w if self.point > w else 0
        self.kill = None
        self.changed = Handlers()
    @property
    def text(self):
        "The text being edited"
        return self._text
    @text.setter
    def text(self, value):
        self._text = value
        if self.point > len(value):
            self.point = len(value)
        self.first = self.point - self.w if self.point > self.w else 0
        self.redraw()
    def redraw(self):
        "Draw the visible part of the text"
        d = self.driver
        d.attrset(self.color_focus)
        self.move(self.y, self.x)
        d.addstr(fit(self._text[self.first:], self.w))
        self.position_cursor()
    def position_cursor(self):
        "Place the cursor at the edit point"
        self.move(self.y, self.x + self.point - self.first)
    def _adjust(self):
        "Scroll the edit point into view and redraw"
        if self.point < self.first:
            self.first = self.point
        elif self.point - self.first >= self.w:
            self.first = self.point - self.w // 3
        self.redraw()
    def _edit(self, text, point):
        "Replace the text and edit point"
        self._text = text
        self.point = point
        self._adjust()
        self.changed(self)
    def process_key(self, key):
        "Perform an editing action"
        text, point = self._text, self.point
        if key in (_curses.KEY_BACKSPACE, _keys.KEY_DEL):
            if point:
                self._edit(text[:point - 1] + text[point:], point - 1)
        elif key in (_curses.KEY_HOME, _keys.CTRL_A):
            self.point = 0
            self._adjust()
        elif key in (_curses.KEY_LEFT, _keys.CTRL_B):
            if point:
                self.point -= 1
                self._adjust()
        elif key in (_curses.KEY_DC, _keys.CTRL_D):
            if point < len(text):
                self._edit(text[:point] + text[point + 1:], point)
        elif key in (_curses.KEY_END, _keys.CTRL_E):
            self.point = len(text)
            self._adjust()
        elif key in (_curses.KEY_RIGHT, _keys.CTRL_F):
            if point < len(text):
                self.point += 1
                self._adjust()
        elif key == _keys.CTRL_K:
            self.kill = text[point:]
            self._edit(text[:point], point)
        elif key == _keys.CTRL_Y:
            if self.kill:
                self._edit(text[:point] + self.kill + text[point:],
                           point + len(self.kill))
        elif _keys.is_printable(key):
            self._edit(text[:point] + chr(key) + text[point:], point + 1)
        else:
            return False
        return True

class Button(Widget):
    """
    A UI element that can be focused and "invoked", performing some action

    A button displays as "[ text ]", or as "[< text >]" if it is the
    default button. Its hot letter is the first uppercase letter of the
    text; pressing Alt together with it focuses and invokes the button
    from anywhere in the top-level container. When focused, Return, Space
    or the hot letter invoke it; a default button is additionally invoked
    by Return when nothing else consumes that.

    Attributes:
    is_default: Whether this is the default button.
    hot_key   : The hot letter (uppercase), or None.
    clicked   : Handlers invoked (with the button) upon invocation.
    """
    def __init__(self, x, y, text, is_default=False, **kwds):
        """
        Initializer

        A callback keyword argument is connected to clicked (it receives
        the button).
        """
        if is_default:
            label = '[< ' + text + ' >]'
        else:
            label = '[ ' + text + ' ]'
        Widget.__init__(self, x, y, len(label), 1, **kwds)
        self.can_focus = kwds.get('can_focus', True)
        self.is_default = is_default
        self.label = label
        self.hot_key, self.hot_pos = None, -1
        for i, ch in enumerate(label):
            if ch.isupper():
                self.hot_key, self.hot_pos = ch, i
                break
        self.clicked = Handlers()
        callback = kwds.get('callback', None)
        if callback is not None:
            self.clicked.connect(callback)
    def click(self):
        "Invoke the button"
        self.clicked(self)
    def redraw(self):
        "Draw the button"
        d = self.driver
        d.attrset(self.color_focus if self.has_focus else self.color_normal)
        self.move(self.y, self.x)
        d.addstr(self.label)
        if self.hot_key is None: return
        self.move(self.y, self.x + self.hot_pos)
        d.attrset(self.color_hot_focus if self.has_focus else
                  self.color_hot_normal)
        d.addch(self.hot_key)
    def position_cursor(self):
        "Place the cursor on the hot letter"
        self.move(self.y, self.x + max(self.hot_pos, 0))
    def process_hot_key(self, key):
        "Handle Alt with the hot letter"
        if _keys.is_alt(key):
            if not _keys.matches_hotkey(key, self.hot_key):
                return False
            self.container.set_focus(self)
            self.click()
            return True
        return False
    def process_cold_key(self, key):
        "Handle Return for the default button"
        if self.is_default and _keys.is_return(key):
            self.click()
            return True
        return False
    def process_key(self, key):
        "Handle Return, Space, and the hot letter"
        if (_keys.is_return(key) or key == _keys.KEY_SPACE or
                _keys.matches_hotkey(key, self.hot_key)):
            self.click()
            return True
        return False
    def process_mouse(self, event):
        "Focus and invoke the button on a click"
        self.container.set_focus(self)
        self.click()

class CheckBox(Widget):
    """
    A UI element that can be toggled between "on" and "off" states

    Displayed as "[x] text" or "[ ] text". Space or Return toggle the box
    when it is focused; Alt with the first uppercase letter of the text
    focuses and toggles it. A mouse click does the same.

    Attributes:
    checked: Whether the box is checked.
    toggled: Handlers invoked (with the checkbox) after each toggle.
    """
    def __init__(self, x, y, text, checked=False, **kwds):
        "Initializer"
        Widget.__init__(self, x, y, len(text) + 4, 1, **kwds)
        self.can_focus = kwds.get('can_focus', True)
        self.text = text
        self.hot_key = None
        for ch in text:
            if ch.isupper():
                self.hot_key = ch
                break
        self._checked = checked
        self.toggled = Handlers()
    @property
    def checked(self):
        return self._checked
    @checked.setter
    def checked(self, value):
        self._checked = value
        self.redraw()
    def toggle(self):
        "Flip the state"
        self.checked = not self._checked
        self.toggled(self)
    def redraw(self):
        "Draw the box"
        d = self.driver
        d.attrset(self.color_focus if self.has_focus else self.color_normal)
        self.move(self.y, self.x)
        d.addstr(('[x] ' if self._checked else '[ ] ') + self.text)
    def position_cursor(self):
        "Place the cursor inside the brackets"
        self.move(self.y, self.x + 1)
    def process_hot_key(self, key):
        if not _keys.is_alt(key): return False
        if not _keys.matches_hotkey(key, self.hot_key): return False
        self.container.set_focus(self)
        self.toggle()
        return True
    def process_key(self, key):
        "Handle Space and Return"
        if key == _keys.KEY_SPACE or _keys.is_return(key):
            self.toggle()
            return True
        return False
    def process_mouse(self, event):
        self.container.set_focus(self)
        self.toggle()
