# -*- coding: ascii -*-

"""
A pull-down menu bar

The MenuBar occupies a single line (normally the top one of the screen)
and lists the titles of its menus. Activating it (with F9, Alt and the
accelerator of a title, or a mouse click) runs the bar as a modal
top-level container of its own; the chosen item's action is invoked once
that modal loop has finished, so that actions may open dialogs freely.

Titles use a "_" to mark their accelerator letter, as in "_File".
"""

import curses as _curses

from . import keys as _keys
from .core import Container, FILL_HORIZONTAL
from .frames import draw_frame

def strip_hotkey(text):
    "Return text without the accelerator marker"
    return text.replace('_', '', 1)

def draw_hotkey_text(driver, text, attr, hot_attr):
    """
    Output text, showing its accelerator letter with hot_attr

    Returns the number of cells written.
    """
    idx = text.find('_')
    if idx == -1 or idx + 1 >= len(text):
        driver.attrset(attr)
        driver.addstr(text.replace('_', ''))
        return len(text.replace('_', ''))
    driver.attrset(attr)
    driver.addstr(text[:idx])
    driver.attrset(hot_attr)
    driver.addch(text[idx + 1])
    driver.attrset(attr)
    driver.addstr(text[idx + 2:])
    return len(text) - 1

class MenuItem:
    """
    An entry of a pull-down menu

    Attributes:
    title : The label of the item, with an optional accelerator marker.
    help  : A short text displayed right-aligned next to the title.
    action: A nullary function invoked when the item is chosen, or None.
    """
    def __init__(self, title, help='', action=None):
        "Initializer"
        self.title = title
        self.help = help
        self.action = action
    def __repr__(self):
        return '<MenuItem %r>' % (self.title,)
    @property
    def hot_key(self):
        return _keys.hotkey_of(self.title)
    @property
    def width(self):
        "The number of cells the title and help need"
        w = len(strip_hotkey(self.title))
        if self.help:
            w += len(self.help) + 2
        return w

class MenuBarItem:
    """
    A top-level entry of a MenuBar

    Attributes:
    title   : The label shown in the bar.
    children: The list of MenuItem-s; None entries are separators.
    current : The index of the highlighted item while the menu is open.
    """
    def __init__(self, title, children=()):
        "Initializer"
        self.title = title
        self.children = list(children)
        self.current = 0
    def __repr__(self):
        return '<MenuBarItem %r>' % (self.title,)
    @property
    def hot_key(self):
        return _keys.hotkey_of(self.title)
    def step(self, delta):
        """
        Move the highlight by delta, skipping separators

        Moving past either end wraps around.
        """
        n = len(self.children)
        if not any(c is not None for c in self.children): return
        cur = self.current
        while True:
            cur = (cur + delta) % n
            if self.children[cur] is not None:
                break
        self.current = cur
    def reset(self):
        "Highlight the first item that is not a separator"
        self.current = 0
        if self.children and self.children[0] is None:
            self.step(1)

class MenuBar(Container):
    """
    A row of pull-down menus

    The bar fills its container horizontally and draws with the "menu"
    scheme of the application's palette.

    Attributes:
    menus   : The list of MenuBarItem-s.
    selected: The index of the open menu, or None when the bar is idle.
    action  : The action chosen during the current activation.
    """
    def __init__(self, menus, **kwds):
        "Initializer"
        kwds.setdefault('fill', FILL_HORIZONTAL)
        kwds.setdefault('scheme', 'menu')
        Container.__init__(self, kwds.get('x', 0), kwds.get('y', 0),
                           kwds.get('w', 0), 1, **kwds)
        self.menus = list(menus)
        self.selected = None
        self.action = None
    def title_positions(self):
        "Return the column of each title"
        ret, pos = [], 1
        for m in self.menus:
            ret.append(pos)
            pos += len(strip_hotkey(m.title)) + 2
        return ret
    def prepare(self):
        "Span the screen while running as a modal"
        self.w = self.root.w
    def activate(self, index):
        """
        Open the menu at index and let the user choose an item

        Blocks in a nested run loop until an item is chosen or the menu is
        cancelled; the chosen item's action is invoked afterwards.
        """
        app = self.app
        for m in self.menus:
            m.reset()
        self.selected = index
        self.action = None
        app.run(self)
        self.selected = None
        app.refresh()
        action, self.action = self.action, None
        if action is not None:
            action()
    def _choose(self, item):
        "Internal helper for finishing the modal loop"
        self.action = None if item is None else item.action
        self.running = False
    def _switch(self, index):
        "Open another menu while active"
        self.selected = index % len(self.menus)
        self.menus[self.selected].reset()
        self.app.refresh()
    def redraw(self):
        "Draw the bar (and the open menu)"
        d = self.driver
        colors = self.container_colors
        d.attrset(colors.normal)
        self.container_base_move(0, 0)
        d.addstr(' ' * self.w)
        for i, (m, pos) in enumerate(zip(self.menus, self.title_positions())):
            self.container_base_move(0, pos)
            if i == self.selected:
                draw_hotkey_text(d, m.title, colors.focus, colors.hot_focus)
            else:
                draw_hotkey_text(d, m.title, colors.normal, colors.hot_normal)
        if self.selected is not None:
            self.draw_menu(self.selected)
        self.position_cursor()
    def draw_menu(self, index):
        "Draw the drop-down of the menu at index"
        menu = self.menus[index]
        if not menu.children: return
        d = self.driver
        colors = self.container_colors
        col = self.title_positions()[index] - 1
        inner = max([c.width for c in menu.children if c is not None] or [0])
        width = inner + 4
        d.attrset(colors.normal)
        draw_frame(self, 1, col, width, len(menu.children) + 2)
        for i, item in enumerate(menu.children):
            self.container_base_move(2 + i, col + 1)
            if item is None:
                d.attrset(colors.normal)
                for n in range(width - 2):
                    d.addch(d.acs['hline'])
                continue
            if i == menu.current:
                attr, hot = colors.focus, colors.hot_focus
            else:
                attr, hot = colors.normal, colors.hot_normal
            d.attrset(attr)
            d.addch(' ')
            n = draw_hotkey_text(d, item.title, attr, hot)
            help = item.help
            d.addstr(' ' * (inner - n - len(help)) + help + ' ')
    def position_cursor(self):
        "Place the cursor on the open menu's title"
        if self.selected is None:
            self.container_base_move(0, 0)
        else:
            self.container_base_move(0, self.title_positions()[self.selected])
    def process_hot_key(self, key):
        "Handle F9 and Alt with the accelerator of a title"
        if key == _curses.KEY_F9:
            if self.selected is None:
                self.activate(0)
            else:
                self._choose(None)
            return True
        if not _keys.is_alt(key): return False
        for i, m in enumerate(self.menus):
            if _keys.matches_hotkey(key, m.hot_key):
                if self.selected is None:
                    self.activate(i)
                else:
                    self._switch(i)
                return True
        return False
    def process_key(self, key):
        "Navigate the open menu"
        if self.selected is None: return False
        menu = self.menus[self.selected]
        if key == _curses.KEY_LEFT:
            self._switch(self.selected - 1)
        elif key == _curses.KEY_RIGHT:
            self._switch(self.selected + 1)
        elif key == _curses.KEY_UP:
            menu.step(-1)
            self.redraw()
        elif key == _curses.KEY_DOWN:
            menu.step(1)
            self.redraw()
        elif _keys.is_return(key):
            if not menu.children: return False
            item = menu.children[menu.current]
            if item is None: return False
            self._choose(item)
        elif key in (_keys.KEY_ESC, _keys.CTRL_C):
            self._choose(None)
        elif 0 < key < 256 and chr(key).isalnum():
            for item in menu.children:
                if item is not None and _keys.matches_hotkey(key,
                                                             item.hot_key):
                    self._choose(item)
                    return True
            return False
        else:
            return False
        return True
    def process_mouse(self, event):
        "Open menus by their titles, and choose items by clicking them"
        if event.y == 0:
            for i, (m, pos) in enumerate(zip(self.menus,
                                             self.title_positions())):
                if pos <= event.x < pos + len(strip_hotkey(m.title)):
                    if self.selected is None:
                        self.activate(i)
                    else:
                        self._switch(i)
                    return
            return
        if self.selected is None: return
        menu = self.menus[self.selected]
        col = self.title_positions()[self.selected]
        idx = event.y - 2
        if 0 <= idx < len(menu.children) and event.x >= col:
            if menu.children[idx] is not None:
                self._choose(menu.children[idx])
            return
        self._choose(None)
