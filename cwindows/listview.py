# -*- coding: ascii -*-

"""
Scrolling lists

A ListView displays a window onto a list of items supplied by a
ListProvider. The view does not keep a copy of the data: the item count
and marks are queried from the provider whenever they are needed, and
the provider paints each visible item itself.
"""

import curses as _curses

from . import keys as _keys
from .core import Widget, fit

class ListProvider:
    """
    The data source of a ListView

    Subclasses must implement items and render(); the other methods have
    usable defaults.

    Attributes:
    view: The ListView the provider is attached to (set by the view).
    """
    view = None
    @property
    def items(self):
        "The number of items"
        raise NotImplementedError
    @property
    def allow_mark(self):
        "Whether items can be marked"
        return False
    def is_marked(self, item):
        "Return whether the given item is marked"
        return False
    def render(self, line, col, width, item):
        """
        Paint the given item

        The output position is already at (line, col) in the view's
        coordinate space, and the color is set; exactly width cells must
        be written.
        """
        raise NotImplementedError
    def set_list_view(self, view):
        "Receive the view the provider is attached to"
        self.view = view
    def process_key(self, key):
        """
        Handle a key the view does not use itself

        Returns whether the key was consumed.
        """
        return False
    def selected_changed(self):
        "Hook invoked after the view's selection moved"
        pass

class TextListProvider(ListProvider):
    """
    A provider for a list of strings

    Items are marked by toggling them with Space if allow_mark was given.
    Modify the list through the methods below (or call the view's
    provider_changed() after modifying lines directly).

    Attributes:
    lines : The list of strings.
    marked: The set of indices of marked items.
    """
    def __init__(self, lines=(), allow_mark=False):
        "Initializer"
        self.lines = list(lines)
        self.marked = set()
        self._allow_mark = allow_mark
    @property
    def items(self):
        return len(self.lines)
    @property
    def allow_mark(self):
        return self._allow_mark
    def is_marked(self, item):
        return item in self.marked
    def render(self, line, col, width, item):
        self.view.driver.addstr(fit(self.lines[item], width))
    def process_key(self, key):
        "Toggle the mark of the selected item with Space"
        if not self._allow_mark or key != _keys.KEY_SPACE: return False
        sel = self.view.selected
        if sel < 0: return False
        self.marked ^= {sel}
        self.view.redraw()
        return True
    def append(self, text):
        "Add an item to the end"
        self.lines.append(text)
        if self.view is not None: self.view.provider_changed()
    def remove(self, index):
        "Remove the item at the given index"
        del self.lines[index]
        self.marked = {i if i < index else i - 1
                       for i in self.marked if i != index}
        if self.view is not None: self.view.provider_changed()

class ListView(Widget):
    """
    A scrollable list with a selection

    The selected row is highlighted with the focus color, marked rows with
    the hot colors. Navigation:
    Up        (^P): Select the previous item.
    Down      (^N): Select the next item.
    PageDown  (^V): Move the selection one page forwards.
    PageUp    (^B): Move the selection one page backwards.
    All other keys are passed on to the provider.

    Attributes:
    provider: The ListProvider.
    top     : The index of the first visible item.
    """
    def __init__(self, x, y, w, h, provider, **kwds):
        "Initializer"
        Widget.__init__(self, x, y, w, h, **kwds)
        self.can_focus = kwds.get('can_focus', True)
        self.provider = provider
        self.top = 0
        self._selected = 0
        provider.set_list_view(self)
    @property
    def selected(self):
        """
        The index of the selected item, or -1 if there are none

        Assigning an index that is not less than the item count raises a
        ValueError.
        """
        if self.provider.items == 0:
            return -1
        return self._selected
    @selected.setter
    def selected(self, value):
        if not 0 <= value < self.provider.items:
            raise ValueError('item index %r out of range' % (value,))
        self._selected = value
        if value < self.top:
            self.top = value
        elif value >= self.top + self.h:
            self.top = value - self.h + 1
        self.redraw()
    def provider_changed(self):
        "Re-clamp the view to the provider's current item count"
        count = self.provider.items
        last = count - 1 if count > 1 else 0
        if self.top >= count:
            self.top = last
        if self._selected >= count:
            self._selected = last
        self.redraw()
    def _select(self, index, top):
        "Internal helper for moving the selection"
        moved = (index != self._selected)
        self._selected = index
        self.top = top
        if moved:
            self.provider.selected_changed()
        self.redraw()
    def process_key(self, key):
        "Handle navigation keys"
        count = self.provider.items
        sel = self._selected
        if key in (_curses.KEY_UP, _keys.CTRL_P):
            if count and sel > 0:
                sel -= 1
                self._select(sel, min(self.top, sel))
            return True
        elif key in (_curses.KEY_DOWN, _keys.CTRL_N):
            if sel + 1 < count:
                sel += 1
                top = self.top
                if sel >= top + self.h:
                    top += 1
                self._select(sel, top)
            return True
        elif key in (_curses.KEY_NPAGE, _keys.CTRL_V):
            if count:
                n = sel + self.h
                if n >= count:
                    n = count - 1
                self._select(n, n if count >= self.h else 0)
            return True
        elif key in (_curses.KEY_PPAGE, _keys.CTRL_B):
            if count:
                n = max(sel - self.h, 0)
                self._select(n, n)
            return True
        return self.provider.process_key(key)
    def position_cursor(self):
        "Place the cursor at the start of the selected row"
        self.move(self.y + self._selected - self.top, self.x)
    def redraw(self):
        "Draw the visible rows"
        d = self.driver
        provider = self.provider
        count = provider.items
        allow_mark = provider.allow_mark
        for row in range(self.h):
            self.move(self.y + row, self.x)
            item = self.top + row
            if item >= count:
                d.attrset(self.color_normal)
                d.addstr(' ' * self.w)
                continue
            marked = allow_mark and provider.is_marked(item)
            if item == self._selected:
                d.attrset(self.color_hot_normal if marked else
                          self.color_focus)
            else:
                d.attrset(self.color_hot_focus if marked else
                          self.color_normal)
            provider.render(self.y + row, self.x, self.w, item)
        self.position_cursor()
    def process_mouse(self, event):
        "Select the item clicked on"
        if event.y < 0: return
        item = self.top + event.y
        if item >= self.provider.items: return
        self.container.set_focus(self)
        self._select(item, self.top)
