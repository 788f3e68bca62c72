# -*- coding: ascii -*-

"""
The widget tree

This module contains the base Widget class, the Container widget which
owns other widgets and routes focus and input among them, and the root
containers terminating the tree.

Every widget lives in the coordinate space of its container: x and y are
relative to the container's client area (its rectangle minus any border
drawn by its decoration). Drawing resolves coordinates by walking up the
chain of containers until a RootContainer maps them to the screen.

A widget that has not been added anywhere belongs to NULL_CONTAINER, a
root container drawing to a NullDriver, so that stray redraws are
harmless.
"""

import collections as _collections
import curses as _curses

from .driver import NullDriver, translate

FILL_NONE = 0
FILL_HORIZONTAL = 1
FILL_VERTICAL = 2
FILL_BOTH = FILL_HORIZONTAL | FILL_VERTICAL

ColorScheme = _collections.namedtuple('ColorScheme',
                                      'normal focus hot_normal hot_focus')
ColorScheme.__doc__ = """
The four semantic colors a container hands down to its children

normal    : Ordinary text.
focus     : The focused widget (or selected list row).
hot_normal: Accelerator letters (or marked list rows).
hot_focus : Accelerator letters of the focused widget.
"""

DEFAULT_SCHEME = ColorScheme(_curses.A_NORMAL, _curses.A_REVERSE,
                             _curses.A_BOLD,
                             _curses.A_REVERSE | _curses.A_BOLD)

NULL_CONTAINER = None

def fit(text, width):
    "Return text truncated or padded with spaces to exactly width cells"
    if width <= 0: return ''
    return text[:width].ljust(width)

class Handlers:
    """
    An ordered list of event handlers

    Handlers are invoked in the order they were connected. Calling the
    instance invokes all of them with the given arguments; a handler
    connected or disconnected while that happens takes effect on the
    next call.
    """
    def __init__(self):
        "Initializer"
        self._handlers = []
    def connect(self, handler):
        "Add handler and return it"
        self._handlers.append(handler)
        return handler
    def disconnect(self, handler):
        "Remove handler"
        self._handlers.remove(handler)
    def __call__(self, *args):
        for h in self._handlers[:]:
            h(*args)
    def __len__(self):
        return len(self._handlers)

class Widget:
    """
    Base class for all UI widgets

    This provides default implementations for all methods: the widget
    paints its rectangle blank and ignores all input.

    Attributes:
    x, y, w, h: The rectangle of the widget, relative to the client area
                of its container.
    container : The container the widget belongs to. Used to resolve
                coordinates and colors; the container owns the widget, not
                the other way around.
    can_focus : Whether the widget may receive the focus.
    fill      : A combination of the FILL_* flags; the container recomputes
                the corresponding dimensions when its size changes.
    """
    def __init__(self, x, y, w, h, **kwds):
        """
        Initializer

        Accepts configuration via keyword arguments:
        can_focus: The can_focus attribute (default False).
        fill     : The fill attribute (default FILL_NONE).

        Raises ValueError if w or h is negative.
        """
        if w < 0 or h < 0:
            raise ValueError('Negative widget size: %rx%r' % (w, h))
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.container = NULL_CONTAINER
        self.can_focus = kwds.get('can_focus', False)
        self.fill = kwds.get('fill', FILL_NONE)
        self._has_focus = False
    def __repr__(self):
        return '<%s at (%s, %s) size %sx%s>' % (self.__class__.__name__,
            self.x, self.y, self.w, self.h)
    @property
    def has_focus(self):
        """
        Whether this widget is focused within its container

        Managed by the container (see Container.set_focus()); assigning it
        redraws the widget so that it can reflect the change.
        """
        return self._has_focus
    @has_focus.setter
    def has_focus(self, value):
        self._has_focus = value
        self.redraw()
    @property
    def rect(self):
        "The position concatenated with the size"
        return (self.x, self.y, self.w, self.h)
    @property
    def root(self):
        "The RootContainer at the top of the widget's tree"
        c = self.container
        while c.container is not None:
            c = c.container
        return c
    @property
    def app(self):
        "The Application the widget is displayed by, or None"
        return self.root.app
    @property
    def driver(self):
        "The terminal driver to draw to"
        return self.container.driver
    @property
    def colors(self):
        "The ColorScheme to draw with (the container's)"
        return self.container.container_colors
    @property
    def color_normal(self):
        return self.colors.normal
    @property
    def color_focus(self):
        return self.colors.focus
    @property
    def color_hot_normal(self):
        return self.colors.hot_normal
    @property
    def color_hot_focus(self):
        return self.colors.hot_focus
    def contains(self, x, y):
        "Return whether the point (in the container's space) is inside self"
        return (self.x <= x < self.x + self.w and
                self.y <= y < self.y + self.h)
    def as_container(self):
        """
        Return self as a Container, or None if this is a plain widget
        """
        return None
    def detach(self):
        "Remove the widget from its container (if any)"
        if self in self.container.children:
            self.container.remove(self)
    def move(self, line, col):
        """
        Move the output position

        line and col are relative to the container's client area.
        """
        self.container.container_move(line, col)
    def clear(self):
        "Paint the widget's rectangle with spaces"
        d = self.driver
        for line in range(self.h):
            self.move(self.y + line, self.x)
            d.addstr(' ' * self.w)
    def redraw(self):
        """
        Paint the widget

        Must paint (only) the widget's rectangle, and be callable at any
        time. The default implementation blanks the rectangle.
        """
        self.driver.attrset(self.color_normal)
        self.clear()
    def process_key(self, key):
        """
        Handle a key while focused

        Returns whether the key was consumed. The default implementation
        consumes nothing.
        """
        return False
    def process_hot_key(self, key):
        """
        Handle a key before it is dispatched to the focused widget

        Offered to all widgets regardless of focus; used for accelerators.
        Returns whether the key was consumed.
        """
        return False
    def process_cold_key(self, key):
        """
        Handle a key nothing else wanted

        Offered to all widgets after the focused one declined the key; used
        for default actions. Returns whether the key was consumed.
        """
        return False
    def process_mouse(self, event):
        """
        Handle a mouse event

        event is a MouseEvent whose coordinates are relative to the
        widget's top-left corner.
        """
        pass
    def position_cursor(self):
        """
        Place the terminal cursor at the widget's logical edit point

        The default is the top-left corner.
        """
        self.move(self.y, self.x)
    def do_size_changed(self):
        """
        Recompute size-dependent state

        Called after the container's size (and possibly this widget's, see
        fill) changed.
        """
        pass

class Decoration:
    """
    The visual frame of a container

    A decoration draws whatever surrounds a container's children, and
    determines how far they are inset (the border). The plain decoration
    draws nothing and insets nothing; see the frames module for others.
    Decorations may additionally hook into preparation, resizing, and key
    handling of their container.
    """
    border = 0
    def draw(self, container):
        "Draw the decoration of container"
        pass
    def prepare(self, container):
        "Hook called before container is run as a top-level container"
        pass
    def size_changed(self, container):
        "Hook called after container's children were resized"
        pass
    def process_key(self, container, key):
        """
        Hook offered every key before container's focused child

        Returns whether the key was consumed.
        """
        return False

class Container(Widget):
    """
    A widget owning others

    The children are kept in insertion order, which is both the drawing
    order and the focus traversal order. At most one child is focused at a
    time; keys are dispatched to it, while hot and cold keys are offered to
    all children (the focused one first).

    Attributes:
    children          : The list of children. May be read externally, but
                        should only be modified using add() and remove().
    focused           : The focused child, or None.
    running           : Whether a run loop is active for this container.
    scheme            : The colors for the children: None to inherit those
                        of the container's own container, a palette scheme
                        name, or a ColorScheme.
    decoration        : The Decoration drawn around the children.
    size_changed_event: Handlers invoked (with the container) whenever
                        size_changed() is called, before the children are
                        resized. Owning code hooks its relayout here.
    """
    def __init__(self, x, y, w, h, **kwds):
        """
        Initializer

        Accepts the scheme and decoration attributes as keyword arguments
        in addition to those of Widget.
        """
        Widget.__init__(self, x, y, w, h, **kwds)
        self.children = []
        self.focused = None
        self.running = False
        self.scheme = kwds.get('scheme', None)
        self.decoration = kwds.get('decoration', None) or Decoration()
        self.size_changed_event = Handlers()
    def as_container(self):
        return self
    @property
    def border(self):
        "The thickness of the decoration's border"
        return self.decoration.border
    def get_base(self):
        "Return the (x, y) offset of the client area inside self"
        b = self.decoration.border
        return (b, b)
    @property
    def container_colors(self):
        "The ColorScheme the children draw with"
        if isinstance(self.scheme, ColorScheme):
            return self.scheme
        elif self.scheme is not None:
            app = self.app
            if app is not None and self.scheme in app.palette:
                return app.palette[self.scheme]
        return self.container.container_colors
    def container_move(self, line, col):
        "Move the output position to a point in the client area"
        bx, by = self.get_base()
        self.container.container_move(line + self.y + by, col + self.x + bx)
    def container_base_move(self, line, col):
        "Move the output position to a point relative to self's corner"
        self.container.container_move(line + self.y, col + self.x)
    def add(self, widget):
        """
        Append widget to the children and return it

        The widget is removed from its previous container first. If the
        widget can be focused, so can the container from now on.
        """
        widget.detach()
        self.children.append(widget)
        widget.container = self
        if widget.can_focus:
            self.can_focus = True
        return widget
    def remove(self, widget):
        """
        Remove the given child

        Resets the focus if it was at widget, and makes the container
        unfocusable if no focusable children remain. Raises ValueError if
        widget is not a child.
        """
        if widget.container is not self or widget not in self.children:
            raise ValueError('%r is not a child of %r' % (widget, self))
        self.children.remove(widget)
        if self.focused is widget:
            self.focused = None
            widget._has_focus = False
        widget.container = NULL_CONTAINER
        if not any(w.can_focus for w in self.children):
            self.can_focus = False
    def remove_all(self):
        "Remove all children"
        for w in self.children[:]:
            self.remove(w)
    def prepare(self):
        "Get ready to be run as a top-level container"
        self.decoration.prepare(self)
    def redraw_children(self):
        "Redraw all children that start inside the client area"
        limx = self.w - self.border * 2
        limy = self.h - self.border * 2
        for w in self.children:
            # Poor man's clipping.
            if w.x >= limx or w.y >= limy:
                continue
            w.redraw()
    def redraw(self):
        "Draw the decoration and the children"
        self.decoration.draw(self)
        self.redraw_children()
    def position_cursor(self):
        "Place the cursor at the focused child"
        if self.focused is not None:
            self.focused.position_cursor()
        else:
            Widget.position_cursor(self)
    def set_focus(self, widget):
        """
        Focus the given child

        Does nothing if widget cannot be focused or already is. Otherwise,
        the previously focused child (if any) loses the focus, widget gains
        it, and, if widget is itself a container, it focuses a child of
        its own. The container is made the focus of its own container as
        well, so that keys actually arrive at widget.
        """
        if widget.container is not self or widget not in self.children:
            raise ValueError('%r is not a child of %r' % (widget, self))
        if not widget.can_focus or self.focused is widget:
            return
        if self.focused is not None:
            self.focused.has_focus = False
        self.focused = widget
        widget.has_focus = True
        c = widget.as_container()
        if c is not None:
            c.ensure_focus()
        parent = self.container
        if (parent.container is not None and parent.focused is not self and
                self.can_focus):
            parent.set_focus(self)
        widget.position_cursor()
    def ensure_focus(self):
        "Focus the first child if none is focused"
        if self.focused is None:
            self.focus_first()
    def focus_first(self):
        """
        Focus the first focusable child, if any

        If that is a container, its first focusable child is focused as
        well (and so on).
        """
        for w in self.children:
            if w.can_focus:
                c = w.as_container()
                if c is not None:
                    c.focus_first()
                self.set_focus(w)
                return
    def focus_last(self):
        "Focus the last focusable child (recursively), if any"
        for w in reversed(self.children):
            if w.can_focus:
                c = w.as_container()
                if c is not None:
                    c.focus_last()
                self.set_focus(w)
                return
    def focus_next(self):
        """
        Advance the focus to the next focusable widget

        Returns whether the focus could be moved. If the focused child is a
        container, focus is advanced inside it first. When the last
        focusable widget is passed, the focus is cleared and False is
        returned; calling focus_next() again then starts over from the
        first one.
        """
        return self._advance(False)
    def focus_prev(self):
        "Move the focus backwards; the counterpart of focus_next()"
        return self._advance(True)
    def _advance(self, rev):
        "Internal focus traversal helper"
        if self.focused is None:
            if rev:
                self.focus_last()
            else:
                self.focus_first()
            return self.focused is not None
        found = False
        for w in (reversed(self.children) if rev else self.children):
            if w is self.focused:
                c = w.as_container()
                if c is not None and c._advance(rev):
                    return True
                found = True
                continue
            if found and w.can_focus:
                self.set_focus(w)
                # Entering a container lands on its first item relative
                # to the direction of traversal.
                c = w.as_container()
                if c is not None:
                    if rev:
                        c.focus_last()
                    else:
                        c.focus_first()
                return True
        if self.focused is not None:
            self.focused.has_focus = False
            self.focused = None
        return False
    def process_key(self, key):
        "Offer key to the decoration, then to the focused child"
        if self.decoration.process_key(self, key):
            return True
        if self.focused is not None:
            return self.focused.process_key(key)
        return False
    def process_hot_key(self, key):
        "Offer key to the focused child, then to all others"
        if self.focused is not None:
            if self.focused.process_hot_key(key):
                return True
        for w in self.children[:]:
            if w is self.focused:
                continue
            if w.process_hot_key(key):
                return True
        return False
    def process_cold_key(self, key):
        "Offer key to the focused child, then to all others"
        if self.focused is not None:
            if self.focused.process_cold_key(key):
                return True
        for w in self.children[:]:
            if w is self.focused:
                continue
            if w.process_cold_key(key):
                return True
        return False
    def process_mouse(self, event):
        """
        Route a mouse event to the child under it

        The first child (in insertion order) whose rectangle contains the
        point receives the event, translated into its own space.
        """
        bx, by = self.get_base()
        x, y = event.x - bx, event.y - by
        for w in self.children:
            if w.contains(x, y):
                w.process_mouse(translate(event, bx + w.x, by + w.y))
                return
    def size_changed(self):
        "Notify the size_changed_event handlers and resize the children"
        self.size_changed_event(self)
        self.do_size_changed()
    def do_size_changed(self):
        """
        Apply the children's fill flags and let them update themselves

        A horizontally filling child extends to the right edge of the
        client area, a vertically filling one to its bottom edge.
        """
        b = self.border
        for w in self.children:
            if w.fill & FILL_HORIZONTAL:
                w.w = max(0, self.w - b * 2 - w.x)
            if w.fill & FILL_VERTICAL:
                w.h = max(0, self.h - b * 2 - w.y)
            w.do_size_changed()
        self.decoration.size_changed(self)

class RootContainer(Container):
    """
    The top of a widget tree

    A root container maps coordinates to the screen unchanged, supplies
    the driver everything draws to, and the base colors of the
    application's palette. Top-level containers run by an application
    point at its root; it does not own them.
    """
    def __init__(self, app=None, driver=None, lines=24, cols=80):
        "Initializer"
        Container.__init__(self, 0, 0, cols, lines)
        self.container = None
        self._app = app
        self._driver = driver or NullDriver()
    @property
    def root(self):
        return self
    @property
    def app(self):
        return self._app
    @property
    def driver(self):
        return self._driver
    @property
    def container_colors(self):
        if self._app is not None and 'base' in self._app.palette:
            return self._app.palette['base']
        return DEFAULT_SCHEME
    @property
    def colors(self):
        return self.container_colors
    def move(self, line, col):
        self._driver.move(line, col)
    def container_move(self, line, col):
        self._driver.move(line, col)
    def container_base_move(self, line, col):
        self._driver.move(line, col)
    def resize(self, lines, cols):
        "Adopt the given screen size"
        self.w, self.h = cols, lines
    def redraw(self):
        "Blank the whole screen"
        self._driver.attrset(self.color_normal)
        self.clear()

NULL_CONTAINER = RootContainer()
