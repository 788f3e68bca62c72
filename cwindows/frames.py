# -*- coding: ascii -*-

"""
Bordered containers

A container's border is drawn by its Decoration. FrameDecoration draws a
box with a title in the top edge; DialogDecoration draws an inset box
with a centered title, keeps its container centered on the screen, lays
out a row of buttons along its bottom, and makes Escape close the dialog.

Frame and Dialog are Containers preconfigured with these decorations.
"""

from . import keys as _keys
from .core import Container, Decoration

BUTTON_SPACE = 3

def draw_frame(container, line, col, w, h):
    """
    Draw a box with the given corner and size

    line and col are relative to container's top-left corner (not its
    client area). Boxes smaller than 2x2 are not drawn.
    """
    if w < 2 or h < 2: return
    d = container.driver
    acs = d.acs
    container.container_base_move(line, col)
    d.addch(acs['ulcorner'])
    for i in range(w - 2):
        d.addch(acs['hline'])
    d.addch(acs['urcorner'])
    for i in range(1, h - 1):
        container.container_base_move(line + i, col)
        d.addch(acs['vline'])
        container.container_base_move(line + i, col + w - 1)
        d.addch(acs['vline'])
    container.container_base_move(line + h - 1, col)
    d.addch(acs['llcorner'])
    for i in range(w - 2):
        d.addch(acs['hline'])
    d.addch(acs['lrcorner'])

class FrameDecoration(Decoration):
    """
    A one-cell box around the container, with a title

    Attributes:
    title: The text shown in the top edge of the box.
    """
    border = 1
    def __init__(self, title=''):
        "Initializer"
        self.title = title
    def draw(self, container):
        "Clear the container and draw the box"
        d = container.driver
        colors = container.container_colors
        d.attrset(colors.normal)
        container.clear()
        draw_frame(container, 0, 0, container.w, container.h)
        if not self.title: return
        if container.has_focus:
            d.attrset(colors.focus)
        container.container_base_move(0, 1)
        d.addstr(' ' + self.title[:max(container.w - 4, 0)] + ' ')

class DialogDecoration(Decoration):
    """
    The decoration of modal dialogs

    The box is inset by one cell, leaving a margin of the dialog's color
    around it; the client area starts inside the box. The container is
    centered horizontally and placed at a third of the free space
    vertically whenever it is prepared or resized.

    Attributes:
    title  : The text shown centered in the top edge of the box.
    buttons: The buttons arranged in the bottom row (see add_button()).
    """
    border = 2
    def __init__(self, title=''):
        "Initializer"
        self.title = title
        self.buttons = []
    def add_button(self, container, button):
        """
        Add button to container and to the bottom row

        Returns the button.
        """
        self.buttons.append(button)
        container.add(button)
        self.layout_buttons(container)
        return button
    def layout_buttons(self, container):
        """
        Arrange the buttons in the bottom row

        Buttons are placed in insertion order with fixed gaps, and the row
        as a whole is centered.
        """
        if not self.buttons: return
        total = (sum(b.w for b in self.buttons) +
                 BUTTON_SPACE * (len(self.buttons) - 1))
        x = (container.w - total) // 2
        for b in self.buttons:
            b.x = x
            b.y = container.h - 5
            x += b.w + BUTTON_SPACE
    def center(self, container):
        "Position container relative to the screen"
        root = container.root
        container.x = (root.w - container.w) // 2
        container.y = (root.h - container.h) // 3
    def draw(self, container):
        "Clear the container and draw the inset box with the title"
        d = container.driver
        d.attrset(container.container_colors.normal)
        container.clear()
        draw_frame(container, 1, 1, container.w - 2, container.h - 2)
        if not self.title: return
        container.container_base_move(1, (container.w - len(self.title)) // 2)
        d.addstr(' ' + self.title + ' ')
    def prepare(self, container):
        self.center(container)
        self.layout_buttons(container)
    def size_changed(self, container):
        self.center(container)
        self.layout_buttons(container)
    def process_key(self, container, key):
        "Close the dialog on Escape"
        if key == _keys.KEY_ESC:
            container.running = False
            return True
        return False

class Frame(Container):
    """
    A container with a box around it

    Attributes:
    title: The title (shared with the decoration).
    """
    def __init__(self, x, y, w, h, title='', **kwds):
        "Initializer"
        kwds.setdefault('decoration', FrameDecoration(title))
        Container.__init__(self, x, y, w, h, **kwds)
    @property
    def title(self):
        return self.decoration.title
    @title.setter
    def title(self, value):
        self.decoration.title = value

class Dialog(Container):
    """
    A modal window centered on the screen

    Dialogs draw with the "dialog" scheme of the application's palette
    unless another is given; run one with Application.run().
    """
    def __init__(self, w, h, title='', **kwds):
        "Initializer"
        kwds.setdefault('decoration', DialogDecoration(title))
        kwds.setdefault('scheme', 'dialog')
        Container.__init__(self, 0, 0, w, h, **kwds)
        self.decoration.center(self)
    @property
    def title(self):
        return self.decoration.title
    @title.setter
    def title(self, value):
        self.decoration.title = value
    @property
    def buttons(self):
        return self.decoration.buttons
    def add_button(self, button):
        "Add button to the dialog's bottom row; returns it"
        return self.decoration.add_button(self, button)
