# -*- coding: ascii -*-

import curses

import pytest

from cwindows import Widget, Container, Frame, Button, Label, Handlers, \
    MouseEvent, ColorScheme, NULL_CONTAINER, FILL_HORIZONTAL, FILL_VERTICAL, \
    FILL_BOTH

from conftest import Recorder

def test_negative_size():
    with pytest.raises(ValueError):
        Widget(0, 0, -1, 1)
    with pytest.raises(ValueError):
        Container(0, 0, 1, -1)

def test_detached_widget_uses_null_container():
    w = Widget(3, 4, 5, 1)
    assert w.container is NULL_CONTAINER
    assert w.app is None
    # Drawing while detached goes nowhere.
    w.redraw()

def test_handlers_order():
    calls = []
    h = Handlers()
    first = h.connect(lambda x: calls.append(('first', x)))
    h.connect(lambda x: calls.append(('second', x)))
    h(1)
    h.disconnect(first)
    h(2)
    assert calls == [('first', 1), ('second', 1), ('second', 2)]
    assert len(h) == 1

def test_add_and_remove():
    c = Container(0, 0, 20, 10)
    label = c.add(Label(0, 0, 'text'))
    assert label.container is c
    assert not c.can_focus
    button = c.add(Button(0, 1, 'Ok'))
    assert c.can_focus
    c.set_focus(button)
    assert c.focused is button and button.has_focus
    c.remove(button)
    assert c.focused is None
    assert not button.has_focus
    assert button.container is NULL_CONTAINER
    assert not c.can_focus
    with pytest.raises(ValueError):
        c.remove(button)
    c.remove_all()
    assert c.children == []
    assert label.container is NULL_CONTAINER

def test_add_moves_between_containers():
    a, b = Container(0, 0, 10, 10), Container(0, 0, 10, 10)
    w = a.add(Button(0, 0, 'X'))
    b.add(w)
    assert w.container is b
    assert a.children == [] and b.children == [w]
    assert not a.can_focus

def test_set_focus_rules():
    c = Container(0, 0, 20, 10)
    label = c.add(Label(0, 0, 'text'))
    b1 = c.add(Button(0, 1, 'One'))
    b2 = c.add(Button(0, 2, 'Two'))
    c.set_focus(label)
    assert c.focused is None
    c.set_focus(b1)
    c.set_focus(b2)
    assert not b1.has_focus and b2.has_focus
    with pytest.raises(ValueError):
        c.set_focus(Button(0, 0, 'Stranger'))

def make_scenario():
    top = Container(0, 0, 80, 24)
    frame = top.add(Frame(0, 0, 40, 24, 'A'))
    ok = frame.add(Button(1, 1, 'Ok'))
    cancel = frame.add(Button(1, 3, 'Cancel'))
    return top, frame, ok, cancel

def test_focus_traversal_wraps_by_retrying():
    top, frame, ok, cancel = make_scenario()
    top.focus_first()
    assert ok.has_focus and frame.has_focus
    assert top.focus_next()
    assert cancel.has_focus and not ok.has_focus
    assert not top.focus_next()
    assert top.focused is None and frame.focused is None
    assert top.focus_next()
    assert ok.has_focus

def test_focus_prev_enters_containers_from_the_end():
    top = Container(0, 0, 80, 24)
    first = top.add(Button(0, 0, 'First'))
    frame = top.add(Frame(0, 2, 40, 10, 'B'))
    inner1 = frame.add(Button(1, 1, 'Inner'))
    inner2 = frame.add(Button(1, 2, 'Other'))
    top.focus_last()
    assert inner2.has_focus
    top.set_focus(first)
    assert not top.focus_prev()
    assert top.focus_prev()
    assert inner2.has_focus
    assert top.focus_prev()
    assert inner1.has_focus
    assert top.focus_prev()
    assert first.has_focus

def test_focus_next_without_focusable_children():
    top = Container(0, 0, 10, 10)
    top.add(Label(0, 0, 'x'))
    assert not top.focus_next()
    assert not top.focus_prev()

def test_nested_set_focus_focuses_ancestors():
    top = Container(0, 0, 80, 24)
    a = top.add(Frame(0, 0, 20, 10, 'A'))
    b = top.add(Frame(20, 0, 20, 10, 'B'))
    a.add(Button(1, 1, 'Aa'))
    target = b.add(Button(1, 1, 'Bb'))
    top.focus_first()
    assert top.focused is a
    b.set_focus(target)
    assert top.focused is b
    assert target.has_focus and not a.has_focus

def test_key_dispatch_goes_to_focused_child():
    log = []
    c = Container(0, 0, 10, 10)
    r1 = c.add(Recorder(log=log, key={1}))
    r2 = c.add(Recorder(log=log))
    c.set_focus(r2)
    assert not c.process_key(1)
    assert log == [('key', r2, 1)]
    c.set_focus(r1)
    assert c.process_key(1)

def test_hot_and_cold_keys_reach_focused_child_first():
    log = []
    c = Container(0, 0, 10, 10)
    r1 = c.add(Recorder(log=log))
    r2 = c.add(Recorder(log=log, cold={5}))
    r3 = c.add(Recorder(log=log))
    c.set_focus(r2)
    assert not c.process_hot_key(5)
    assert log == [('hot', r2, 5), ('hot', r1, 5), ('hot', r3, 5)]
    del log[:]
    c.set_focus(r3)
    assert c.process_cold_key(5)
    assert log == [('cold', r3, 5), ('cold', r1, 5), ('cold', r2, 5)]

def test_coordinates_resolve_through_borders(root, driver):
    frame = root.add(Frame(5, 3, 20, 6, 'F'))
    label = frame.add(Label(1, 1, 'hi'))
    label.redraw()
    assert driver.text(5)[7:9] == 'hi'

def test_plain_container_has_no_offset(root, driver):
    c = root.add(Container(10, 2, 20, 5))
    assert c.get_base() == (0, 0)
    c.add(Label(1, 1, 'xy')).redraw()
    assert driver.text(3)[11:13] == 'xy'

def test_fill_policies():
    frame = Frame(0, 0, 40, 12, 'F')
    horiz = frame.add(Label(2, 0, 'abc', fill=FILL_HORIZONTAL))
    vert = frame.add(Widget(0, 3, 1, 1, fill=FILL_VERTICAL))
    both = frame.add(Widget(4, 4, 1, 1, fill=FILL_BOTH))
    fixed = frame.add(Widget(0, 0, 3, 3))
    frame.size_changed()
    assert (horiz.w, horiz.h) == (36, 1)
    assert (vert.w, vert.h) == (1, 7)
    assert (both.w, both.h) == (34, 6)
    assert (fixed.w, fixed.h) == (3, 3)

def test_nested_fill_sees_new_size():
    top = Container(0, 0, 80, 24)
    frame = top.add(Frame(0, 0, 10, 10, 'F', fill=FILL_BOTH))
    inner = frame.add(Widget(0, 0, 1, 1, fill=FILL_HORIZONTAL))
    top.size_changed()
    assert frame.w == 80 and frame.h == 24
    assert inner.w == 78

def test_size_changed_event_fires_first():
    order = []
    class Child(Widget):
        def do_size_changed(self):
            order.append('child')
    c = Container(0, 0, 10, 10)
    c.add(Child(0, 0, 1, 1))
    c.size_changed_event.connect(lambda cont: order.append('event'))
    c.size_changed()
    assert order == ['event', 'child']

def test_mouse_routing():
    frame = Frame(0, 0, 30, 10, 'F')
    a = frame.add(Recorder(2, 1, 5, 2))
    b = frame.add(Recorder(2, 1, 10, 3))
    frame.process_mouse(MouseEvent(4, 3, curses.BUTTON1_CLICKED))
    assert a.mouse == [MouseEvent(1, 1, curses.BUTTON1_CLICKED)]
    assert b.mouse == []
    frame.process_mouse(MouseEvent(10, 3, curses.BUTTON1_CLICKED))
    assert b.mouse == [MouseEvent(7, 1, curses.BUTTON1_CLICKED)]
    # On the border, outside every child.
    frame.process_mouse(MouseEvent(0, 0, curses.BUTTON1_CLICKED))
    assert len(a.mouse) == 1 and len(b.mouse) == 1

def test_clipping_skips_children_outside(root, driver):
    frame = root.add(Frame(0, 0, 10, 5, 'F'))
    frame.add(Label(20, 0, 'outside'))
    frame.add(Label(0, 0, 'in'))
    frame.redraw()
    assert 'outside' not in ''.join(driver.text(i) for i in range(24))
    assert driver.text(1)[1:3] == 'in'

def test_colors_inherit_through_owner_chain(root):
    c = root.add(Container(0, 0, 10, 10))
    w = c.add(Widget(0, 0, 1, 1))
    assert w.color_focus == curses.A_REVERSE
    c.scheme = ColorScheme(1, 2, 3, 4)
    assert (w.color_normal, w.color_focus, w.color_hot_normal,
            w.color_hot_focus) == (1, 2, 3, 4)
