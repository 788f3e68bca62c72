# -*- coding: ascii -*-

import curses

from cwindows import Container, Label, TrimLabel, Entry, Button, CheckBox, \
    MouseEvent, FILL_HORIZONTAL, alt
from cwindows import keys
from cwindows.widgets import trim_middle

def test_label_text_replaces_old_text(root, driver):
    label = root.add(Label(2, 1, 'longer text'))
    label.redraw()
    assert driver.text(1)[2:13] == 'longer text'
    label.text = 'short'
    assert driver.text(1)[2:13] == 'short      '
    assert label.text == 'short'

def test_label_color(root, driver):
    label = root.add(Label(0, 0, 'x', color=curses.A_BOLD))
    label.redraw()
    assert driver.attr_at(0, 0) == curses.A_BOLD

def test_trim_middle():
    assert trim_middle('abcdefghijklmnop', 10) == 'abc...mnop'
    assert trim_middle('short', 10) == 'short'
    assert trim_middle('abcdefgh', 4) == 'abcd'

def test_trim_label_follows_container():
    c = Container(0, 0, 12, 1)
    label = c.add(TrimLabel(0, 0, 20, 'abcdefghijklmnopqrstuvwxyz',
                            fill=FILL_HORIZONTAL))
    assert label.text == 'abcdefghijklmnopqrstuvwxyz'
    c.size_changed()
    assert label.w == 12
    assert label._text == 'abcd...vwxyz'
    assert len(label._text) == 12

def test_entry_editing():
    e = Entry(0, 0, 20, 'hello')
    edits = []
    e.changed.connect(lambda entry: edits.append(entry.text))
    assert e.point == 5
    assert e.process_key(keys.CTRL_A)
    assert e.point == 0
    e.process_key(ord('X'))
    assert e.text == 'Xhello' and e.point == 1
    e.process_key(keys.CTRL_E)
    e.process_key(keys.KEY_DEL)
    assert e.text == 'Xhell'
    e.process_key(curses.KEY_LEFT)
    e.process_key(curses.KEY_LEFT)
    e.process_key(keys.CTRL_D)
    assert e.text == 'Xhel'
    e.process_key(keys.CTRL_A)
    e.process_key(keys.CTRL_F)
    e.process_key(keys.CTRL_K)
    assert e.text == 'X' and e.kill == 'hel'
    e.process_key(keys.CTRL_Y)
    assert e.text == 'Xhel' and e.point == 4
    assert edits == ['Xhello', 'Xhell', 'Xhel', 'X', 'Xhel']

def test_entry_declines_control_keys():
    e = Entry(0, 0, 10)
    assert not e.process_key(keys.KEY_TAB)
    assert not e.process_key(curses.KEY_F1)
    assert e.can_focus

def test_entry_scrolls_to_edit_point(root, driver):
    e = root.add(Entry(0, 0, 5))
    for ch in 'abcdefg':
        e.process_key(ord(ch))
        assert e.first <= e.point < e.first + e.w
    assert driver.text(0)[:5] == 'efg  '
    assert driver.cursor == (0, 3)

def test_button_labels():
    b = Button(0, 0, 'Ok')
    assert b.label == '[ Ok ]' and b.w == 6
    assert b.hot_key == 'O' and b.hot_pos == 2
    d = Button(0, 0, 'Ok', True)
    assert d.label == '[< Ok >]' and d.w == 8
    assert d.hot_pos == 3

def test_button_keys():
    clicks = []
    c = Container(0, 0, 20, 5)
    b = c.add(Button(0, 0, 'Ok', callback=clicks.append))
    other = c.add(Button(0, 1, 'Cancel'))
    c.set_focus(other)
    for key in (10, keys.KEY_SPACE, ord('o')):
        assert b.process_key(key)
    assert not b.process_key(ord('x'))
    assert len(clicks) == 3
    assert not b.process_cold_key(10)
    assert not b.process_hot_key(ord('o'))
    assert b.process_hot_key(alt('o'))
    assert c.focused is b
    assert len(clicks) == 4

def test_default_button_takes_cold_return():
    clicks = []
    b = Button(0, 0, 'Ok', True, callback=clicks.append)
    assert b.process_cold_key(10)
    assert clicks == [b]

def test_button_mouse():
    c = Container(0, 0, 20, 5)
    c.add(Button(0, 1, 'Cancel'))
    b = c.add(Button(0, 0, 'Ok'))
    clicks = []
    b.clicked.connect(clicks.append)
    c.process_mouse(MouseEvent(2, 0, curses.BUTTON1_CLICKED))
    assert clicks == [b]
    assert c.focused is b

def test_button_draws_hot_letter(root, driver):
    b = root.add(Button(0, 0, 'Ok'))
    b.redraw()
    assert driver.text(0)[:6] == '[ Ok ]'
    assert driver.attr_at(0, 2) == curses.A_BOLD
    assert driver.attr_at(0, 3) == curses.A_NORMAL

def test_checkbox(root, driver):
    toggles = []
    cb = root.add(CheckBox(0, 0, 'Verbose'))
    cb.toggled.connect(lambda box: toggles.append(box.checked))
    cb.redraw()
    assert driver.text(0)[:11] == '[ ] Verbose'
    assert cb.process_key(keys.KEY_SPACE)
    assert driver.text(0)[:11] == '[x] Verbose'
    assert cb.process_hot_key(alt('v'))
    assert not cb.process_hot_key(ord('v'))
    assert toggles == [True, False]
