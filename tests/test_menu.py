# -*- coding: ascii -*-

import curses

import pytest

from cwindows import Container, MenuBar, MenuBarItem, MenuItem, Button, \
    MouseEvent, FILL_BOTH, alt
from cwindows import keys
from cwindows.menu import strip_hotkey

def test_strip_hotkey():
    assert strip_hotkey('_File') == 'File'
    assert strip_hotkey('Save _as') == 'Save as'

def test_step_skips_separators_and_wraps():
    m = MenuBarItem('_Edit', [MenuItem('_Cut'), None, MenuItem('_Paste'),
                              None])
    m.step(1)
    assert m.current == 2
    m.step(1)
    assert m.current == 0
    m.step(-1)
    assert m.current == 2
    empty = MenuBarItem('_Nothing', [None])
    empty.step(1)
    assert empty.current == 0

@pytest.fixture
def chosen():
    return []

@pytest.fixture
def menubar(chosen):
    def action(name):
        return lambda: chosen.append(name)
    return MenuBar([
        MenuBarItem('_File', [MenuItem('_New', '', action('new')), None,
                              MenuItem('_Quit', '^C', action('quit'))]),
        MenuBarItem('_Help', [MenuItem('_About', '', action('about'))])])

@pytest.fixture
def main(app, menubar):
    main = Container(0, 0, 80, 24, fill=FILL_BOTH)
    main.add(Button(2, 3, 'Ok'))
    main.add(menubar)
    state = app.begin(main)
    yield main
    app.end(state)

def test_menubar_fills_the_top_line(main, menubar, driver):
    assert (menubar.x, menubar.y, menubar.w, menubar.h) == (0, 0, 80, 1)
    assert menubar.title_positions() == [1, 7]
    assert driver.text(0)[:11] == ' File  Help'
    assert not menubar.can_focus

def test_activate_chooses_after_loop(app, main, menubar, driver, chosen):
    driver.feed(curses.KEY_DOWN, '\n')
    menubar.activate(0)
    assert chosen == ['quit']
    assert menubar.selected is None
    assert app.toplevels == [main]
    assert menubar.container is main

def test_action_runs_after_menu_is_gone(app, main, menubar, driver):
    seen = []
    menubar.menus[1].children[0].action = \
        lambda: seen.append(list(app.toplevels))
    driver.feed('\n')
    menubar.activate(1)
    assert seen == [[main]]

def test_escape_cancels(main, menubar, driver, chosen):
    driver.feed(keys.KEY_ESC)
    menubar.activate(0)
    assert chosen == []
    assert menubar.selected is None

def test_ctrl_c_cancels(main, menubar, driver, chosen):
    driver.feed(keys.CTRL_C)
    menubar.activate(1)
    assert chosen == []

def test_left_wraps(main, menubar, driver, chosen):
    driver.feed(curses.KEY_LEFT, '\n')
    menubar.activate(0)
    assert chosen == ['about']

def test_accelerator_selects(main, menubar, driver, chosen):
    driver.feed('q')
    menubar.activate(0)
    assert chosen == ['quit']

def test_drop_down_is_drawn(app, main, menubar, driver):
    seen = []
    def snapshot():
        seen.append([driver.text(i) for i in range(6)])
        menubar.running = False
        return False
    app.add_idle(snapshot)
    menubar.activate(0)
    lines = seen[0]
    assert lines[1][0] == '+'
    assert lines[2][1:].startswith(' New ')
    assert lines[3][1:4] == '---'
    assert 'Quit' in lines[4] and '^C' in lines[4]

def test_f9_from_main_loop(app, main, driver, chosen):
    driver.feed(curses.KEY_F9, '\n')
    app.process_input()
    assert chosen == ['new']

def test_alt_letter_from_main_loop(app, main, driver, chosen):
    driver.feed(keys.KEY_ESC, 'h', '\n')
    app.process_input()
    assert chosen == ['about']

def test_title_click(app, main, menubar, driver, chosen):
    driver.feed('\n')
    menubar.process_mouse(MouseEvent(8, 0, curses.BUTTON1_CLICKED))
    assert chosen == ['about']

def test_hot_key_ignored_for_other_letters(menubar):
    assert not menubar.process_hot_key(alt('z'))
    assert not menubar.process_key(ord('x'))

def test_leading_separator_is_skipped(app, driver):
    chosen = []
    bar = MenuBar([MenuBarItem('_File', [None, MenuItem(
        '_Open', '', lambda: chosen.append('open'))])])
    main = Container(0, 0, 80, 24, fill=FILL_BOTH)
    main.add(bar)
    with app.begin(main):
        driver.feed('\n')
        bar.activate(0)
    assert chosen == ['open']
    assert bar.menus[0].current == 1

def test_return_on_separator_is_declined():
    m = MenuBarItem('_Edit', [None, None])
    bar = MenuBar([m])
    bar.selected = 0
    m.reset()
    assert m.current == 0
    assert not bar.process_key(ord('\n'))
