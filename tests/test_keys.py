# -*- coding: ascii -*-

import curses

from cwindows import keys

def test_alt_chords():
    assert keys.alt('x') == ord('x') | keys.KEY_ALT
    assert keys.alt(ord('x')) == keys.alt('x')
    assert keys.is_alt(keys.alt('x')) == ord('x')
    assert keys.is_alt(ord('x')) == 0

def test_returns():
    assert keys.is_return(10)
    assert keys.is_return(13)
    assert keys.is_return(curses.KEY_ENTER)
    assert not keys.is_return(keys.KEY_SPACE)

def test_printable():
    assert keys.is_printable(ord('a'))
    assert keys.is_printable(keys.KEY_SPACE)
    assert not keys.is_printable(keys.KEY_DEL)
    assert not keys.is_printable(keys.CTRL_A)
    assert not keys.is_printable(curses.KEY_LEFT)

def test_hotkey_of():
    assert keys.hotkey_of('_File') == 'F'
    assert keys.hotkey_of('E_xit') == 'x'
    assert keys.hotkey_of('Plain') is None
    assert keys.hotkey_of('Trailing_') is None

def test_matches_hotkey():
    assert keys.matches_hotkey(ord('x'), 'X')
    assert keys.matches_hotkey(keys.alt('X'), 'x')
    assert not keys.matches_hotkey(ord('y'), 'x')
    assert not keys.matches_hotkey(curses.KEY_F9, 'x')
    assert not keys.matches_hotkey(ord('x'), None)
