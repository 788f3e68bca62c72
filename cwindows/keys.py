# -*- coding: ascii -*-

"""
Key codes understood by cwindows

Keys are plain integers as returned by curses' getch(); the special keys
(arrows, function keys, ...) are the curses KEY_* constants and are used
directly from the curses module. This module adds names for the control
characters the toolkit reacts to, and the encoding of Alt chords: a key
pressed together with Alt arrives as Escape followed by that key, and is
handed to widgets as the key's code with KEY_ALT or-ed in.
"""

import curses as _curses

KEY_TAB = 9
KEY_ESC = 27
KEY_DEL = 127
KEY_SPACE = 32
KEY_RETURNS = (10, 13, _curses.KEY_ENTER)

CTRL_A = 1
CTRL_B = 2
CTRL_C = 3
CTRL_D = 4
CTRL_E = 5
CTRL_F = 6
CTRL_K = 11
CTRL_N = 14
CTRL_P = 16
CTRL_V = 22
CTRL_Y = 25
CTRL_Z = 26

# Well above curses' KEY_MAX (0o777).
KEY_ALT = 0x2000

def alt(key):
    "Return the Alt chord of key"
    if isinstance(key, str): key = ord(key)
    return key | KEY_ALT

def is_alt(key):
    """
    Return the base key of an Alt chord, or 0 if key is not one
    """
    if key & KEY_ALT:
        return key & ~KEY_ALT
    return 0

def is_return(key):
    "Return whether key is one of the codes a Return keypress produces"
    return key in KEY_RETURNS

def is_printable(key):
    "Return whether key denotes a printable (Latin-1) character"
    return 32 <= key < 256 and key != KEY_DEL

def hotkey_of(text):
    """
    Return the accelerator character of text, or None

    The accelerator is the character immediately following the first
    underscore of text, as in "_Open" or "E_xit".
    """
    idx = text.find('_')
    if idx == -1 or idx + 1 >= len(text):
        return None
    return text[idx + 1]

def matches_hotkey(key, ch):
    "Return whether key (possibly an Alt chord) selects the hot letter ch"
    if ch is None: return False
    base = is_alt(key) or key
    if not 0 < base < 256: return False
    return chr(base).upper() == ch.upper()
