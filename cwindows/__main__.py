# -*- coding: ascii -*-

"""
A demonstration of cwindows

Run as "python -m cwindows". Set the CWINDOWS_LOG environment variable to
a file name to have the library's debugging output written there.
"""

import os
import sys
import time
import logging

from cwindows import *

def demo(app):
    # Both are stretched to the screen when run.
    main = Container(0, 0, 80, 24, fill=FILL_BOTH)
    win = main.add(Frame(0, 1, 80, 23, 'cwindows demo',
                         fill=FILL_BOTH))
    clock = win.add(TrimLabel(1, 0, 30, '', fill=FILL_HORIZONTAL))
    win.add(Label(1, 2, 'Name:'))
    name = win.add(Entry(8, 2, 30, 'Lorem ipsum'))
    check = win.add(CheckBox(1, 4, 'Shout'))
    provider = TextListProvider(['Item %d' % i for i in range(1, 51)],
                                allow_mark=True)
    win.add(ListView(1, 6, 30, 10, provider))
    def greet(button=None):
        text = 'Hello, %s!' % name.text
        if check.checked: text = text.upper()
        app.info('Greeting', text)
    def leave(button=None):
        main.running = False
    win.add(Button(34, 2, 'Greet', True, callback=greet))
    win.add(Button(34, 4, 'Quit', callback=leave))
    menu = MenuBar([
        MenuBarItem('_File', [MenuItem('_Greet', 'Alt-G', greet), None,
                              MenuItem('_Quit', '^C', leave)]),
        MenuBarItem('_Help', [MenuItem('_About', '', lambda: app.info(
            'About', 'cwindows demo\nPress F9 for the menu.'))])])
    main.add(menu)
    def tick(loop):
        clock.text = time.strftime('%Y-%m-%d %H:%M:%S')
        app.driver.refresh()
        return True
    app.add_timeout(1, tick)
    app.run(main)

def main():
    logfile = os.environ.get('CWINDOWS_LOG')
    if logfile:
        logging.basicConfig(filename=logfile, level=logging.DEBUG,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    app = Application()
    try:
        demo(app)
    except TerminalError as exc:
        sys.stderr.write('cwindows: %s\n' % exc)
        sys.exit(1)

if __name__ == '__main__': main()
