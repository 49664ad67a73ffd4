# coding= utf-8
"""
Implements a small Forth machine: integer literals, the primitives + - * /
DUP DROP SWAP OVER, and user-defined words built out of those.

Usage should be as simple as:
    >>> import minforth
    >>> m = minforth.Machine()
    >>> m.process("5 4 +")
    [9]

Words are defined a line at a time with ``: NAME body ;``. A definition
captures the bodies of the words it uses as they are right then, so
redefining a word later never changes the words already built on it:
    >>> m.process(": FOO 5 ;")
    [9]
    >>> m.process(": BAR FOO ;")
    [9]
    >>> m.process(": FOO 6 ;")
    [9]
    >>> m.process("BAR FOO")
    [9, 5, 6]

Everything is case-insensitive. Failures are raised as :exc:`ForthError`
subclasses; :meth:`Machine.eval` wraps them into the usual ' ok' / ' ? ...'
prompt responses instead.
"""
from minforth.errors import *
from minforth.machine import *
from minforth.parser import Parser
from minforth.resolver import resolve
