# coding= utf-8
"""
Turns words into operations.

An operation is a ``(kind, value)`` tuple, one of:

    ('NUMBER', 42)                  push a literal
    ('CALL', 'DUP')                 run a built-in primitive
    ('USER', ('NAME', body))        run a user word's body

A user word's body is a tuple of NUMBER and CALL operations only: whatever
user words it mentioned were expanded when it was defined, so a USER operation
never ends up inside a body. Bodies are tuples so that the snapshot a resolver
hands out can't be altered by a later redefinition.
"""
import re

from minforth.errors import UnknownCommand

NUMBER = 'NUMBER'
CALL = 'CALL'
USER = 'USER'

BUILTINS = frozenset(['+', '-', '*', '/', 'DUP', 'OVER', 'DROP', 'SWAP'])

_NUMBER_RE = re.compile(r'^[+-]?[0-9]+$')


def canonical(word):
    return word.upper()


def parse_number(word):
    """ A base-10 signed integer, or None if `word` isn't one. """
    if _NUMBER_RE.match(word) is None:
        return None
    return int(word)


def resolve(word, definitions, builtins=BUILTINS):
    """
    Classify `word` against the current `definitions` (canonical name to
    body).

    User words shadow built-ins of the same spelling, and both shadow nothing
    numeric since numbers can't be defined in the first place. Anything that
    isn't one of the three raises :exc:`UnknownCommand`.
    """
    name = canonical(word)
    if name in definitions:
        return USER, (name, tuple(definitions[name]))
    if name in builtins:
        return CALL, name

    number = parse_number(word)
    if number is None:
        raise UnknownCommand(word)
    return NUMBER, number


def expand(operations):
    """
    Flatten resolved operations into a body with no USER references. User
    bodies are already flat, so one level of splicing is all it takes.
    """
    body = []
    for kind, value in operations:
        if kind == USER:
            body.extend(value[1])
        else:
            body.append((kind, value))
    return tuple(body)
