# coding= utf-8
import logging

from minforth.errors import (DivideByZero, ForthError, IllegalDefinition,
                             InsufficientOperands)
from minforth.parser import Parser
from minforth.resolver import (CALL, NUMBER, USER, canonical, expand,
                               parse_number, resolve)

logger = logging.getLogger(__name__)

BEGIN_DEFINITION = ':'
END_DEFINITION = ';'


def _divide(b, a):
    """ Integer division truncating toward zero, no floats involved. """
    if b == 0:
        raise DivideByZero()
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


class Machine(object):
    """
    A Forth machine. It has a data stack and a table of definitions, and
    evaluates one line at a time against them.

    A line that starts with ``:`` and ends with ``;`` defines a word; any other
    line is executed. Both the stack and the definitions carry over from one
    line to the next, including after a line that failed: whatever the line
    managed to do before the failure stays done.
    """
    def __init__(self):
        self.data_stack = []
        self.definitions = {}
        self.words = {}

        # Add basic math and stack handling
        self.add_stackmethod('+', lambda b, a: a + b)
        self.add_stackmethod('-', lambda b, a: a - b)
        self.add_stackmethod('*', lambda b, a: a * b)
        self.add_stackmethod('/', _divide)
        self.add_stackmethod('SWAP', lambda b, a: (b, a))
        self.add_stackmethod('DUP', lambda a: (a, a))
        self.add_stackmethod('OVER', lambda b, a: (a, b, a))
        self.add_stackmethod('DROP', lambda a: None)

    def add_stackmethod(self, word, func):
        """
        Turns a given function `func` into a stack-consumer.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack [1, 2] the call to a
        two-argument function will be func(2, 1). The function's return value
        (or values) are assumed to go back on the stack.

        The stack is only touched once `func` has returned, so a word that
        runs short of values or raises leaves the stack exactly as it was.
        """
        num_args = func.__code__.co_argcount

        def stack_helper():
            if len(self.data_stack) < num_args:
                raise InsufficientOperands(word, num_args, self.data_stack)
            args = self.data_stack[:-num_args - 1:-1]
            ret = func(*args)
            del self.data_stack[-num_args:]
            if ret is None:
                return
            try:
                self._push_all(ret)
            except TypeError:
                self._push(ret)
        self.words[canonical(word)] = stack_helper

    def _push(self, val):
        self.data_stack.append(val)

    def _push_all(self, ls):
        self.data_stack.extend(ls)

    def _resolve(self, word):
        if word in (BEGIN_DEFINITION, END_DEFINITION):
            raise IllegalDefinition('misplaced %s' % word)
        return resolve(word, self.definitions, self.words)

    def process(self, line):
        """
        Evaluate one line and return the resulting stack, bottom first.

        Failures are raised as :exc:`ForthError` subclasses and end the line
        right where they happen.
        """
        words = Parser(line).words()
        if words and words[0] == BEGIN_DEFINITION:
            self.define(words)
        else:
            for word in words:
                self.execute(self._resolve(word))
        return list(self.data_stack)

    def define(self, words):
        """
        Handle a definition line, given as its list of words including the
        surrounding ``:`` and ``;``.

        The body is resolved against the definitions as they stand before the
        new word goes in, so ``: FOO FOO 1 + ;`` builds on the previous FOO.
        """
        if len(words) < 2:
            raise IllegalDefinition('no name given')
        if words[-1] != END_DEFINITION:
            raise IllegalDefinition('missing %s' % END_DEFINITION)
        if len(words) < 3:
            raise IllegalDefinition('no name given')

        name = words[1]
        if parse_number(name) is not None:
            raise IllegalDefinition('cannot redefine number %s' % name)
        if name in (BEGIN_DEFINITION, END_DEFINITION):
            raise IllegalDefinition('cannot redefine %s' % name)

        body = expand([self._resolve(word) for word in words[2:-1]])
        name = canonical(name)
        if name in self.definitions:
            logger.debug('redefining %s as %r', name, body)
        else:
            logger.debug('defining %s as %r', name, body)
        self.definitions[name] = body

    def execute(self, operation):
        """
        Run a single resolved operation. User words are unwound onto a pending
        stack rather than recursed into, so nesting depth costs no Python
        frames.
        """
        pending = [operation]
        while pending:
            kind, value = pending.pop()
            if kind == NUMBER:
                self._push(value)
            elif kind == CALL:
                self.words[value]()
            elif kind == USER:
                pending.extend(reversed(value[1]))
            else:
                raise ForthError('unknown operation type: %s' % kind)

    def tokenize(self, text):
        """ Resolve every word of `text` without running any of them. """
        return [self._resolve(word) for word in Parser(text).words()]

    def eval(self, text=''):
        """
        Evaluate `text` line by line, the way a Forth prompt would, and return
        ' ok' or ' ? ' followed by what went wrong. Evaluation stops at the
        first failing line; nothing is raised.
        """
        try:
            for line in text.splitlines():
                self.process(line)
        except ForthError as e:
            return ' ? ' + str(e)
        return ' ok'


Evaluator = Machine

