import re


WHITESPACE = r'[ \t\n\r\f\v]*'
WORD = r'[^ \t\n\r\f\v]+'


class Parser(object):
    """
    Very simple Forth parser -- not much more than a few primitives useful for
    consuming an input string one whitespace-separated word at a time.

    The parser is stateful, in as much as each instance thereof is given an
    initial string to operate on, and calls to parse_whatever will advance the
    parser's position within that string, if necessary (thus, the next call
    will start from where the previous left off).

    The parser is not a compiler nor an interpreter: it knows nothing about
    numbers, built-in words or definitions. Its output is a flat sequence of
    words, which the :class:`Machine` resolves however it sees fit.

    The parse_* methods raise :exc:`StopIteration` when the string has been
    completely consumed; at that point, the current :class:`Parser` instance
    may be thrown away and a fresh one made for the next bits of input.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex. The
        regex is applied to a slice of self.text starting from self.pos and
        ending at the end of the string.

        Note that matches are only ever expected at the start of the string
        slice.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.match(pattern, self.text[self.pos:])
        if found is None:
            return None
        self.pos += found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(WHITESPACE)

    def parse_word(self):
        return self._consume(WORD)

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                word = self.next_word()
            except StopIteration:
                return
            yield word

    def words(self):
        return list(self.generate())
