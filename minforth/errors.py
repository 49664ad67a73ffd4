class ForthError(Exception):
    """ Base class for everything the :class:`Machine` refuses to do. """
    pass


class UnknownCommand(ForthError):
    def __init__(self, name):
        super(UnknownCommand, self).__init__('undefined word: %s' % name)
        self.name = name


class InsufficientOperands(ForthError):
    """
    Raised when a word wants more values than the stack holds. Carries the
    word's name, how many values it wanted and a copy of the stack as it stood
    when the word gave up.
    """
    def __init__(self, word, needed, stack):
        self.word = word
        self.needed = needed
        self.stack = list(stack)
        super(InsufficientOperands, self).__init__(
            'stack underflow: %s needs %d, stack is %r'
            % (word, needed, self.stack))


class DivideByZero(ForthError):
    def __init__(self):
        super(DivideByZero, self).__init__('division by zero')


class IllegalDefinition(ForthError):
    def __init__(self, reason):
        super(IllegalDefinition, self).__init__('illegal definition: %s' % reason)
        self.reason = reason
