''' _exceptions.py - module specific exceptions

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

class InvalidArgumentException(Exception):
    ''' raised when a function receives an invalid argument '''
    pass


class ParseError(Exception):
    ''' base class for all errors caused by the text being parsed

    The position is the 0-based character offset in the parsed text, line and
    column are 1-based. Any of these may be None when the error does not
    relate to a location in the source (i.e. a parse tree without tokens).
    '''

    def __init__(s, message, position=None, line=None, column=None,
                 snippet=None):
        super().__init__(message)
        s.message = message
        s.position = position
        s.line = line
        s.column = column
        s.snippet = snippet

    def __str__(s):
        if s.line is None:
            return s.message
        location = '%s (line %d, column %d)' % (s.message, s.line, s.column)
        if s.snippet:
            return '%s: %r' % (location, s.snippet)
        return location


class SQLSyntaxError(ParseError):
    ''' raised when the text does not match the statement grammar '''

    def __init__(s, message, expected=(), **kwargs):
        super().__init__(message, **kwargs)
        s.expected = tuple(expected)


class UnknownColumnTypeError(ParseError):
    ''' raised when a column type is not one of the supported type names '''

    def __init__(s, token, **kwargs):
        super().__init__('unknown column type %r' % (token,), **kwargs)
        s.token = token


class StructuralError(ParseError):
    ''' raised when a parse tree lacks an element a statement requires '''
    pass
