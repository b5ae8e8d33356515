''' _grammar.py - grammar for the CREATE TABLE statement

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

The modgrammar module is used to define the grammar. The statement that is
recognized has the following form:

    CREATE TABLE <name> { <column> <type>, ... }

where every type is one of the names in ColumnType (INT, TEXT or BOOL).
Keywords and type names are case-sensitive, names consist of ascii letters,
digits and underscores and do not start with a digit. Whitespace (space, tab,
carriage return and newline) may occur between any two tokens and a single
trailing comma is allowed after the last column.

The result of recognize() is a ParseTree: the nodes of the modgrammar result
that carry a Rule, flattened in document order, each with the exact text it
matched and its position in the source. '''

from modgrammar import Grammar as _Grammar
from modgrammar import WORD as _W
from modgrammar import LITERAL as _L
from modgrammar import OR as _OR
from modgrammar import OPTIONAL as _OPTIONAL
from modgrammar import LIST_OF as _LIST_OF
from modgrammar import NOT_FOLLOWED_BY as _NOT_FOLLOWED_BY
from modgrammar import EOF as _EOF
from modgrammar import ParseError as _ParseError
from collections import namedtuple as _nt
from enum import Enum as _Enum
import logging as _logging
import re as _re

from ._structures import ColumnType as _ColumnTypeValue
from ._exceptions import InvalidArgumentException as _InvalidArgumentException
from ._exceptions import SQLSyntaxError as _SQLSyntaxError
from ._exceptions import UnknownColumnTypeError as _UnknownColumnTypeError

_log = _logging.getLogger(__name__)


class Rule(_Enum):
    ''' the grammar rules that are reported in a ParseTree '''

    STATEMENT = 'statement'
    TABLE_NAME = 'table_name'
    COLUMN_LIST = 'column_list'
    COLUMN_DEF = 'column_def'
    COLUMN_NAME = 'column_name'
    COLUMN_TYPE = 'column_type'


# namedtuple for a single rule-tagged node, start and end are offsets in the
# source (end is exclusive), depth is the number of tagged ancestors
Token = _nt('Token', 'rule text start end depth')


class ParseTree(_nt('ParseTree', 'source tokens')):
    ''' the recognized statement: the source text and a tuple of Tokens in
    document order '''

    __slots__ = ()

    def find_all(s, rule):
        ''' Returns all tokens for the given rule, in document order. '''
        return [t for t in s.tokens if t.rule is rule]


###########
# Grammar #
###########

# set default behavior for whitespace handling to explicit
grammar_whitespace_mode = 'explicit'


class _Whitespace(_Grammar):
    grammar = _W(' \t\r\n', fullmatch=True)
    grammar_desc = 'whitespace'
    grammar_noteworthy = False


class _Identifier(_Grammar):
    ''' Grammar for table and column names. '''
    grammar = _W('A-Za-z_', 'A-Za-z0-9_', fullmatch=True)
    grammar_desc = 'identifier'


class _TableName(_Grammar):
    grammar = _Identifier
    grammar_desc = 'table name'
    rule = Rule.TABLE_NAME


class _ColumnName(_Grammar):
    grammar = _Identifier
    grammar_desc = 'column name'
    rule = Rule.COLUMN_NAME


class _ColumnType(_Grammar):
    ''' Grammar for the type names in ColumnType.

    The type name may not be followed directly by another name character, so
    that INTEGER fails here (at the start of the type) instead of after INT.
    '''

    grammar = (_OR(*[_L(t.token) for t in _ColumnTypeValue]),
               _NOT_FOLLOWED_BY(_W('A-Za-z0-9_')))
    grammar_desc = 'column type (%s)' % ', '.join(t.token
                                                  for t in _ColumnTypeValue)
    # report failures as a failing column type, not as a failing literal
    grammar_error_override = True
    rule = Rule.COLUMN_TYPE


class _ColumnDef(_Grammar):
    grammar = (_OPTIONAL(_Whitespace),
               _ColumnName,
               _Whitespace,
               _ColumnType,
               _OPTIONAL(_Whitespace))
    rule = Rule.COLUMN_DEF


class _TrailingComma(_Grammar):
    grammar = (_L(','), _OPTIONAL(_Whitespace))


class _ColumnList(_Grammar):
    # NOTE: OPTIONAL collapses into its content and drops literals when it
    # holds more than one element. Every OPTIONAL here holds one element, so
    # the lengths of the child elements always add up to the parent length.
    grammar = (_LIST_OF(_ColumnDef, sep=','),
               _OPTIONAL(_TrailingComma))
    rule = Rule.COLUMN_LIST


class _CreateTable(_Grammar):
    ''' Grammar for the CREATE TABLE statement. '''

    grammar = (_OPTIONAL(_Whitespace),
               _L('CREATE'),
               _Whitespace,
               _L('TABLE'),
               _Whitespace,
               _TableName,
               _OPTIONAL(_Whitespace),
               _L('{'),
               _ColumnList,
               _L('}'),
               _OPTIONAL(_Whitespace),
               _EOF)
    rule = Rule.STATEMENT


###############
# Recognition #
###############

# longest snippet of source text stored in an error
_SNIPPET_LENGTH = 20

_word = _re.compile(r'[A-Za-z0-9_]+')

# table and column names, the same names _Identifier accepts
_identifier = _re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def recognize(source):
    ''' Returns the ParseTree for the given CREATE TABLE statement.

    Raises SQLSyntaxError when the source does not match the grammar, or
    UnknownColumnTypeError when the only problem at the point of failure is a
    column type that is not supported. '''

    if not isinstance(source, str):
        raise _InvalidArgumentException('expected statement as str, got %s'
                                        % type(source).__name__)

    _log.debug('recognizing statement of %d characters', len(source))

    try:
        res = _CreateTable.parser().parse_string(source)
    except _ParseError as e:
        raise _grammar_error(source, e) from e

    # modgrammar returns None instead of raising when there is no text at all
    if res is None:
        _log.debug('rejected empty statement')
        raise _SQLSyntaxError('empty statement', expected=("'CREATE'",),
                              **_location(source, len(source)))

    tokens = tuple(_flatten(res))
    _log.debug('recognized %d tokens', len(tokens))
    return ParseTree(source, tokens)


def _location(source, position):
    ''' Returns the error location keywords for the given offset in source:
    position, line and column (both 1-based) and a snippet of the source text
    starting at the offset. '''

    line = source.count('\n', 0, position) + 1
    column = position - (source.rfind('\n', 0, position) + 1) + 1
    snippet = source[position:position+_SNIPPET_LENGTH].split('\n')[0]
    return dict(position=position, line=line, column=column, snippet=snippet)


def _grammar_error(source, err):
    ''' translate a modgrammar ParseError into our own exception '''

    position = err.char
    expected = err.expected or ()
    loc = _location(source, position)

    if _ColumnType in expected:
        m = _word.match(source, position)
        if m is not None:
            _log.debug('rejected column type %r at offset %d',
                       m.group(), position)
            return _UnknownColumnTypeError(m.group(), **loc)

    noteworthy = [g for g in expected if g.grammar_noteworthy] or expected
    descriptions = sorted(set(g.grammar_desc for g in noteworthy))
    if descriptions:
        message = 'expected %s' % ' or '.join(descriptions)
    else:
        message = 'statement does not match CREATE TABLE grammar'
    _log.debug('rejected statement at offset %d: %s', position, message)
    return _SQLSyntaxError(message, expected=descriptions, **loc)


def _flatten(res):
    ''' Yields a Token for every element in the parse result that carries a
    rule, in document order.

    Positions are derived from the lengths of the matched strings: the
    children of an element are consecutive and together cover the element. '''

    stack = [(res, 0, 0)]
    while stack:
        element, start, depth = stack.pop()
        rule = getattr(element, 'rule', None)
        if rule is not None:
            yield Token(rule, element.string, start,
                        start + len(element.string), depth)
            depth += 1

        children = []
        offset = start
        for sub in element.elements:
            # unmatched OPTIONAL elements are None
            if sub is None:
                continue
            children.append((sub, offset, depth))
            offset += len(sub.string)
        stack.extend(reversed(children))
