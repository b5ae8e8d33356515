''' _reduce.py - reduce a ParseTree into a CreateTableStatement

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

import logging as _logging

from ._grammar import Rule as _Rule
from ._grammar import _location
from ._grammar import _identifier
from ._structures import ColumnType as _ColumnType
from ._structures import ColumnDefinition as _ColumnDefinition
from ._structures import CreateTableStatement as _CreateTableStatement
from ._exceptions import StructuralError as _StructuralError

_log = _logging.getLogger(__name__)


def reduce(tree):
    ''' Returns the CreateTableStatement for the given ParseTree.

    The tokens in the tree are visited once, in document order. A COLUMN_NAME
    token names the column of the next COLUMN_TYPE token, so columns are
    collected in the order in which they occur in the source. Tokens for other
    rules are skipped. If the tree holds more than one TABLE_NAME, the first
    one is used.

    Raises StructuralError when the tree has no table name, no columns, a
    column name without a type, a type without a column name, or a table or
    column name that is not an identifier (a letter or underscore followed by
    letters, digits and underscores). Raises
    UnknownColumnTypeError when a type token is not a supported type. A tree
    returned by recognize() always reduces, these checks are for trees that
    were built or modified elsewhere. '''

    table_name = None
    columns = []
    pending = None

    for token in tree.tokens:
        if token.rule is _Rule.TABLE_NAME:
            if table_name is None:
                if not _identifier.fullmatch(token.text):
                    raise _error(tree, token, 'invalid table name %r'
                                              % (token.text,))
                table_name = token.text

        elif token.rule is _Rule.COLUMN_NAME:
            if not _identifier.fullmatch(token.text):
                raise _error(tree, token, 'invalid column name %r'
                                          % (token.text,))
            if pending is not None:
                raise _error(tree, pending, 'column %r has no type'
                                            % (pending.text,))
            pending = token

        elif token.rule is _Rule.COLUMN_TYPE:
            if pending is None:
                raise _error(tree, token, 'column type %r has no column name'
                                          % (token.text,))
            coltype = _ColumnType.from_token(
                token.text, **_location(tree.source, token.start))
            columns.append(_ColumnDefinition(pending.text, coltype))
            pending = None

    if pending is not None:
        raise _error(tree, pending, 'column %r has no type' % (pending.text,))

    if table_name is None:
        raise _error(tree, None, 'statement has no table name')

    if len(columns) == 0:
        raise _error(tree, None, 'statement has no columns')

    _log.debug('reduced table %r with %d columns', table_name, len(columns))
    return _CreateTableStatement(table_name, tuple(columns))


def _error(tree, token, message):
    ''' returns a StructuralError, located at token if given '''

    _log.debug('reduction failed: %s', message)
    if token is None:
        return _StructuralError(message)
    return _StructuralError(message, **_location(tree.source, token.start))
