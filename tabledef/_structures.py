''' _structures.py - structures returned by the statement parser

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

All structures are immutable. A CREATE TABLE statement is returned as a
CreateTableStatement namedtuple, holding a tuple of ColumnDefinition
namedtuples in the order in which the columns appear in the statement.
'''

from collections import namedtuple as _nt
from enum import Enum as _Enum

from ._exceptions import UnknownColumnTypeError as _UnknownColumnTypeError


class ColumnType(_Enum):
    ''' the supported column types, the values are the type names in SQL '''

    INTEGER = 'INT'
    TEXT = 'TEXT'
    BOOLEAN = 'BOOL'

    @property
    def token(s):
        ''' the type name as it appears in a statement '''
        return s.value

    @classmethod
    def from_token(cls, token, **location):
        ''' Returns the ColumnType for the given type name.

        The type name must match exactly (type names are case-sensitive). Any
        keyword arguments are passed on to the UnknownColumnTypeError that is
        raised for names that are not supported. '''

        try:
            return cls(token)
        except ValueError:
            raise _UnknownColumnTypeError(token, **location) from None


# namedtuple for holding a single column definition
ColumnDefinition = _nt('ColumnDefinition', 'name type')


class CreateTableStatement(_nt('CreateTableStatement', 'table_name columns')):
    ''' a parsed CREATE TABLE statement

    The columns element is a tuple of ColumnDefinition objects in source
    order. '''

    __slots__ = ()

    @property
    def column_names(s):
        ''' the column names in source order '''
        return tuple(c.name for c in s.columns)

    def to_sql(s):
        ''' Returns the statement in its canonical single-line form. '''

        columns = ', '.join('%s %s' % (c.name, c.type.token)
                            for c in s.columns)
        return 'CREATE TABLE %s { %s }' % (s.table_name, columns)


class StatementKind(_Enum):
    ''' kinds of statements the parser can return '''

    CREATE_TABLE = 'CREATE TABLE'


class ParsedStatement():
    ''' Base class of all statement variants returned by parse().

    Callers dispatch on the kind attribute (or on the variant class), every
    variant has a distinct StatementKind. '''

    __slots__ = ()
    kind = None


class CreateTable(_nt('CreateTable', 'statement'), ParsedStatement):
    ''' ParsedStatement variant wrapping a CreateTableStatement '''

    __slots__ = ()
    kind = StatementKind.CREATE_TABLE
