''' _sql.py - parse a CREATE TABLE statement

Copyright (c) 2022 Netherlands Forensic Institute - MIT License

Parsing is done in two steps. First the statement is matched against the
grammar in _grammar, which results in a ParseTree. The tree is then reduced to
a CreateTableStatement by _reduce. Both steps are pure functions of their
input, so parse() can be called from multiple threads at the same time. '''

import logging as _logging

from . import _grammar
from . import _reduce
from ._structures import CreateTable as _CreateTable

_log = _logging.getLogger(__name__)


def parse(sql):
    ''' Returns the ParsedStatement for the given sql statement.

    Only the CREATE TABLE statement is supported, so the result is always a
    CreateTable object whose statement element holds the table definition.

    Raises SQLSyntaxError or UnknownColumnTypeError when the statement does not
    match the grammar and StructuralError when the matched statement lacks a
    required element. All three are subclasses of ParseError. '''

    tree = _grammar.recognize(sql)
    statement = _reduce.reduce(tree)
    _log.debug('parsed CREATE TABLE statement for table %r',
               statement.table_name)
    return _CreateTable(statement)


def parse_create_table_statement(sql):
    ''' Returns the CreateTableStatement for the given sql CREATE TABLE
    statement. Raises the same exceptions as parse(). '''

    return parse(sql).statement
