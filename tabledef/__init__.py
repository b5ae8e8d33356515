''' __init__.py - initialize package

Copyright (c) 2022 Netherlands Forensic Institute - MIT License
'''

import logging as _logging
from os import path as _path


def _modcheck():
    ''' check if the modgrammar module is available '''

    try:
        import modgrammar
    except ImportError:
        raise ImportError('this package requires modgrammar')


def _version():
    ''' return the version of tabledef '''

    _moduledir = _path.dirname(_path.abspath(__file__))
    _versionfile = _path.join(_moduledir, 'VERSION')
    with open(_versionfile, 'rt') as f:
        return f.readline().strip()


_modcheck()

__version__ = _version()

# the package only logs, configuring output is up to the application
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

#######
# API #
#######

from ._sql import parse
from ._sql import parse_create_table_statement
from ._grammar import recognize
from ._grammar import ParseTree
from ._grammar import Token
from ._grammar import Rule
from ._reduce import reduce
from ._structures import ColumnType
from ._structures import ColumnDefinition
from ._structures import CreateTableStatement
from ._structures import StatementKind
from ._structures import ParsedStatement
from ._structures import CreateTable
from ._exceptions import ParseError
from ._exceptions import SQLSyntaxError
from ._exceptions import UnknownColumnTypeError
from ._exceptions import StructuralError
from ._exceptions import InvalidArgumentException
