import pytest

from tabledef import ColumnType, ColumnDefinition, CreateTableStatement
from tabledef import CreateTable, StatementKind
from tabledef import UnknownColumnTypeError


@pytest.mark.parametrize("token, coltype", [
    ('INT', ColumnType.INTEGER),
    ('TEXT', ColumnType.TEXT),
    ('BOOL', ColumnType.BOOLEAN),
])
def test_column_type_from_token(token, coltype):
    assert ColumnType.from_token(token) is coltype
    assert coltype.token == token


@pytest.mark.parametrize("token", ['int', 'Text', 'INTEGER', '', 'BOOLEAN'])
def test_column_type_rejects_other_names(token):
    with pytest.raises(UnknownColumnTypeError) as exc:
        ColumnType.from_token(token)
    assert exc.value.token == token
    assert exc.value.line is None


def test_unknown_type_message_with_location():
    err = UnknownColumnTypeError('FLOAT', position=4, line=2, column=3,
                                 snippet='FLOAT }')
    assert str(err) == "unknown column type 'FLOAT' (line 2, column 3): 'FLOAT }'"


def test_statement_is_immutable():
    statement = CreateTableStatement('t', (ColumnDefinition('a', ColumnType.TEXT),))
    with pytest.raises(AttributeError):
        statement.table_name = 'u'
    with pytest.raises(AttributeError):
        statement.columns[0].name = 'b'


def test_column_definition_compares_as_tuple():
    assert ColumnDefinition('a', ColumnType.BOOLEAN) == ('a', ColumnType.BOOLEAN)
    assert ColumnDefinition('a', ColumnType.BOOLEAN) != ('a', ColumnType.TEXT)


def test_create_table_variant():
    statement = CreateTableStatement('t', (ColumnDefinition('a', ColumnType.INTEGER),))
    res = CreateTable(statement)
    assert res.kind is StatementKind.CREATE_TABLE
    assert res.statement is statement
    assert res == CreateTable(CreateTableStatement('t', (('a', ColumnType.INTEGER),)))
