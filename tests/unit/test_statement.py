"""Tests for statement classification and request binding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sqlgateway.core.exceptions import InvalidCommandError
from sqlgateway.models.statement import (
    CommandClass,
    StatementRequest,
    classify_statement,
    leading_command,
)


class TestLeadingCommand:
    def test_upper_cases_first_token(self):
        assert leading_command("select * from t") == "SELECT"

    def test_ignores_surrounding_whitespace(self):
        assert leading_command("\t\n  Insert into t values (1)") == "INSERT"

    def test_blank_statement_yields_empty_token(self):
        assert leading_command("   ") == ""
        assert leading_command("") == ""


class TestClassifyStatement:
    @pytest.mark.parametrize("statement,command_class", [
        ("CREATE TABLE t (id int)", CommandClass.SCHEMA_CHANGE),
        ("alter table t add column x int", CommandClass.SCHEMA_CHANGE),
        ("DROP TABLE t", CommandClass.SCHEMA_CHANGE),
        ("TRUNCATE t", CommandClass.SCHEMA_CHANGE),
        ("SELECT 1", CommandClass.QUERY),
        ("INSERT INTO t VALUES (1)", CommandClass.MUTATION),
        ("UPDATE t SET x = 1", CommandClass.MUTATION),
        ("DELETE FROM t", CommandClass.MUTATION),
    ])
    def test_allowed(self, statement, command_class):
        assert classify_statement(statement, command_class) == statement.split()[0].upper()

    def test_message_names_token_and_allowed_set(self):
        with pytest.raises(InvalidCommandError) as excinfo:
            classify_statement("select * from users", CommandClass.MUTATION)
        err = excinfo.value
        assert err.command == "SELECT"
        assert err.allowed == ("INSERT", "UPDATE", "DELETE")
        assert str(err) == "Invalid SQL command: SELECT. Allowed commands are: INSERT, UPDATE, DELETE"

    def test_empty_statement_never_matches(self):
        for command_class in CommandClass:
            with pytest.raises(InvalidCommandError):
                classify_statement("", command_class)

    def test_keyword_prefix_is_not_a_match(self):
        with pytest.raises(InvalidCommandError):
            classify_statement("SELECTED * FROM t", CommandClass.QUERY)


class TestStatementRequest:
    def test_unpaginated_bind_returns_copy(self):
        params = [1, 2]
        request = StatementRequest(statement="SELECT $1, $2", params=params)
        statement, bound = request.bind()
        assert statement == "SELECT $1, $2"
        assert bound == [1, 2]
        bound.append(3)
        assert params == [1, 2]

    def test_offset(self):
        assert StatementRequest(statement="SELECT 1", page_size=5, page_number=2).offset == 5
        assert StatementRequest(statement="SELECT 1", page_size=5, page_number=-1).offset == -10

    def test_paginated_bind(self):
        request = StatementRequest(
            statement="SELECT * FROM t WHERE a = $1 AND b = $2",
            params=["x", "y"], paginate=True, page_size=20, page_number=3,
        )
        assert request.bind() == (
            "SELECT * FROM t WHERE a = $1 AND b = $2 LIMIT $3 OFFSET $4",
            ["x", "y", 20, 40],
        )

    def test_defaults(self):
        request = StatementRequest(statement="SELECT 1")
        assert (request.params, request.paginate, request.page_size, request.page_number) == (
            [], False, 10, 1,
        )

    @pytest.mark.parametrize("field,value", [
        ("page_size", "5"),
        ("page_number", 2.0),
        ("params", ("a",)),
    ])
    def test_arguments_are_not_coerced(self, field, value):
        with pytest.raises(ValidationError):
            StatementRequest(statement="SELECT 1", **{field: value})

    def test_labels(self):
        assert [c.value for c in CommandClass] == ["DDL", "DQL", "DML"]
