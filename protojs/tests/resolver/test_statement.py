"""Tests for import statements."""

from pathlib import Path

import pytest

from protojs.resolver.statement import ImportStatement, MalformedImportStatement

LINE = "let task_pb = require('../acme/task_pb.js');"


def describe_import_statement():
    def finds_imports_in_lines(expect):
        expect(ImportStatement.is_declared_in(LINE)) == True
        expect(ImportStatement.is_declared_in("let x = 1;")) == False

    def parses_imported_path(expect):
        statement = ImportStatement.parse("js/tests", LINE)
        expect(statement.path) == "../acme/task_pb.js"
        expect(statement.source_directory) == Path("js/tests")
        expect(str(statement)) == LINE

    def rejects_unterminated_import(expect):
        with pytest.raises(MalformedImportStatement):
            ImportStatement.parse(".", "let x = require('./a.js;")

    def rejects_line_without_import(expect):
        with pytest.raises(MalformedImportStatement):
            ImportStatement.parse(".", "let x = 1;")

    def replaces_path_only(expect):
        statement = ImportStatement.parse(".", LINE).replace_path("acme-module/acme/task_pb.js")
        expect(statement.text) == "let task_pb = require('acme-module/acme/task_pb.js');"
        expect(statement.path) == "acme-module/acme/task_pb.js"

    def keeps_original_on_replace(expect):
        statement = ImportStatement.parse(".", LINE)
        statement.replace_path("x.js")
        expect(statement.text) == LINE

    def tells_relative_imports(expect):
        expect(ImportStatement.parse(".", LINE).is_relative) == True
        expect(ImportStatement.parse(".", "require('./a.js');").is_relative) == True
        expect(ImportStatement.parse(".", "require('google-protobuf');").is_relative) == False

    def normalizes_imported_file(expect):
        statement = ImportStatement.parse("js/tests", LINE)
        expect(statement.imported_file) == Path("js/acme/task_pb.js")

    def checks_imported_file_exists(expect, tmp_path):
        (tmp_path / "a.js").write_text("", encoding="utf-8")
        expect(ImportStatement.parse(tmp_path, "require('./a.js');").imported_file_exists()) == True
        expect(ImportStatement.parse(tmp_path, "require('./b.js');").imported_file_exists()) == False
