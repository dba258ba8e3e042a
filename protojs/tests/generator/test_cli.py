"""Tests for CLI interface."""

import json

from click.testing import CliRunner

from protojs.generator.cli import cli


def describe_gen_command():
    def generates_parsers_and_index(expect, tmp_path, schema_path):
        out = tmp_path / "js"
        result = CliRunner().invoke(cli, ["gen", "-i", str(schema_path), "-o", str(out)])
        expect(result.exit_code) == 0
        code = (out / "acme/tasks/task_pb.js").read_text(encoding="utf-8")
        expect("proto.acme.tasks.Task.Parser.prototype.fromObject" in code) == True
        expect("require('spine-web/client/parser/type-parsers.js')" in code) == True
        expect((out / "index.js").exists()) == True

    def uses_runtime_import(expect, tmp_path, schema_path):
        out = tmp_path / "js"
        result = CliRunner().invoke(
            cli,
            ["gen", "-i", str(schema_path), "-o", str(out), "--runtime-import", "runtime/"],
        )
        expect(result.exit_code) == 0
        code = (out / "acme/tasks/task_pb.js").read_text(encoding="utf-8")
        expect("require('../../runtime/object-parser.js')" in code) == True

    def requires_output(expect, schema_path):
        result = CliRunner().invoke(cli, ["gen", "-i", str(schema_path)])
        expect(result.exit_code) == 2
        expect("Missing option" in result.output) == True

    def rejects_malformed_module(expect, tmp_path, schema_path):
        result = CliRunner().invoke(
            cli, ["gen", "-i", str(schema_path), "-o", str(tmp_path), "-m", "no-patterns"]
        )
        expect(result.exit_code) == 2
        expect("NAME=PATTERN" in result.output) == True

    def reports_unknown_type(expect, tmp_path):
        schema = tmp_path / "broken.json"
        field = {"name": "x", "number": 1, "type": {"name": "message", "type_name": "a.Gone"}}
        file = {"name": "a.proto", "package": "a", "messages": [{"name": "M", "fields": [field]}]}
        schema.write_text(json.dumps({"files": [file]}), encoding="utf-8")
        result = CliRunner().invoke(cli, ["gen", "-i", str(schema), "-o", str(tmp_path)])
        expect(result.exit_code) == 1
        expect("a.Gone" in result.output) == True

    def reports_unreadable_schema(expect, tmp_path):
        schema = tmp_path / "broken.json"
        schema.write_text("{", encoding="utf-8")
        result = CliRunner().invoke(cli, ["gen", "-i", str(schema), "-o", str(tmp_path)])
        expect(result.exit_code) == 1
        expect("Cannot read schema" in result.output) == True


def describe_resolve_command():
    def resolves_imports_from_modules(expect, tmp_path):
        source = tmp_path / "test.js"
        source.write_text("let x = require('./root-dir/missing.js');\n", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            [
                "resolve",
                str(source),
                "--generated-root",
                str(tmp_path),
                "-m",
                "test-module=root-dir",
            ],
        )
        expect(result.exit_code) == 0
        expect(f"Resolved: {source}" in result.output) == True
        expect(source.read_text(encoding="utf-8")) == (
            "let x = require('test-module/root-dir/missing.js');\n"
        )

    def reads_modules_config(expect, tmp_path):
        config = tmp_path / "modules.json"
        config.write_text(json.dumps({"test-module": ["root-dir/*"]}), encoding="utf-8")
        source = tmp_path / "test.js"
        source.write_text("let x = require('./root-dir/a/missing.js');\n", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            ["resolve", str(source), "--generated-root", str(tmp_path), "--modules-config",
             str(config)],
        )
        expect(result.exit_code) == 0
        expect("test-module/root-dir/a/missing.js" in source.read_text(encoding="utf-8")) == True

    def rejects_invalid_modules_config(expect, tmp_path):
        config = tmp_path / "modules.json"
        config.write_text(json.dumps(["root-dir"]), encoding="utf-8")
        source = tmp_path / "test.js"
        source.write_text("", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            ["resolve", str(source), "--generated-root", str(tmp_path), "--modules-config",
             str(config)],
        )
        expect(result.exit_code) == 1

    def rejects_empty_module_pattern(expect, tmp_path):
        source = tmp_path / "test.js"
        source.write_text("", encoding="utf-8")
        result = CliRunner().invoke(
            cli, ["resolve", str(source), "--generated-root", str(tmp_path), "-m", "x=/"]
        )
        expect(result.exit_code) == 1
        expect("Directory pattern must not be empty" in result.output) == True

    def rejects_empty_pattern_in_modules_config(expect, tmp_path):
        config = tmp_path / "modules.json"
        config.write_text(json.dumps({"x": [""]}), encoding="utf-8")
        source = tmp_path / "test.js"
        source.write_text("", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            ["resolve", str(source), "--generated-root", str(tmp_path), "--modules-config",
             str(config)],
        )
        expect(result.exit_code) == 1
        expect("Directory pattern must not be empty" in result.output) == True

    def leaves_unmatched_file_unchanged(expect, tmp_path):
        source = tmp_path / "test.js"
        source.write_text("let x = require('./nowhere/missing.js');\n", encoding="utf-8")
        result = CliRunner().invoke(
            cli, ["resolve", str(source), "--generated-root", str(tmp_path)]
        )
        expect(result.exit_code) == 0
        expect(f"Unchanged: {source}" in result.output) == True

    def reports_malformed_import(expect, tmp_path):
        source = tmp_path / "test.js"
        source.write_text("let x = require('./a.js;\n", encoding="utf-8")
        result = CliRunner().invoke(
            cli, ["resolve", str(source), "--generated-root", str(tmp_path)]
        )
        expect(result.exit_code) == 1
        expect("Unterminated import statement" in result.output) == True


def describe_info_command():
    def displays_types(expect, schema_path):
        result = CliRunner().invoke(cli, ["info", "-i", str(schema_path)])
        expect(result.exit_code) == 0
        expect("Types" in result.output) == True
        expect("Type URL" in result.output) == True

    def outputs_json(expect, schema_path):
        result = CliRunner().invoke(cli, ["info", "-i", str(schema_path), "--json"])
        expect(result.exit_code) == 0
        data = json.loads(result.output)
        expect(data["type.acme.io/acme.tasks.Task"]) == {
            "full_name": "acme.tasks.Task",
            "type": "proto.acme.tasks.Task",
            "parser": "proto.acme.tasks.Task.Parser",
        }
        expect(data["type.googleapis.com/google.protobuf.Value"]["parser"]) == None
        expect(list(data)) == sorted(data)
