"""Unit tests configuration file."""

import json

import pytest

from protojs.generator.registry import TypeRegistry
from protojs.generator.types import FileSet

STRUCT_FILE = {
    "name": "google/protobuf/struct.proto",
    "package": "google.protobuf",
    "messages": [
        {"name": "Struct"},
        {"name": "Value"},
        {"name": "ListValue"},
    ],
    "enums": [{"name": "NullValue", "values": [{"name": "NULL_VALUE", "number": 0}]}],
}

TASK_FILE = {
    "name": "acme/tasks/task.proto",
    "package": "acme.tasks",
    "type_url_prefix": "type.acme.io",
    "enums": [
        {
            "name": "Priority",
            "values": [
                {"name": "PRIORITY_UNKNOWN", "number": 0},
                {"name": "HIGH", "number": 1},
            ],
        }
    ],
    "messages": [
        {
            "name": "Task",
            "fields": [
                {"name": "id", "number": 1, "type": {"name": "string"}},
                {"name": "estimate", "number": 2, "type": {"name": "int64"}},
                {"name": "progress", "number": 3, "type": {"name": "double"}},
                {
                    "name": "priority",
                    "number": 4,
                    "type": {"name": "enum", "type_name": "acme.tasks.Priority"},
                },
                {
                    "name": "owner",
                    "number": 5,
                    "type": {"name": "message", "type_name": "acme.tasks.User"},
                },
                {"name": "labels", "number": 6, "type": {"name": "string"}, "repeated": True},
                {
                    "name": "sub_tasks",
                    "number": 7,
                    "type": {"name": "message", "type_name": "acme.tasks.Task"},
                    "repeated": True,
                },
                {
                    "name": "scores",
                    "number": 8,
                    "map": {"key": {"name": "int64"}, "value": {"name": "double"}},
                },
                {
                    "name": "metadata",
                    "number": 9,
                    "type": {"name": "message", "type_name": "google.protobuf.Value"},
                },
                {
                    "name": "assignees",
                    "number": 10,
                    "map": {
                        "key": {"name": "string"},
                        "value": {"name": "message", "type_name": "acme.tasks.User"},
                    },
                },
            ],
            "messages": [
                {"name": "Note", "fields": [{"name": "text", "number": 1, "type": {"name": "string"}}]}
            ],
            "enums": [{"name": "State", "values": [{"name": "OPEN", "number": 0}]}],
        },
        {
            "name": "User",
            "fields": [{"name": "display_name", "number": 1, "type": {"name": "string"}}],
        },
        {"name": "Nothing"},
    ],
}

SCHEMA = {"files": [STRUCT_FILE, TASK_FILE]}


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def file_set():
    return FileSet.from_dict(SCHEMA)


@pytest.fixture
def task_file(file_set):
    return file_set.files[1]


@pytest.fixture
def registry(file_set):
    return TypeRegistry.from_file_set(file_set)


@pytest.fixture
def task(task_file):
    return task_file.message_types()[0]


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path
