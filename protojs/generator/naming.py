"""Naming conventions of the Protobuf JavaScript code."""

PROTO_NAMESPACE = "proto"
PARSER_SUFFIX = "Parser"
JS_FILE_SUFFIX = "_pb.js"

CURRENT_DIRECTORY = "./"
PARENT_DIRECTORY = "../"


def to_camel_case(name: str) -> str:
    """Convert `snake_case` to `lowerCamelCase` the way Protobuf derives JSON names."""
    result: list[str] = []
    capitalize = False
    for char in name:
        if char == "_":
            capitalize = True
        elif capitalize:
            result.append(char.upper())
            capitalize = False
        else:
            result.append(char)
    return "".join(result)


def to_pascal_case(name: str) -> str:
    """Convert `snake_case` to `PascalCase`, as used in generated accessors."""
    camel = to_camel_case(name)
    return camel[:1].upper() + camel[1:]


def type_name(full_name: str) -> str:
    """Name of the JavaScript type generated for a message or an enum."""
    return f"{PROTO_NAMESPACE}.{full_name}"


def parser_name(full_name: str) -> str:
    """Name of the parser generated for a message type."""
    return f"{type_name(full_name)}.{PARSER_SUFFIX}"


def setter(field_name: str) -> str:
    return f"set{to_pascal_case(field_name)}"


def adder(field_name: str) -> str:
    return f"add{to_pascal_case(field_name)}"


def map_getter(field_name: str) -> str:
    return f"get{to_pascal_case(field_name)}Map"


def js_file_name(proto_file: str) -> str:
    """Path of the JavaScript file compiled from the given `.proto` file."""
    stem = proto_file[: -len(".proto")] if proto_file.endswith(".proto") else proto_file
    return stem + JS_FILE_SUFFIX


def path_to_root(js_file: str) -> str:
    """Relative path from the directory of a generated file to the output root."""
    depth = js_file.count("/")
    if depth == 0:
        return CURRENT_DIRECTORY
    return PARENT_DIRECTORY * depth
