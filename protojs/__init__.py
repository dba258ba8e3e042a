"""protojs - JSON parser generator and import resolver for Protobuf JavaScript code."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("protojs")
except PackageNotFoundError:
    __version__ = "(local)"
