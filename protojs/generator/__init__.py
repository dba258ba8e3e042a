"""Generator of JSON parsers for Protobuf JavaScript code."""

from .kinds import Kind as Kind
from .kinds import SchemaInconsistency as SchemaInconsistency
from .kinds import Shape as Shape
from .kinds import ValueKind as ValueKind
from .registry import MissingRegistryEntry as MissingRegistryEntry
from .registry import TypeRegistry as TypeRegistry
from .registry import TypeRegistryEntry as TypeRegistryEntry
from .types import *
from .writer import CodeWriter as CodeWriter
from .writer import UnbalancedScopeError as UnbalancedScopeError
