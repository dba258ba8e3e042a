"""Resolution of imports in JavaScript sources."""

from .modules import DirectoryPattern as DirectoryPattern
from .modules import ExternalModule as ExternalModule
from .modules import ExternalModules as ExternalModules
from .modules import combined_modules as combined_modules
from .modules import predefined_modules as predefined_modules
from .resolver import resolve as resolve
from .resolver import resolve_file as resolve_file
from .resolver import resolve_text as resolve_text
from .statement import ImportStatement as ImportStatement
from .statement import MalformedImportStatement as MalformedImportStatement
