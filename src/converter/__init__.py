"""as2cs converter package."""

from .ast_nodes import ClassDeclaration as ClassDeclaration, InterfaceDeclaration as InterfaceDeclaration
from .base import ConversionResult as ConversionResult, TargetConverter as TargetConverter
from .csharp import CsConverter as CsConverter
from .errors import ConversionError as ConversionError, LoadError as LoadError
from .loader import load_file as load_file
