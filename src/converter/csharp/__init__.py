"""C# target emitter."""

from .converter import CsConverter as CsConverter, DEFAULT_IMPORT as DEFAULT_IMPORT
from .fields import FIELD_INITIALIZER as FIELD_INITIALIZER
from .naming import CsCodeHelper as CsCodeHelper
