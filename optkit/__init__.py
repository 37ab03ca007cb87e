from . import (
    const,
    convert,
    errors,
    option,
    parser,
    usage,
    vt100,
)

from .convert import Registry, ValueMap
from .errors import (
    ConversionError,
    DuplicateOptionName,
    InvalidValue,
    MisplacedOption,
    MissingRequiredOption,
    UnknownEnumValue,
    UnknownOption,
    UnsupportedType,
    UsageError,
)
from .option import Option, Required
from .parser import MissingPolicy, Parser, parse
from .usage import formatUsage, placeholder

__version__ = const.VERSION_STR