import math
import logging

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, TypeVar

from . import const
from .errors import ConversionError, UnknownEnumValue

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[str], Any]

# --- Plain types ------------------------------------------------------------ #


def _rejectPadding(text: str, kind: str):
    # int() and float() accept surrounding whitespace and `_` separators
    if text != text.strip() or "_" in text:
        raise ConversionError(text, f"'{text}' is not {kind}")


def toInt(text: str) -> int:
    """Converts a decimal integer literal such as `42` or `-7`."""
    _rejectPadding(text, "an integer")
    try:
        return int(text)
    except ValueError:
        raise ConversionError(text, f"'{text}' is not an integer")


def toFloat(text: str) -> float:
    """
    Converts a decimal or scientific literal.

    Finite literals too large to be represented are rejected as out of range,
    explicit `inf` and `nan` literals are accepted.
    """
    _rejectPadding(text, "a number")
    try:
        value = float(text)
    except ValueError:
        raise ConversionError(text, f"'{text}' is not a number")

    if math.isinf(value) and "inf" not in text.lower():
        raise ConversionError(text, f"'{text}' is out of range")
    return value


class Unsigned(int):
    """Option type for counts, only non-negative integers are accepted."""


def toUnsigned(text: str) -> Unsigned:
    value = toInt(text)
    if value < 0:
        raise ConversionError(text, f"'{text}' is negative")
    return Unsigned(value)


def toBool(text: str) -> bool:
    if text in const.TRUE_LITERALS:
        return True
    elif text in const.FALSE_LITERALS:
        return False
    raise ConversionError(text, f"'{text}' is not a boolean")


def toStr(text: str) -> str:
    return text


PLAIN: dict[Any, Converter] = {
    int: toInt,
    Unsigned: toUnsigned,
    float: toFloat,
    bool: toBool,
    str: toStr,
}

# --- Value maps ------------------------------------------------------------- #


class ValueMap(Generic[T]):
    """
    A fixed table of aliases for the values of an enumerated type.

    Lookups are exact and case-sensitive. Several aliases may name the same
    value, the first one declared is used when the value is displayed.
    """

    typ: Any
    _values: dict[str, T]

    def __init__(self, typ: Any, values: Mapping[str, T] | Iterable[tuple[str, T]]):
        """
        Args:
            typ: The enumerated type, usually an `Enum` subclass.
            values: The alias table, either a mapping or a sequence of
                `(alias, value)` pairs.

        Raises:
            ValueError: If an alias is repeated, a value is not of type `typ`
                or an `Enum` member has no alias.
        """
        self.typ = typ
        self._values = {}

        pairs = values.items() if isinstance(values, Mapping) else values
        for alias, value in pairs:
            if alias in self._values:
                raise ValueError(f"Alias '{alias}' is declared more than once")
            if isinstance(typ, type) and not isinstance(value, typ):
                raise ValueError(
                    f"Alias '{alias}' maps to {value!r} which is not a {typ.__name__}"
                )
            self._values[alias] = value

        if isinstance(typ, type) and issubclass(typ, Enum):
            for member in typ:
                if member not in self._values.values():
                    raise ValueError(f"{member!r} has no alias")

    def __call__(self, text: str) -> T:
        if text not in self._values:
            raise UnknownEnumValue(text, self._values.keys())
        return self._values[text]

    def __contains__(self, alias: object) -> bool:
        return alias in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ValueMap({getattr(self.typ, '__name__', self.typ)}, {self._values!r})"

    def aliases(self, value: T | None = None) -> list[str]:
        """Returns every alias, or only the aliases of `value` when given."""
        if value is None:
            return list(self._values.keys())
        return [k for k, v in self._values.items() if v == value]

    def alias(self, value: T) -> str:
        """Returns the first alias declared for `value`."""
        for k, v in self._values.items():
            if v == value:
                return k
        raise KeyError(f"{value!r} has no alias")


# --- Registry --------------------------------------------------------------- #


class Registry:
    """
    Maps option types to the converters used to parse their values.

    A registry starts with the plain types (`int`, `Unsigned`, `float`, `bool`,
    `str`).
    Programs add their enumerated types once at start-up and then hand the
    registry to the parser and the usage formatter.
    """

    _converters: dict[Any, Converter]

    def __init__(self, converters: Mapping[Any, Converter] | None = None):
        self._converters = dict(PLAIN)
        if converters:
            self._converters.update(converters)

    def register(self, typ: Any, converter: Converter) -> "Registry":
        _logger.debug(f"Registering converter for {getattr(typ, '__name__', typ)}")
        self._converters[typ] = converter
        return self

    def enum(
        self, typ: Any, values: Mapping[str, T] | Iterable[tuple[str, T]]
    ) -> ValueMap[T]:
        table = ValueMap(typ, values)
        self.register(typ, table)
        return table

    def __contains__(self, typ: object) -> bool:
        return typ in self._converters

    def lookup(self, typ: Any) -> Converter:
        if typ not in self._converters:
            raise KeyError(f"No converter for {getattr(typ, '__name__', typ)}")
        return self._converters[typ]

    def convert(self, typ: Any, text: str) -> Any:
        return self.lookup(typ)(text)

    def format(self, typ: Any, value: Any) -> str:
        """Renders `value` the way it would be written on the command line."""
        if value is None:
            return ""

        converter = self._converters.get(typ)
        if isinstance(converter, ValueMap):
            return converter.alias(value)
        elif isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


DEFAULT = Registry()


def valueMap(registry: Registry, typ: Any) -> Optional[ValueMap]:
    converter = registry.lookup(typ)
    return converter if isinstance(converter, ValueMap) else None
