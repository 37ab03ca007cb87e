from typing import Any, Generic, Optional, TypeVar

from . import const

T = TypeVar("T")


class _Required:
    def __repr__(self):
        return "Required"

    def __bool__(self):
        raise Exception("Required is not a value")


Required: Any = _Required()
"""Sentinel used in place of a default for options that must be given."""


class Option(Generic[T]):
    """
    A named, typed command-line option.

    Optional options start with their default value and `isSet()` false, so a
    defaulted value can be told apart from an explicitly given one. Required
    options start unset and `get()` returns None until the parser sets them.
    """

    name: str
    typ: Any
    placeholder: Optional[str]
    default: Any
    description: str

    _value: Optional[T]
    _isSet: bool

    def __init__(
        self,
        name: str,
        typ: Any,
        default: Any = Required,
        placeholder: Optional[str] = None,
        description: str = "",
    ):
        """
        Args:
            name: The long name, without the leading `--`.
            typ: The type used to pick a converter from the registry.
            default: The default value, or `Required`.
            placeholder: The value hint shown in usage text.
            description: Free text shown in usage text.
        """
        if (
            not name
            or name.startswith("-")
            or not all(c.isalnum() or c in const.IDENT_CHARS for c in name)
        ):
            raise ValueError(f"Invalid option name '{name}'")

        self.name = name
        self.typ = typ
        self.placeholder = placeholder
        self.default = default
        self.description = description

        self._value = None if self.required else default
        self._isSet = False

    @property
    def required(self) -> bool:
        return self.default is Required

    def isSet(self) -> bool:
        return self._isSet

    def get(self) -> Optional[T]:
        return self._value

    def set(self, value: T):
        self._value = value
        self._isSet = True

    def __repr__(self) -> str:
        state = "set" if self._isSet else "unset"
        return f"Option({self.name!r}, {self._value!r}, {state})"
