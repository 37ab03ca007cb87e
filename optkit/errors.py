from typing import Any, Iterable


class ConversionError(ValueError):
    """
    Raised by a converter when a token is not a valid literal of its type.
    """

    def __init__(self, text: str, reason: str):
        super().__init__(reason)
        self.text = text
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class UnknownEnumValue(ConversionError):
    def __init__(self, text: str, accepted: Iterable[str]):
        self.accepted = list(accepted)
        super().__init__(
            text, f"expected one of {', '.join(repr(a) for a in self.accepted)}"
        )


# --- Usage errors ----------------------------------------------------------- #


class UsageError(Exception):
    """
    Base class for the diagnostics reported while parsing a command line.

    Attributes:
        fatal: True if the condition fails the parse on its own.
    """

    fatal: bool = True


class DuplicateOptionName(UsageError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Option '--{self.name}' is declared more than once"


class MisplacedOption(UsageError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Option '--{self.name}' has no default but is declared optional"


class UnsupportedType(UsageError):
    def __init__(self, name: str, typ: Any):
        super().__init__(name, typ)
        self.name = name
        self.typ = typ

    def __str__(self) -> str:
        typName = getattr(self.typ, "__name__", self.typ)
        return f"Option '--{self.name}' has type {typName} which has no converter"


class UnknownOption(UsageError):
    def __init__(self, token: str):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"Unknown option '{self.token}'"


class InvalidValue(UsageError):
    def __init__(self, name: str, value: Any, reason: str):
        super().__init__(name, value, reason)
        self.name = name
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid value for '--{self.name}' {self.value!r}: {self.reason}"


class MissingRequiredOption(UsageError):
    fatal = False

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Missing required option '--{self.name}'"
