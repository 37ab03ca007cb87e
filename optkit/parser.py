import logging
import dataclasses as dt

from enum import Enum
from typing import Any, Optional, Sequence, TextIO

from . import const, convert, usage, vt100
from .convert import Registry
from .errors import (
    DuplicateOptionName,
    InvalidValue,
    MisplacedOption,
    MissingRequiredOption,
    UnknownOption,
    UnsupportedType,
    UsageError,
)
from .option import Option

_logger = logging.getLogger(__name__)

# --- Scan ------------------------------------------------------------------- #


class Scan:
    """
    A simple scanner over a single command-line token.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        self._src = src
        self._off = off

    def curr(self) -> str:
        """Returns the current character, or '\\0' at the end of the token."""
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def skipStr(self, s: str) -> bool:
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def rest(self) -> str:
        """Consumes and returns everything up to the end of the token."""
        res = self._src[self._off :]
        self._off = len(self._src)
        return res


@dt.dataclass
class ArgumentToken:
    """
    Represents a `--key` or `--key=value` token.

    Attributes:
        key: The option name (e.g., "timeout" for "--timeout=5").
        value: The text after the separator, or None if there was none.
    """

    key: str
    value: Optional[str]


def _parseIdent(s: Scan) -> str:
    res = ""
    while not s.eof() and (s.curr().isalnum() or s.curr() in const.IDENT_CHARS):
        res += s.curr()
        s.next()
    return res


def parseArg(arg: str) -> ArgumentToken:
    """
    Parses a single command-line token.

    Raises:
        UnknownOption: If the token is not of the form `--key` or `--key=value`.
    """
    s = Scan(arg)
    if not s.skipStr(const.PREFIX):
        raise UnknownOption(arg)

    key = _parseIdent(s)
    if len(key) == 0:
        raise UnknownOption(arg)

    if s.skipStr(const.SEPARATOR):
        return ArgumentToken(key, s.rest())

    if not s.eof():
        raise UnknownOption(arg)

    return ArgumentToken(key, None)


# --- Parser ----------------------------------------------------------------- #


class MissingPolicy(Enum):
    """
    What to do with required options that were not given.
    """

    REPORT_ONLY = "report-only"
    """Report each missing option but let the parse succeed; callers check `isSet()`."""
    FAIL = "fail"
    """Report each missing option and fail the parse."""


class Parser:
    """
    Matches command-line tokens against a set of declared options.

    Unknown options, invalid values and duplicate declarations stop the parse
    at the point they are found. Options assigned before that point keep
    their new value.
    """

    required: list[Option]
    optional: list[Option]
    registry: Registry
    policy: MissingPolicy
    stream: Optional[TextIO]
    errors: list[UsageError]

    def __init__(
        self,
        required: Sequence[Option],
        optional: Sequence[Option] = (),
        registry: Registry = convert.DEFAULT,
        policy: MissingPolicy = MissingPolicy.REPORT_ONLY,
        stream: Optional[TextIO] = None,
    ):
        self.required = list(required)
        self.optional = list(optional)
        self.registry = registry
        self.policy = policy
        self.stream = stream
        self.errors = []

    def _lookupTable(self) -> dict[str, Option]:
        table: dict[str, Option] = {}
        for opt in self.required + self.optional:
            if opt.name in table:
                raise DuplicateOptionName(opt.name)
            if opt.required and opt in self.optional:
                raise MisplacedOption(opt.name)
            if opt.typ not in self.registry:
                raise UnsupportedType(opt.name, opt.typ)
            table[opt.name] = opt
        return table

    def _convert(self, opt: Option, text: str) -> Any:
        try:
            return self.registry.convert(opt.typ, text)
        except ValueError as e:
            raise InvalidValue(opt.name, text, str(e))

    def _consume(self, table: dict[str, Option], args: list[str]):
        stack = args[:]
        while len(stack) > 0:
            tok = parseArg(stack.pop(0))
            if tok.key not in table:
                raise UnknownOption(const.PREFIX + tok.key)

            opt = table[tok.key]
            if tok.value is not None:
                value = self._convert(opt, tok.value)
            elif opt.typ is bool:
                if len(stack) == 0 or stack[0].startswith(const.PREFIX):
                    value = True
                else:
                    value = self._convert(opt, stack.pop(0))
            elif len(stack) == 0:
                raise InvalidValue(opt.name, None, "expected a value")
            else:
                value = self._convert(opt, stack.pop(0))

            _logger.debug(f"Setting '{opt.name}' to {value!r}")
            opt.set(value)

    def _report(self, err: UsageError, fatal: bool):
        self.errors.append(err)
        if fatal:
            _logger.info(str(err))
            vt100.error(str(err), self.stream)
        else:
            _logger.debug(str(err))
            vt100.warning(str(err), self.stream)

    def parse(self, args: list[str]) -> bool:
        """
        Parses `args` into the declared options.

        Args:
            args: The command-line tokens, without the program name.

        Returns:
            False if a hard error occurred, or if a required option is
            missing under `MissingPolicy.FAIL`. True otherwise.
        """
        _logger.debug(f"Parsing {args}")
        self.errors = []

        try:
            self._consume(self._lookupTable(), args)
        except UsageError as e:
            self._report(e, True)
            return False

        ok = True
        for opt in self.required:
            if not opt.isSet():
                fatal = self.policy == MissingPolicy.FAIL
                self._report(MissingRequiredOption(opt.name), fatal)
                if fatal:
                    ok = False
        return ok

    def usage(self, argv0: str) -> str:
        return usage.usage(
            argv0, self.required, self.optional, self.registry, self.stream
        )


def parse(
    required: Sequence[Option],
    optional: Sequence[Option],
    args: list[str],
    registry: Registry = convert.DEFAULT,
    policy: MissingPolicy = MissingPolicy.REPORT_ONLY,
    stream: Optional[TextIO] = None,
) -> bool:
    """Parses `args` into the given options, see `Parser.parse`."""
    return Parser(required, optional, registry, policy, stream).parse(args)
