import sys
import logging
import dataclasses as dt

from enum import Enum
from typing import Any, Optional

from dataclasses_json import DataClassJsonMixin

from . import const, convert, vt100
from .option import Option, Required
from .parser import Parser

_logger = logging.getLogger(__name__)


class Mode(Enum):
    ONE_SHOT = "oneshot"
    REPEAT = "repeat"


class Unit(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"


registry = convert.Registry()

registry.enum(
    Mode,
    [
        ("oneshot", Mode.ONE_SHOT),
        ("after", Mode.ONE_SHOT),
        ("repeat", Mode.REPEAT),
        ("every", Mode.REPEAT),
    ],
)

registry.enum(
    Unit,
    [
        ("seconds", Unit.SECOND),
        ("sec", Unit.SECOND),
        ("s", Unit.SECOND),
        ("minutes", Unit.MINUTE),
        ("m", Unit.MINUTE),
        ("hours", Unit.HOUR),
        ("hr", Unit.HOUR),
        ("h", Unit.HOUR),
    ],
)


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


@dt.dataclass
class Report(DataClassJsonMixin):
    """
    The parsed values, with the names of the options that were not given.
    """

    cmd: Optional[str]
    mode: Optional[Mode]
    timeout: Optional[float]
    unit: Optional[Unit]
    quiet: bool
    stop_on_error: bool
    until: float
    times: int
    unset: list[str] = dt.field(default_factory=list)

    @staticmethod
    def fromOptions(opts: list[Option]) -> "Report":
        values: dict[str, Any] = {opt.name: opt.get() for opt in opts}
        values["unset"] = [opt.name for opt in opts if not opt.isSet()]
        fields = {f.name for f in dt.fields(Report)}
        return Report(**{k: v for k, v in values.items() if k in fields})


def describe(opt: Option) -> str:
    value = registry.format(opt.typ, opt.get())
    return value + ("" if opt.isSet() else " (unset)")


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    cmd = Option("cmd", str, Required, "COMMAND", "Command to run")
    mode = Option("mode", Mode, Required)
    timeout = Option("timeout", float, Required, "TIMEOUT")
    unit = Option("unit", Unit, Required)
    quiet = Option("quiet", bool, False)
    stopOnError = Option("stop_on_error", bool, False)
    until = Option("until", float, 0.0, "TIME")
    times = Option("times", convert.Unsigned, 0)
    verbose = Option("verbose", bool, False, description="Enable verbose logging")
    asJson = Option("json", bool, False, description="Print the values as JSON")

    required = [cmd, mode, timeout, unit]
    parser = Parser(
        required,
        [quiet, stopOnError, until, times, verbose, asJson],
        registry,
    )

    if not parser.parse(args):
        return 1

    logger.setup(bool(verbose.get()))

    if not all(opt.isSet() for opt in required):
        _logger.debug("Continuing with unset required options")
        vt100.error("required options are not set")
        parser.usage(const.ARGV0)

    reported = [cmd, mode, timeout, unit, quiet, stopOnError, until, times]
    if asJson.get():
        print(Report.fromOptions(reported).to_json())
        return 0

    print()
    for opt in reported:
        print(f"{opt.name:>14}: {describe(opt)}")
    print()
    return 0
