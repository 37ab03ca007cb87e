import sys

from typing import Optional, TextIO

from . import const, convert, vt100
from .convert import Registry
from .option import Option


def placeholder(opt: Option) -> str:
    """Returns the declared placeholder of `opt`, or its name upper-cased."""
    if opt.placeholder:
        return opt.placeholder
    return opt.name.upper()


def flag(opt: Option) -> str:
    return f"{const.PREFIX}{opt.name}{const.SEPARATOR}{placeholder(opt)}"


def synopsis(argv0: str, required: list[Option], optional: list[Option]) -> str:
    res = f"Usage: {argv0}"
    for opt in required:
        res += f" {flag(opt)}"
    for opt in optional:
        res += f" [{flag(opt)}]"
    return res


def _status(opt: Option, registry: Registry) -> str:
    if opt.required:
        res = "required"
    else:
        res = f"optional, default: {registry.format(opt.typ, opt.default) or repr('')}"

    if opt.typ in registry:
        table = convert.valueMap(registry, opt.typ)
        if table is not None:
            res += f", one of: {', '.join(table.aliases())}"

    if opt.description:
        res += f" - {opt.description}"
    return res


def formatUsage(
    argv0: str,
    required: list[Option],
    optional: list[Option],
    registry: Registry = convert.DEFAULT,
) -> str:
    """
    Renders the usage text for a set of declared options.

    The first line is the synopsis, followed by one line per option in the
    order given. Options are only read, never modified.
    """
    opts = list(required) + list(optional)
    res = synopsis(argv0, required, optional) + "\n"
    if len(opts) == 0:
        return res

    width = max(len(flag(opt)) for opt in opts) + 2
    res += "\nOptions:\n"
    for opt in opts:
        res += vt100.indent(f"{flag(opt):<{width}}{_status(opt, registry)}") + "\n"
    return res


def usage(
    argv0: str,
    required: list[Option],
    optional: list[Option],
    registry: Registry = convert.DEFAULT,
    file: Optional[TextIO] = None,
) -> str:
    """
    Writes the usage text to `file` and returns it.

    A `file` of None means `sys.stderr`, use `formatUsage` to get the text
    without writing it.
    """
    text = formatUsage(argv0, required, optional, registry)
    print(text, file=file or sys.stderr)
    return text
