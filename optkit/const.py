VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

DESCRIPTION = "Typed command-line options with enumerated values and usage generation"

ARGV0 = "optkit-example"
PREFIX = "--"
SEPARATOR = "="
IDENT_CHARS = "_-+"

TRUE_LITERALS = ("true", "True", "y", "yes", "Y", "Yes", "1")
FALSE_LITERALS = ("false", "False", "n", "no", "N", "No", "0")
