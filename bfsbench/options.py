"""Command-line options for the R-MAT / Kronecker BFS benchmark."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence

A_PARAM = 0.57
B_PARAM = 0.19
C_PARAM = 0.19
D_PARAM = 1.0 - (A_PARAM + B_PARAM + C_PARAM)

NBFS_MAX = 64
DEFAULT_SCALE = 14
DEFAULT_EDGEFACTOR = 16

_OPTSTRING = "v?hRs:e:A:a:B:b:C:c:D:d:Vo:r:"
_PARAM_BITS = {"A": 1, "B": 2, "C": 4, "D": 8}

_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


class OptionsError(ValueError):
    """Raised when the command line holds invalid settings."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


@dataclass
class Options:
    """Benchmark settings.

    ``request`` is ``"version"`` or ``"help"`` when the command line asked
    for that output instead of a run; parsing stops at that point.
    """

    verbose: bool = False
    use_rmat: bool = False
    dumpname: str | None = None
    rootname: str | None = None
    a: float = A_PARAM
    b: float = B_PARAM
    c: float = C_PARAM
    d: float = D_PARAM
    nbfs: int = NBFS_MAX
    scale: int = DEFAULT_SCALE
    edgefactor: int = DEFAULT_EDGEFACTOR
    request: str | None = None


def _strtol(text: str) -> tuple[int, bool]:
    """Parse a leading base-10 integer; return (value, out_of_range)."""
    match = _INT_RE.match(text)
    if not match:
        return 0, False
    value = int(match.group(1))
    if value > _LONG_MAX:
        return _LONG_MAX, True
    if value < _LONG_MIN:
        return _LONG_MIN, True
    return value, False


def _strtod(text: str) -> tuple[float, bool]:
    """Parse a leading floating-point number; return (value, out_of_range)."""
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0, False
    literal = match.group(1)
    value = float(literal)
    lowered = literal.lower()
    if math.isinf(value) and "inf" not in lowered:
        return value, True
    if value == 0.0:
        mantissa = re.split(r"[eE]", literal)[0]
        if re.search(r"[1-9]", mantissa):
            return value, True
    return value, False


def _getopt(argv: Sequence[str], spec: str) -> Iterator[tuple[str, str | None]]:
    """Yield (option, argument) pairs the way POSIX getopt reports them.

    Unknown options and missing arguments are reported as ``"?"``.
    Non-option words are skipped; ``--`` ends option processing.
    """
    args = list(argv)
    index = 0
    while index < len(args):
        word = args[index]
        index += 1
        if word == "--":
            return
        if not word.startswith("-") or word == "-":
            continue
        pos = 1
        while pos < len(word):
            ch = word[pos]
            pos += 1
            where = spec.find(ch)
            if ch == ":" or where < 0:
                yield "?", None
                continue
            if spec[where + 1 : where + 2] == ":":
                if pos < len(word):
                    value = word[pos:]
                elif index < len(args):
                    value = args[index]
                    index += 1
                else:
                    yield "?", None
                    break
                yield ch, value
                break
            yield ch, None


def usage_text() -> str:
    """Return the help message listing options and output keys."""
    keys = [
        "SCALE", "edgefactor", "construction_time",
        "min_time", "firstquartile_time", "median_time", "thirdquartile_time",
        "max_time", "mean_time", "stddev_time",
        "min_nedge", "firstquartile_nedge", "median_nedge", "thirdquartile_nedge",
        "max_nedge", "mean_nedge", "stddev_nedge",
        "min_TEPS", "firstquartile_TEPS", "median_TEPS", "thirdquartile_TEPS",
        "max_TEPS", "harmonic_mean_TEPS", "harmonic_stddev_TEPS",
    ]
    lines = [
        "Options:",
        "  v   : version",
        "  h|? : this message",
        "  R   : use R-MAT from SSCA2 (default: use Kronecker generator)",
        f"  s   : R-MAT scale (default {DEFAULT_SCALE})",
        f"  e   : R-MAT edge factor (default {DEFAULT_EDGEFACTOR})",
        f"  A|a : R-MAT A (default {A_PARAM:g}) >= 0",
        f"  B|b : R-MAT B (default {B_PARAM:g}) >= 0",
        f"  C|c : R-MAT C (default {C_PARAM:g}) >= 0",
        f"  D|d : R-MAT D (default {D_PARAM:g}) >= 0",
        "        Note: Setting 3 of A,B,C,D requires the arguments to sum to",
        "        at most 1.  Otherwise, the parameters are added and normalized",
        "        so that the sum is 1.",
        "  V   : Enable extra (Verbose) output",
        "  o   : Read the edge list from (or dump to) the named file",
        "  r   : Read the BFS roots from (or dump to) the named file",
        "",
        'Outputs take the form of "key: value", with keys:',
    ]
    lines.extend(f"  {key}" for key in keys)
    return "\n".join(lines) + "\n"


def parse_options(argv: Sequence[str], environ: Mapping[str, str] | None = None) -> Options:
    """Parse command-line words (without the program name) into Options.

    Raises OptionsError listing every problem found.
    """
    if environ is None:
        environ = os.environ
    opts = Options(verbose="VERBOSE" in environ)
    params = {"A": opts.a, "B": opts.b, "C": opts.c, "D": opts.d}
    errors: list[str] = []
    whichset = 0
    nset = 0

    for ch, value in _getopt(argv, _OPTSTRING):
        if ch == "v":
            opts.request = "version"
            return opts
        if ch in ("h", "?"):
            opts.request = "help"
            return opts
        if ch == "V":
            opts.verbose = True
        elif ch == "R":
            opts.use_rmat = True
        elif ch == "o":
            opts.dumpname = value
        elif ch == "r":
            opts.rootname = value
        elif ch in ("s", "e"):
            assert value is not None
            number, bad = _strtol(value)
            if ch == "s":
                opts.scale = number
                if bad:
                    errors.append(f"Error parsing scale {value}")
                if number <= 0:
                    errors.append("Scale must be non-negative.")
            else:
                opts.edgefactor = number
                if bad:
                    errors.append(f"Error parsing edge factor {value}")
                if number <= 0:
                    errors.append("Edge factor must be non-negative.")
        else:
            assert value is not None
            name = ch.upper()
            bit = _PARAM_BITS[name]
            number, bad = _strtod(value)
            params[name] = number
            if whichset & bit:
                errors.append(f"{name} already set")
            if bad:
                errors.append(f"Error parsing {name} {value}")
            if number < 0:
                errors.append(f"{name} must be non-negative")
            whichset |= bit
            nset += 1

    if errors:
        raise OptionsError(errors)

    if nset == 3:
        missing = next(name for name, bit in _PARAM_BITS.items() if not whichset & bit)
        params[missing] = 1.0 - sum(params[name] for name in "ABCD" if name != missing)
        if any(params[name] < 0 for name in "ABCD"):
            raise OptionsError([
                "When setting three R-MAT parameters, all must be < 1.",
                *(f"  {name} = {params[name]:g}" for name in "ABCD"),
            ])
    elif nset > 0:
        total = params["A"] + params["B"] + params["C"] + params["D"]
        for name in "ABC":
            params[name] /= total
        params["D"] = 1.0 - (params["A"] + params["B"] + params["C"])

    opts.a, opts.b, opts.c, opts.d = (params[name] for name in "ABCD")
    return opts