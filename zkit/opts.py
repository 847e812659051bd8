"""Command-line options parser with flags, typed values and positional arguments."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Sequence, Union

_WHITESPACE = " \t\n\r\f\v"
_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


class OptionType(IntEnum):
    """Kind of value an option carries."""

    STRING = 0
    FLOAT = 1
    FLAG = 2
    INT = 3


class OptionErrorType(IntEnum):
    """Kind of problem found while compiling arguments."""

    VALUE = 0
    OPTION = 1
    EXTRA_VALUE = 2
    MISSING_VALUE = 3


_MESSAGES = {
    OptionErrorType.OPTION: 'Invalid option "{}"',
    OptionErrorType.VALUE: 'Invalid value "{}"',
    OptionErrorType.MISSING_VALUE: 'Missing value for option "{}"',
    OptionErrorType.EXTRA_VALUE: 'Extra value for option "{}"',
}


@dataclass(frozen=True)
class OptionError:
    """One problem found in the command line, with the text it concerns."""

    type: OptionErrorType
    value: str

    @property
    def message(self) -> str:
        return _MESSAGES[self.type].format(self.value)

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class _Entry:
    name: Optional[str]
    lname: Optional[str]
    desc: str
    type: OptionType
    met: bool = False
    pos: bool = False
    value: Union[str, int, float, None] = None


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _is_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "-_"


class Options:
    """Registry of options that parses an argument vector against them.

    ``lname`` is an option's long name (used with ``--``) and the key by which
    values are looked up; ``name`` is its short name (used with ``-``).
    """

    def __init__(self, appname: str) -> None:
        self.appname = appname
        self._entries: list[_Entry] = []
        self._positioned: list[_Entry] = []
        self.errors: list[OptionError] = []

    def add(self, name: Optional[str], lname: Optional[str], desc: str,
            type: OptionType) -> None:
        """Register an option with its short name, long name, description and type."""
        self._entries.append(_Entry(name, lname, desc, OptionType(type)))

    def _find(self, name: str, longname: bool) -> Optional[_Entry]:
        for entry in self._entries:
            candidate = entry.lname if longname else entry.name
            if candidate is not None and candidate == name:
                return entry
        return None

    def positional_add(self, name: str) -> None:
        """Mark an already registered option as positional, filled in registration order."""
        entry = self._find(name, True)
        if entry is not None:
            entry.pos = True
            self._positioned.insert(0, entry)

    def positionals_filled(self) -> bool:
        """Return whether every positional option has received a value."""
        return not self._positioned

    def _lookup(self, name: str) -> Optional[_Entry]:
        entry = self._find(name, True)
        return entry if entry is not None and entry.met else None

    def string(self, name: str, fallback: Optional[str] = None) -> Optional[str]:
        """Return the value of option *name*, or *fallback* if it was not given."""
        entry = self._lookup(name)
        return entry.value if entry is not None else fallback

    def real(self, name: str, fallback: float = 0.0) -> float:
        """Return the numeric value of option *name*, or *fallback* if it was not given."""
        entry = self._lookup(name)
        return entry.value if entry is not None else fallback

    def integer(self, name: str, fallback: int = 0) -> int:
        """Return the integer value of option *name*, or *fallback* if it was not given."""
        entry = self._lookup(name)
        return entry.value if entry is not None else fallback

    def has_arg(self, name: str) -> bool:
        """Return whether option *name* appeared on the command line."""
        entry = self._find(name, True)
        return bool(entry and entry.met)

    def _set_value(self, entry: _Entry, text: str) -> None:
        entry.met = True
        if entry.type is OptionType.STRING:
            entry.value = text
        elif entry.type is OptionType.FLOAT:
            entry.value = _parse_float(text)
        elif entry.type is OptionType.INT:
            entry.value = _parse_int(text)
        for index, pending in enumerate(self._positioned):
            if pending.lname == entry.lname:
                del self._positioned[index]
                break

    def _push_error(self, value: str, kind: OptionErrorType) -> None:
        self.errors.append(OptionError(kind, value))

    def compile(self, argv: Sequence[str]) -> bool:
        """Parse *argv* (whose first item is the program name); return True if error-free."""
        args = list(argv)
        had_errors = False
        i = 1
        while i < len(args):
            arg = args[i]
            i += 1
            if not arg:
                continue
            arg = arg.lstrip(_WHITESPACE)

            if not arg.startswith("-"):
                if self._positioned:
                    self._set_value(self._positioned.pop(), arg)
                else:
                    self._push_error(arg, OptionErrorType.VALUE)
                    had_errors = True
                continue

            longname = arg.startswith("--")
            body = arg[2:] if longname else arg[1:]
            end = 0
            while end < len(body) and _is_name_char(body[end]):
                end += 1
            option_name, rest = body[:end], body[end:]

            entry = self._find(option_name, longname)
            if entry is None:
                self._push_error(body, OptionErrorType.OPTION)
                had_errors = True
                continue

            is_flag = entry.type is OptionType.FLAG
            if rest.startswith("="):
                if is_flag:
                    self._push_error(option_name, OptionErrorType.EXTRA_VALUE)
                    had_errors = True
                    continue
                value = rest[1:]
            elif not rest:
                following = args[i] if i < len(args) else None
                if (following is not None and not following.startswith("-")
                        and (not self._positioned or not is_flag)):
                    if is_flag:
                        self._push_error(option_name, OptionErrorType.EXTRA_VALUE)
                        had_errors = True
                        continue
                    value = following
                    i += 1
                else:
                    if not is_flag:
                        self._push_error(option_name, OptionErrorType.MISSING_VALUE)
                        had_errors = True
                        continue
                    entry.met = True
                    continue
            else:
                value = rest

            self._set_value(entry, value)
        return not had_errors

    def _help_parts(self) -> Iterator[str]:
        yield f"USAGE: {self.appname}"
        for entry in reversed(self._entries):
            if entry.pos:
                yield f" [{entry.lname}]"
        yield "\nOPTIONS:\n"
        for entry in self._entries:
            if entry.name:
                if entry.lname:
                    yield f"\t-{entry.name}, --{entry.lname}: {entry.desc}\n"
                else:
                    yield f"\t-{entry.name}: {entry.desc}\n"
            else:
                yield f"\t--{entry.lname}: {entry.desc}\n"

    def _error_lines(self) -> Iterator[str]:
        for error in self.errors:
            yield f"ERROR: {error.message}\n"

    def format_help(self) -> str:
        """Return the help screen: usage line and a list of all options."""
        return "".join(self._help_parts())

    def print_help(self) -> None:
        """Write the help screen to standard output."""
        out = sys.stdout
        for part in self._help_parts():
            out.write(part)
        out.flush()

    def format_errors(self) -> str:
        """Return one ``ERROR:`` line for every problem found so far."""
        return "".join(self._error_lines())

    def print_errors(self) -> None:
        """Write the collected errors to standard output."""
        out = sys.stdout
        for line in self._error_lines():
            out.write(line)
        out.flush()