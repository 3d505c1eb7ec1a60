"""Command-line option parser with typed options, switches and a help listing."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Sequence, TextIO

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ParserError(Exception):
    """Raised when a command-line value cannot be converted or is incomplete."""


class ParseStatus(IntEnum):
    """Outcome of :meth:`Parser.show_msg`."""

    ERROR = -1
    WARNING = 0
    OK = 1
    HELP = 2


@dataclass
class _Command:
    explanation: str
    value: str
    size: int
    required: bool
    handled: bool


def _to_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ParserError(f"cannot convert {text!r} to an integer")
    return int(match.group())


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ParserError(f"cannot convert {text!r} to a number")
    return float(match.group())


def _convert(kind: type, text: str) -> Any:
    if kind is bool:
        return _to_int(text) > 0
    if kind is int:
        return _to_int(text)
    if kind is float:
        return _to_float(text)
    if kind is str:
        return text
    raise ParserError(f"unsupported option type {kind.__name__}")


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return _format_value(value[0]) if value else ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _switch_value(value: Any) -> tuple[Any, bool]:
    """Value an option takes when given without arguments, and whether it was handled."""
    if isinstance(value, str):
        return value, False
    if isinstance(value, (list, tuple)):
        if not value:
            return value, False
        if isinstance(value[0], str):
            return value, False
        result = list(value)
        result[0] = type(value[0])(True)
        return result, True
    return type(value)(True), True


class Parser:
    """Collects ``--name value...`` arguments and resolves registered options."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        if argv is None:
            argv = sys.argv[1:]
        self._args: dict[str, list[str]] = {}
        self._registered: dict[str, _Command] = {}
        self._order: list[str] = []
        self._has_help = False
        current = ""
        for token in argv:
            if token.startswith("--"):
                current = token[2:]
                self._args[current] = []
            elif current:
                self._args[current].append(token)

    def add_option(
        self,
        name: str,
        value: Any,
        explanation: str = "",
        required: bool = False,
        size: int | None = None,
    ) -> Any:
        """Register an option and return its value, parsed from the arguments if given.

        The type of ``value`` (or of its first element for a list) decides how
        the arguments are converted. ``size`` is the number of expected
        arguments; it defaults to the list length, or 1 for a scalar.
        """
        if size is None:
            size = len(value) if isinstance(value, (list, tuple)) else 1
        handled = False
        if self._has_help or self._help_requested():
            self._has_help = True
        elif self._find_parse(name):
            value = self._process(name, value, size)
            handled = True
        elif self._find_switch(name):
            value, handled = _switch_value(value)
        self._register(name, _Command(explanation, _format_value(value), size, required, handled))
        return value

    def add_switch(
        self, name: str, value: bool, explanation: str = "", required: bool = False
    ) -> bool:
        """Register a switch and return its value, toggled if the switch was given."""
        handled = False
        if self._has_help or self._help_requested():
            self._has_help = True
        elif self._find_switch(name):
            value = not value
            handled = True
        self._register(name, _Command(explanation, _format_value(value), 1, required, handled))
        return value

    def show_msg(self, verbose: bool = True) -> ParseStatus:
        """Print help, errors or the resolved options and report the outcome."""
        width = self._width()
        if self._help_requested():
            for name in self._order:
                command = self._registered[name]
                required = "(REQUIRED) " if command.required else ""
                print(
                    f"--{name:<{width}} \t{required}{command.explanation} "
                    f"(default: {command.value})"
                )
            return ParseStatus.HELP
        if self._report_missing(True):
            return ParseStatus.ERROR
        if self._report_unknown(verbose):
            return ParseStatus.WARNING
        if verbose:
            for line in self._value_lines(width):
                print(line, end="")
        return ParseStatus.OK

    def output_log(self, log: TextIO) -> str:
        """Write every registered option with its value to ``log`` and return the text."""
        text = "".join(self._value_lines(self._width()))
        log.write(text)
        return text

    def has_help(self) -> bool:
        return self._has_help

    def _register(self, name: str, command: _Command) -> None:
        self._registered[name] = command
        self._order.append(name)

    def _width(self) -> int:
        return max((len(name) for name in self._order), default=0)

    def _value_lines(self, width: int) -> Iterable[str]:
        for name in self._order:
            yield f"--{name:<{width}} \t{self._registered[name].value}\n"

    def _help_requested(self) -> bool:
        return self._find_switch("h") or self._find_switch("help")

    def _find_parse(self, target: str) -> bool:
        return bool(self._args.get(target))

    def _find_switch(self, target: str) -> bool:
        return target in self._args and not self._args[target]

    def _process(self, name: str, value: Any, size: int) -> Any:
        given = self._args[name]
        if len(given) != size:
            logger.warning(
                "Expect variable [%s] to have %d arguments, instead of %d",
                name,
                size,
                len(given),
            )
        if len(given) < size:
            raise ParserError(
                f"option --{name} expects {size} argument(s), got {len(given)}"
            )
        if isinstance(value, (list, tuple)):
            kind = type(value[0]) if value else str
            result = list(value)
            result[:size] = [_convert(kind, text) for text in given[:size]]
            return result
        return _convert(type(value), given[0])

    def _report_missing(self, verbose: bool) -> bool:
        missing = sorted(
            name
            for name, command in self._registered.items()
            if command.required and not command.handled
        )
        if missing and verbose:
            print("[Error] The following argument(s) should be given. Pass --h for help")
            for name in missing:
                print(f'\t\t {name} "{self._registered[name].explanation}"')
        return bool(missing)

    def _report_unknown(self, verbose: bool) -> bool:
        unknown = sorted(name for name in self._args if name not in self._registered)
        if unknown and verbose:
            print("[Warning] Unknown argument(s) given. Please check the input arguments.")
            for name in unknown:
                print(f"\t\t {name}")
        return bool(unknown)