"""Positional argument substitution for alias command templates.

Recognized placeholders:
- `$N` / `${N}` with N >= 1: the Nth argument. All following digits are
  consumed, so `$10` is the tenth argument.
- `$@` / `$*`: every argument joined by a single space.

A placeholder past the end of the argument list becomes the empty string.
Everything else, `$0`, `$HOME` and `$$` included, is left for the shell.
No quoting is applied.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ALL_ARGS = 0

_PLACEHOLDER = re.compile(r"\$(?:\{([1-9][0-9]*)\}|([1-9][0-9]*)|([@*]))")


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    """Reference to argument `index` (1-based), or ALL_ARGS."""

    index: int
    raw: str


Token = Literal | Placeholder


def tokenize(template: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    for match in _PLACEHOLDER.finditer(template):
        if match.start() > pos:
            tokens.append(Literal(template[pos : match.start()]))
        braced, bare, star = match.groups()
        index = ALL_ARGS if star else int(braced or bare)
        tokens.append(Placeholder(index=index, raw=match.group(0)))
        pos = match.end()
    if pos < len(template):
        tokens.append(Literal(template[pos:]))
    return tokens


def resolve(token: Token, args: Sequence[str]) -> str:
    if isinstance(token, Literal):
        return token.text
    if token.index == ALL_ARGS:
        return " ".join(args)
    if token.index <= len(args):
        return args[token.index - 1]
    return ""


def substitute(template: str, args: Sequence[str]) -> str:
    """Return template with every positional placeholder replaced from args."""
    command = "".join(resolve(token, args) for token in tokenize(template))
    logger.debug("substituted %r with %d args -> %r", template, len(args), command)
    return command
