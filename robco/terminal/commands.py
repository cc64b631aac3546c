"""
Command language for the interactive session.

One command per line, tokens separated by whitespace:

    exit                          stop without an answer
    view                          list remaining candidates
    recommend                     suggest the next guess
    answer                        show the password, if determined
    guess <password> <correct>    apply terminal feedback
    add <password>                add a candidate
    remove <password>             drop a candidate
    help                          show this list
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List

HELP_TEXT = """Commands:
  view                          list remaining candidate passwords
  recommend                     suggest the best password to try next
  guess <password> <correct>    report how many characters the terminal said were correct
  answer                        show the password once it is determined
  add <password>                add a candidate password
  remove <password>             remove a candidate password
  help                          show this help
  exit                          quit"""


# ---- Commands ----

@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class View:
    pass


@dataclass(frozen=True)
class Recommend:
    pass


@dataclass(frozen=True)
class ShowAnswer:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Guess:
    guess: str
    correctness: int


@dataclass(frozen=True)
class Add:
    password: str


@dataclass(frozen=True)
class Remove:
    password: str


# ---- Parse errors ----

class CommandError(ValueError):
    """A line that could not be turned into a command."""


class BlankLine(CommandError):
    def __init__(self):
        super().__init__("expected command, found blank line")


class UnrecognisedCommand(CommandError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"command not recognised: {name}")


class UnexpectedToken(CommandError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unexpected token: {token}")


class MissingToken(CommandError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"expected token: <{name}>, found nothing")


class MalformedCorrectness(CommandError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"cannot parse correctness value - expected nonnegative integer, found {text}")


# ---- Parsing ----

def _no_args(command):
    def parse(args: Iterator[str]):
        tok = next(args, None)
        if tok is not None:
            raise UnexpectedToken(tok)
        return command()
    return parse


def _one_password(command, what: str):
    def parse(args: Iterator[str]):
        pw = next(args, None)
        if pw is None:
            raise MissingToken(what)
        tok = next(args, None)
        if tok is not None:
            raise UnexpectedToken(tok)
        return command(pw)
    return parse


def _parse_guess(args: Iterator[str]) -> Guess:
    guess = next(args, None)
    if guess is None:
        raise MissingToken("guess")
    text = next(args, None)
    if text is None:
        raise MissingToken("correctness")
    if not text.isdecimal():
        raise MalformedCorrectness(text)
    tok = next(args, None)
    if tok is not None:
        raise UnexpectedToken(tok)
    return Guess(guess, int(text))


PARSERS: Dict[str, Callable] = {
    "exit": _no_args(Exit),
    "view": _no_args(View),
    "recommend": _no_args(Recommend),
    "answer": _no_args(ShowAnswer),
    "help": _no_args(Help),
    "guess": _parse_guess,
    "add": _one_password(Add, "password to add"),
    "remove": _one_password(Remove, "password to remove"),
}


def parse_command(line: str):
    """
    Turn one input line into a command.

    Raises:
      CommandError (one of its subclasses) if the line is not a valid command.
    """
    tokens: List[str] = line.split()
    if not tokens:
        raise BlankLine()
    name, args = tokens[0], iter(tokens[1:])
    try:
        parser = PARSERS[name]
    except KeyError:
        raise UnrecognisedCommand(name) from None
    return parser(args)
