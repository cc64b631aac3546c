"""
Interactive hacking session.

- TextStreamUser: line-oriented user over three text streams. Prompts and
  headers go to `errput`, results (passwords) go to `output`, so the output
  stream can be piped cleanly.
- App: drives a CandidatePool from the user's commands until the password is
  determined or the user exits.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional, TextIO

from robco.hacker import CandidatePool, HackerError
from .commands import (
    HELP_TEXT,
    Add,
    CommandError,
    Exit,
    Guess,
    Help,
    Recommend,
    Remove,
    ShowAnswer,
    View,
    parse_command,
)

log = logging.getLogger(__name__)


class TextStreamUser:
    def __init__(self, input: Optional[TextIO] = None, output: Optional[TextIO] = None,
                 errput: Optional[TextIO] = None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.errput = errput if errput is not None else sys.stderr

    def _readline(self, prompt: str = "> ") -> Optional[str]:
        """One line without its newline, or None at end of input."""
        self.errput.write(prompt)
        self.errput.flush()
        line = self.input.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def get_request(self):
        """Ask until a valid command arrives; end of input means exit."""
        while True:
            line = self._readline()
            if line is None:
                return Exit()
            try:
                return parse_command(line)
            except CommandError as e:
                self.show_error(e)

    def get_candidates(self) -> List[str]:
        """
        Read candidate passwords, one per line, until a blank line after at
        least one password. Returns an empty list if input ends first.
        """
        self.errput.write("Enter candidate passwords. End with blank line.\n")
        passwords: List[str] = []
        while True:
            line = self._readline()
            if line is None:
                return passwords
            pw = line.strip()
            if not pw:
                if passwords:
                    break
                continue
            if pw not in passwords:
                passwords.append(pw)
        self.errput.write("Candidate passwords accepted.\n")
        return passwords

    def show_passwords(self, passwords: Iterable[str]) -> None:
        passwords = list(passwords)
        self.errput.write(f"Remaining candidate passwords: ({len(passwords)})\n")
        for pw in passwords:
            self.output.write(f" * {pw}\n")
        self.errput.write("\n")

    def show_recommended(self, recommended: str) -> None:
        self.errput.write("Recommended: ")
        self.output.write(f"{recommended}\n")
        self.errput.write("\n")

    def show_answer(self, answer: str) -> None:
        self.errput.write("Password deduced: ")
        self.output.write(f"{answer}\n")
        self.errput.write("\n")

    def show_error(self, err: Exception) -> None:
        self.errput.write(f"Error: {err}\n\n")

    def show_help(self) -> None:
        self.errput.write(HELP_TEXT + "\n\n")


class App:
    def __init__(self, pool: CandidatePool, user: TextStreamUser):
        self.pool = pool
        self.user = user

    def run(self) -> Optional[str]:
        """
        Handle commands until the pool is down to one password (shown and
        returned) or the user exits (returns None).
        """
        while True:
            if self.pool.solved:
                answer = self.pool.answer()
                self.user.show_answer(answer)
                return answer
            if not self.step():
                return None

    def step(self) -> bool:
        """Handle one command. Returns False once the user asks to exit."""
        command = self.user.get_request()
        if isinstance(command, Exit):
            return False
        try:
            self._dispatch(command)
        except HackerError as e:
            self.user.show_error(e)
        return True

    def _dispatch(self, command) -> None:
        pool = self.pool
        if isinstance(command, View):
            self.user.show_passwords(pool.candidates())
        elif isinstance(command, Recommend):
            self.user.show_recommended(pool.recommend())
        elif isinstance(command, ShowAnswer):
            self.user.show_answer(pool.answer())
        elif isinstance(command, Guess):
            before = len(pool)
            pool.filter(command.guess, command.correctness)
            log.debug("guess %r at %d: %d -> %d candidates",
                      command.guess, command.correctness, before, len(pool))
        elif isinstance(command, Add):
            pool.add(command.password)
        elif isinstance(command, Remove):
            pool.remove(command.password)
        elif isinstance(command, Help):
            self.user.show_help()
        else:
            raise TypeError(f"unhandled command: {command!r}")
