# apps/cli/hack.py
"""
Interactive terminal-hacking assistant.

Candidate passwords come from exactly one of:
  1) positional arguments,
  2) --file (validated and summarised first),
  3) the prompt, one per line, ending with a blank line (when neither is given).

Then type commands (`help` lists them) until the password is deduced.

Usage:
    python -m apps.cli.hack TIRES TIMES TILES SPIES
    python -m apps.cli.hack --file words/terminal.txt -v
"""

from __future__ import annotations

import argparse
import logging
import sys

from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from robco.datasets import validate_candidates, pretty_summary, load_candidates
from robco.hacker import CandidatePool
from robco.terminal import App, TextStreamUser

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="robco: deduce a terminal password from likeness feedback")
    ap.add_argument("passwords", nargs="*", help="candidate passwords shown on the terminal")
    ap.add_argument("--file", help="read candidate passwords from a file (one per line)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log each accepted guess")
    args = ap.parse_args(argv)
    if args.passwords and args.file:
        ap.error("give candidate passwords or --file, not both")

    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose else logging.INFO)

    user = TextStreamUser()

    if args.passwords:
        passwords = args.passwords
    elif args.file:
        rep = validate_candidates(args.file)
        log.info(pretty_summary(rep))
        for issue in rep["issues"]:
            log.warning(issue)
        if not rep["passed"]:
            log.error("no usable candidates in %s", args.file)
            return 1
        passwords = load_candidates(args.file)
    else:
        passwords = user.get_candidates()

    if not passwords:
        log.error("no candidate passwords given")
        return 1

    pool = CandidatePool(passwords)
    log.debug("starting with %d candidates", len(pool))
    App(pool, user).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
