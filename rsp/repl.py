"""Interactive mode for the rsp interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging
import sys
from pathlib import Path

from rsp.config import get_color, get_history_file
from rsp.errors import RspError, RspParseError
from rsp.highlight import highlight
from rsp.interpreter import Interpreter
from rsp.printer import to_lisp_string

logger = logging.getLogger(__name__)

EXIT_COMMANDS = (".exit", "(exit)")
HISTORY_LENGTH = 1000


def is_incomplete(err: RspParseError) -> bool:
    """True when more lines could still complete the input (open paren, open string)."""
    return err.incomplete


class Repl(cmd.Cmd):
    """rsp interpreter shell. Each complete input is evaluated against one session."""
    intro = "rsp Lisp interpreter. Type .exit, (exit) or Ctrl-D to quit."
    secondary_prompt = "... "  # used for line continuations

    def __init__(self, interpreter: Interpreter | None = None, history_file: Path | None = None,
                 *args, color: bool | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.history_file = history_file
        # None: color only when writing to a terminal
        if color is None:
            isatty = getattr(self.stdout, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self.line_number = 1
        self._pending = ""
        self.prompt = self._primary_prompt()

    def _primary_prompt(self) -> str:
        return f"rsp ({self.line_number})> "

    # cmd.Cmd would route "help ..." or "x ..." to do_* methods; every line here is code.
    def onecmd(self, line: str) -> bool:
        if line == "EOF":
            return self.do_EOF(line)
        if not line.strip() and not self._pending:
            return self.emptyline()
        return self.default(line)

    def default(self, line: str) -> bool:
        source = f"{self._pending}\n{line}" if self._pending else line
        if not self._pending and source.strip() in EXIT_COMMANDS:
            self.stdout.write("Exiting.\n")
            return True
        try:
            # Values print as they are produced, so a later failing form
            # does not hide the results before it
            for value in self.interpreter.eval_each(source):
                self._print_value(value)
        except RspParseError as err:
            if is_incomplete(err):
                self._pending = source
                self.prompt = self.secondary_prompt
                return False
            self._report(err)
        except RspError as err:
            self._report(err)
        except Exception as err:  # cmd.Cmd leaves the loop on any exception
            logger.debug("unexpected failure evaluating input", exc_info=err)
            sys.stderr.write(f"Error: {type(err).__name__}: {err}\n")
        self._pending = ""
        return False

    def _print_value(self, value) -> None:
        text = to_lisp_string(value)
        self.stdout.write((highlight(text) if self.color else text) + "\n")

    def _report(self, err: RspError) -> None:
        logger.debug("repl input failed", exc_info=err)
        sys.stderr.write(f"Error: {err}\n")

    def postcmd(self, stop: bool, line: str) -> bool:
        if not self._pending:
            self.line_number += 1
            self.prompt = self._primary_prompt()
        return stop

    def emptyline(self) -> bool:
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg) -> bool:
        """Exits interpreter."""
        self.stdout.write("\n")
        return True

    def preloop(self) -> None:
        if self.history_file is None or not self.use_rawinput:
            return
        try:
            import readline
        except ImportError:
            return
        readline.set_history_length(HISTORY_LENGTH)
        try:
            readline.read_history_file(self.history_file)
        except OSError:
            logger.info("no history loaded from %s", self.history_file)

    def postloop(self) -> None:
        if self.history_file is None or not self.use_rawinput:
            return
        try:
            import readline
        except ImportError:
            return
        try:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(self.history_file)
        except OSError as exc:
            logger.warning("could not save history to %s: %s", self.history_file, exc)


def start_repl(interpreter: Interpreter | None = None) -> None:
    try:
        Repl(interpreter, history_file=get_history_file(), color=get_color()).cmdloop()
    except KeyboardInterrupt:
        # Interrupt stops accepting input; it does not resume an evaluation
        print("\nInterrupted.")
