from __future__ import annotations

import cmd
from typing import Callable

from colorama.ansi import Cursor, clear_screen

from . import __version__, actions
from .config import TOGGLES, AssistantConfig, apply_setting
from .console import Console
from .core.errors import CmdAssistError
from .history import History
from .logs import configure_logging
from .report import render

BANNER = f"""\
+----------------------------------------------------------------+
|  cmdassist v{__version__:<51}|
|  Command typo fixing & text-file format checking               |
+----------------------------------------------------------------+"""


class AssistantShell(cmd.Cmd):
    intro = BANNER + "\nType 'help' for available commands."
    prompt = "cmdassist> "

    def __init__(self, config: AssistantConfig, console: Console | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.config = config
        self.console = console or Console(verbose=config.verbose)
        self.history = History(config.history_file, enabled=config.history)

    def precmd(self, line: str) -> str:
        if line.strip() and line != "EOF":
            self.history.append(line)
        return line

    def emptyline(self) -> bool:
        # Do nothing when the user presses Enter on an empty line
        return False

    def default(self, line: str) -> bool:
        name = line.split(maxsplit=1)[0]
        self.console.warning(f"Unknown command: {name}")
        self.console.info("Type 'help' for available commands")
        return False

    def do_fix(self, arg: str) -> None:
        """fix <command>      Suggest a fix for a mistyped command (e.g. fix gti status)."""
        self._run("fix", arg, actions.fix)

    def do_validate(self, arg: str) -> None:
        """validate <command> Check a command for unbalanced quotes/brackets and dangerous patterns."""
        self._run("validate", arg, actions.validate_command)

    def do_suggest(self, arg: str) -> None:
        """suggest <command>  Suggest whitespace improvements for a command."""
        self._run("suggest", arg, actions.suggest)

    def do_check(self, arg: str) -> None:
        """check <file>       Check a command's shape and, if it names a file, the file's format."""
        self._run("check", arg, lambda target: actions.check(target, self.config))

    def do_autofix(self, arg: str) -> None:
        """autofix <file>     Fix trailing whitespace, tabs and the final newline (keeps <file>.backup)."""
        self._run("autofix", arg, lambda target: actions.autofix(target, self.config))

    def do_history(self, arg: str) -> None:
        """history            Show command history."""
        entries = self.history.entries()
        if not entries:
            self.console.info("No history found")
            return
        self.console.info("Command History:")
        for number, entry in enumerate(entries, start=1):
            self.console.plain(f"{number:6}  {entry}")

    def do_config(self, arg: str) -> None:
        """config             Show the current configuration."""
        c = self.config
        rows = [
            ("Auto Fix Enabled", c.auto_fix),
            ("Format Check Enabled", c.format_check),
            ("Logging Enabled", c.logging),
            ("History Enabled", c.history),
            ("Verbose Mode", c.verbose),
            ("Log File", c.log_file),
            ("History File", c.history_file),
            ("Config File", c.source or "(defaults)"),
        ]
        for label, value in rows:
            self.console.plain(f"{label + ':':<24} {value}")

    def do_set(self, arg: str) -> None:
        """set <option>=<true|false>  Configure settings (see 'help set')."""
        if not arg:
            self.console.error("Usage: set <option>")
            return
        try:
            new_config = apply_setting(self.config, arg)
        except CmdAssistError as e:
            self.console.error(str(e))
            return
        self._apply_config(new_config)
        key, _, _ = arg.partition("=")
        state = "enabled" if getattr(new_config, key.strip()) else "disabled"
        self.console.success(f"{key.strip()} {state}")

    def help_set(self) -> None:
        self.console.plain("set <option>=<true|false>")
        self.console.plain(f"  options: {', '.join(TOGGLES)}")

    def do_version(self, arg: str) -> None:
        """version            Show version information."""
        self.console.plain(f"cmdassist v{__version__}")

    def do_clear(self, arg: str) -> None:
        """clear              Clear the screen."""
        self.console.plain(clear_screen() + Cursor.POS(1, 1))

    def do_exit(self, arg: str) -> bool:
        """exit               Exit the assistant."""
        self.console.info("Goodbye!")
        return True

    def do_quit(self, arg: str) -> bool:
        """quit               Exit the assistant."""
        return self.do_exit(arg)

    def do_EOF(self, arg: str) -> bool:
        self.console.plain()
        return self.do_exit(arg)

    def _run(self, name: str, arg: str, action: Callable[[str], actions.ActionResult]) -> None:
        if not arg:
            self.console.error(f"Usage: {name} <argument>")
            return
        try:
            result = action(arg)
        except CmdAssistError as e:
            self.console.error(str(e))
            return
        render(self.console, result)

    def _apply_config(self, config: AssistantConfig) -> None:
        relog = (config.logging, config.verbose) != (self.config.logging, self.config.verbose)
        self.config = config
        self.console.verbose = config.verbose
        self.history.enabled = config.history
        if relog:
            configure_logging(config)
