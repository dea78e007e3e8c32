"""
System functions for pathbrowser.

Responsibilities:
- Detect the operating system family and select the matching FileSystem,
  once per System instance.
- Detect whether we run from a command line and who the client is.
- Execute a command, or a list of commands through a generated shell script,
  and capture the output lines and the exit status.
"""

from __future__ import annotations

import logging
import os
import platform
import shlex
import subprocess
from typing import List, Mapping, Optional, Sequence, Union

from .directory import Directory
from .errors import CommandError, UnsupportedPlatformError
from .file import File
from .filesystem import FileSystem
from .models import CommandResult
from .unix import UnixFileSystem
from .windows import WindowsFileSystem

logger = logging.getLogger(__name__)

UNIX_FAMILIES = ("LINUX", "UNIX", "DARWIN", "FREEBSD", "OPENBSD", "NETBSD")
WINDOWS_FAMILIES = ("WINDOWS", "WIN32", "WINNT")

# Exit status of a shell when the command could not be found.
COMMAND_NOT_FOUND = 127


class System:
    """
    Facade for the host operating system.

    Parameters
    ----------
    os_name : str, optional
        Operating system family, defaults to platform.system().
    directory : Directory, optional
        Storage for the selected file system, defaults to the host.
    environ : Mapping[str, str], optional
        Environment variables, defaults to os.environ.
    """

    def __init__(
        self,
        os_name: Optional[str] = None,
        directory: Optional[Directory] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.os_name = (os_name if os_name is not None else platform.system()).upper()
        self.directory = directory
        self.environ = environ if environ is not None else os.environ

        self._fs: Optional[FileSystem] = None

    def is_unix(self) -> bool:
        return self.os_name in UNIX_FAMILIES

    def is_windows(self) -> bool:
        return self.os_name in WINDOWS_FAMILIES

    def get_file_system(self) -> FileSystem:
        """
        Get the file system for this operating system.

        The file system is selected on the first call and reused afterwards.

        Raises
        ------
        UnsupportedPlatformError
            When the operating system is neither Unix nor Windows.
        """
        if self._fs is not None:
            return self._fs

        if self.is_unix():
            self._fs = UnixFileSystem(self.directory)
        elif self.is_windows():
            self._fs = WindowsFileSystem(self.directory)
        else:
            raise UnsupportedPlatformError(
                f"Could not get the file system: {self.os_name} is not supported"
            )

        logger.debug("Selected %s for %s", type(self._fs).__name__, self.os_name)

        return self._fs

    def is_cli(self) -> bool:
        """Check whether we run from a command line (a shell is set)."""
        return "SHELL" in self.environ or "PROMPT" in self.environ

    def get_client(self) -> str:
        """
        Get the client using the system.

        From a command line this is the user name, otherwise the address of
        the remote client (CGI style variables). 'unknown' when undetermined.
        """
        if self.is_cli():
            keys = ("USER", "LOGNAME", "USERNAME")
        else:
            keys = ("HTTP_CLIENT_IP", "HTTP_X_FORWARDED_FOR", "REMOTE_ADDR")

        for key in keys:
            value = self.environ.get(key)
            if value:
                return value

        return "unknown"

    # ------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------

    def execute(self, command: Union[str, Sequence[str]]) -> CommandResult:
        """
        Execute a command, or multiple commands in the same shell context.

        Raises
        ------
        CommandError
            When the command is empty or could not be found.
        """
        if isinstance(command, str):
            return self._execute_command(command)

        return self._execute_commands(list(command))

    def execute_in_shell(self, commands: Union[str, Sequence[str]]) -> CommandResult:
        """Execute commands with the home directory and display of the user set."""
        if not self.is_unix():
            raise CommandError("Could not execute commands in shell: only supported on *nix systems")

        if isinstance(commands, str):
            commands = [commands]

        home = os.path.expanduser("~")

        return self._execute_commands([
            f"export HOME={shlex.quote(home)}",
            "export DISPLAY=:0",
            *commands,
        ])

    def _execute_command(self, command: str) -> CommandResult:
        if not isinstance(command, str) or not command.strip():
            raise CommandError("Could not execute command: provided command is empty or not a string")

        logger.debug("Executing %s", command)

        completed = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
        )

        if completed.returncode == COMMAND_NOT_FOUND:
            raise CommandError(f"Could not execute {command}: command not found")

        output = [line.rstrip() for line in completed.stdout.splitlines()]

        return CommandResult(output=output, code=completed.returncode)

    def _execute_commands(self, commands: List[str]) -> CommandResult:
        """Execute multiple commands through a generated script."""
        file_system = self.get_file_system()

        script = file_system.get_temporary_file()
        log = script.get_parent().get_child(script.get_name() + ".out")

        try:
            command = self.generate_command(commands, script, log)
            result = self._execute_command(command)

            output: List[str] = []
            if log.exists():
                content = log.read().decode("utf-8", errors="replace").strip()
                if content:
                    output = content.split("\n")

            return CommandResult(output=output, code=result.code)
        finally:
            if script.exists():
                script.delete()

            if log.exists():
                log.delete()

    def generate_command(self, commands: Sequence[str], script: File, log: File) -> str:
        """
        Write the commands into a script and get the command to run it.

        Every command is echoed before it runs; the script stops at the first
        failing command, unless that command is sent to the background.

        Raises
        ------
        CommandError
            When no valid command is provided or on a non-Unix system.
        """
        if not self.is_unix():
            raise CommandError("Could not generate command: only supported for *nix systems")

        lines: List[str] = []
        for command in commands:
            command = command.strip()
            if not command:
                continue

            line = f'echo "# executing command: {command}"\n{command}'
            if not command.endswith("&"):
                line += " || exit $?"

            lines.append(line)

        if not lines:
            raise CommandError("Could not generate script: no valid commands provided")

        script.write("#!/bin/sh\n\n" + "\n".join(lines) + "\n")

        script_path = shlex.quote(script.get_absolute_path())
        log_path = shlex.quote(log.get_absolute_path())

        return f"sh {script_path} >> {log_path} 2>> {log_path}"
