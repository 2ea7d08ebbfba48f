"""Launch the versioned service executable that sits next to the launcher."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

__all__ = ["RunObject"]

_SW_HIDE = 0


def _ends_with(value: str, tail: str) -> bool:
    if not value or not tail or len(value) < len(tail):
        return False
    return value.endswith(tail)


class RunObject:
    """Forward command-line arguments to ``<launcher dir>/<version>/<service>``."""

    def __init__(self, app_file_name: str, version: str, service_name: str) -> None:
        self.app_file_name = app_file_name
        self.version = version
        self.service_name = service_name

    def build_arguments(self, argv: Sequence[str]) -> str:
        """Quote each argument, dropping those naming the application itself.

        The first double quote inside an argument is escaped with a backslash.
        Every argument is followed by a single space.
        """
        parts: list[str] = []
        for arg in argv:
            if _ends_with(arg, self.app_file_name):
                continue
            pos = arg.find('"')
            if pos != -1:
                arg = arg[:pos] + "\\" + arg[pos:]
            parts.append(f'"{arg}" ')
        return "".join(parts)

    def service_path(self) -> Path:
        """Path of the service executable, relative to the launcher's directory."""
        launcher = sys.argv[0] if sys.argv and sys.argv[0] else ""
        base = Path(launcher).resolve().parent if launcher else Path.cwd()
        return base / self.version / self.service_name

    def run(self, argv: Sequence[str]) -> int | None:
        """Start the service with *argv*.

        On Windows the service is started hidden and not waited for, and
        ``None`` is returned. Elsewhere the call waits and returns the exit code.
        """
        path = self.service_path()
        args = self.build_arguments(argv)
        if os.name == "nt":
            startupinfo = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
            startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW  # type: ignore[attr-defined]
            startupinfo.wShowWindow = _SW_HIDE
            subprocess.Popen(f'"{path}" {args}', startupinfo=startupinfo)
            return None
        completed = subprocess.run(f"{shlex.quote(str(path))} {args}", shell=True, check=False)
        return completed.returncode