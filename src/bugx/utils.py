from __future__ import annotations
from pathlib import Path
from rich.console import Console
import subprocess, shutil, os

console = Console(highlight=False, soft_wrap=True)

class CommandError(Exception):
    """External tool exited non-zero or could not be launched."""
    def __init__(self, name: str, message: str, returncode: int | None = None):
        super().__init__(message)
        self.name = name
        self.returncode = returncode

def say(line: str, style: str | None = None) -> None:
    """Print one trace line verbatim (no rich markup)."""
    console.print(line, style=style, markup=False, emoji=False)

def ensure_dir(p: Path, mode: int = 0o755) -> Path:
    """Ensure directory exists."""
    p.mkdir(mode=mode, parents=True, exist_ok=True)
    return p

def has_tool(name: str) -> bool:
    """True if an executable called `name` is on PATH."""
    return bool(name) and shutil.which(name) is not None

def file_exists(path) -> bool:
    """True for an existing regular file (directories and broken symlinks don't count)."""
    if not path:
        return False
    return Path(path).is_file()

def choose_first_existing(*paths) -> str:
    for p in paths:
        if file_exists(p):
            return str(p)
    return ""

def escape_shell(s: str) -> str:
    """Single-quote `s` for use inside `sh -c`."""
    if not s:
        return "''"
    return "'" + s.replace("'", "'\\''") + "'"

def _wait(name: str, cmd, **kw) -> None:
    try:
        proc = subprocess.run(cmd, **kw)
    except OSError as e:
        raise CommandError(name, str(e)) from e
    if proc.returncode != 0:
        raise CommandError(name, f"exit status {proc.returncode}", proc.returncode)

def run_command(name: str, *args: str) -> None:
    """Run a binary from PATH with stdout/stderr going straight to the terminal."""
    say(f"[CMD] {name} {' '.join(args)}", style="dim")
    path = shutil.which(name)
    if path is None:
        raise CommandError(name, f'exec: "{name}": executable file not found in $PATH')
    _wait(name, [path, *args])

def run_shell(line: str, shell: str = "/bin/sh") -> None:
    """Run a shell pipeline (`shell -c line`) with live output."""
    say(f"[SHELL] {line}", style="dim")
    _wait(os.path.basename(shell) or "sh", line, shell=True, executable=shell)
