from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, Optional
import shutil
from .paths import base_dir, results_dir, temp_dir
from .utils import ensure_dir

if TYPE_CHECKING:
    from .modes import ModeSpec

SUBS = "subs.txt"
HOSTS = "hosts.txt"

def gau_file(tag: str) -> str:
    return f"gau_{tag}.txt"

def gf_file(tag: str) -> str:
    return f"gf_{tag}.txt"

def clean_file(tag: str) -> str:
    return f"clean_{tag}.txt"

@dataclass(frozen=True)
class Step:
    """One external-tool invocation in a chain.

    Exactly one of `argv` / `shell` is set; both are called with the run
    Context so staged paths and speed are resolved at execution time.
    `inputs` are staged file names that must exist before the step runs.
    """
    name: str
    tool: str
    argv: Optional[Callable[["Context"], list[str]]] = None
    shell: Optional[Callable[["Context"], str]] = None
    inputs: tuple[str, ...] = ()

@dataclass(frozen=True)
class ScanList:
    """Pick the first existing staged file as the scan list; stop the chain if none."""
    candidates: tuple[str, ...]
    empty_message: str

class Context:
    """Execution context for one mode against one host."""
    def __init__(self, spec: "ModeSpec", host: str, speed: int, tmp: Path, results: Path, base: Path,
                 shell: str = "/bin/sh", steps: dict | None = None):
        self.spec = spec
        self.host = host
        self.speed = speed
        self.tmp = tmp
        self.results = results
        self.base = base
        self.shell = shell
        self.steps = steps or {}
        self.used: set[str] = set()
        self.scan_list = ""

    @property
    def label(self) -> str:
        return self.spec.label

    def stage(self, name: str) -> Path:
        return self.tmp / name

    def speed_flag(self, flag: str) -> list[str]:
        return [flag, str(self.speed)] if self.speed > 0 else []

    def enabled(self, tool: str) -> bool:
        return bool(self.steps.get(tool, True))

    def tools_used(self) -> list[str]:
        return sorted(t for t in self.used if t)

@contextmanager
def open_context(spec: "ModeSpec", host: str, speed: int, cfg: dict | None = None) -> Iterator[Context]:
    """Create the results dir and a scratch dir; the scratch dir is removed on every exit path."""
    cfg = cfg or {}
    base = base_dir(cfg.get("base_dir"))
    results = ensure_dir(results_dir(spec.tag, host, base))
    tmp = ensure_dir(temp_dir(host, spec.tag))
    try:
        yield Context(spec, host, speed, tmp, results, base,
                      shell=cfg.get("shell") or "/bin/sh", steps=cfg.get("steps"))
    finally:
        shutil.rmtree(tmp, ignore_errors=True)
