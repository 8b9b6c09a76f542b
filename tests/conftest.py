import os, shutil, tempfile
from pathlib import Path
import pytest

# Echo argv, answer -version, write a deterministic line to the -o target
# or pass stdin through (gau/gf pipelines).
STUB = r'''#!/bin/sh
echo "stub {name} $*"
case "$1" in -version|--version) exit 0;; esac
out=""
while [ $# -gt 0 ]; do
  if [ "$1" = "-o" ]; then out="$2"; fi
  shift
done
if [ -n "$out" ]; then
  printf '%s\n' "https://a.example.com/?q=1" > "$out"
else
  while IFS= read -r line; do printf '%s\n' "$line"; done
  printf '%s\n' "https://a.example.com/?q=1"
fi
'''

FAILING = r'''#!/bin/sh
echo "{name} blew up" >&2
exit 3
'''

ALL_TOOLS = ("subfinder", "httpx", "gau", "gf", "nuclei", "dalfox")

class Toolbox:
    """A private PATH holding stub binaries only."""
    def __init__(self, bindir: Path):
        self.bindir = bindir

    def add(self, name: str, script: str = STUB) -> Path:
        p = self.bindir / name
        p.write_text(script.format(name=name), encoding="utf-8")
        p.chmod(0o755)
        return p

    def fail(self, name: str) -> Path:
        return self.add(name, FAILING)

    def remove(self, name: str) -> None:
        (self.bindir / name).unlink()

@pytest.fixture
def toolbox(tmp_path, monkeypatch):
    cat = shutil.which("cat")
    bindir = tmp_path / "bin"
    bindir.mkdir()
    (bindir / "cat").symlink_to(cat)
    monkeypatch.setenv("PATH", str(bindir))
    box = Toolbox(bindir)
    for t in ALL_TOOLS:
        box.add(t)
    return box

@pytest.fixture
def scratch(tmp_path, monkeypatch):
    """Point tempfile at a private directory so BUGx-* dirs can be counted."""
    d = tmp_path / "tmp"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d

@pytest.fixture
def cfg(tmp_path):
    return {"base_dir": str(tmp_path / "BUGx"), "shell": "/bin/sh", "steps": {}}

@pytest.fixture
def leftovers(scratch):
    """Callable listing BUGx-* scratch dirs still on disk."""
    return lambda: [p for p in scratch.iterdir() if p.name.startswith("BUGx-")]
