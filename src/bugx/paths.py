from __future__ import annotations
from pathlib import Path
import os, pwd, tempfile, time

_UNSAFE = '/\\:*?"<>|'

def normalise_target(raw: str) -> str:
    """Trim input and make sure it carries an http(s) scheme (https by default)."""
    raw = (raw or "").strip()
    if not raw:
        return ""
    if raw.startswith("http://") or raw.startswith("https://"):
        return raw
    return "https://" + raw

def extract_host(url_or_host: str) -> str:
    """Bare host of a URL or host string: no scheme, path or port."""
    s = (url_or_host or "").strip()
    if "://" in s:
        s = s.split("://", 1)[1]
    s = s.split("/", 1)[0]
    s = s.split(":", 1)[0]
    return s.strip()

def sanitise_for_path(s: str) -> str:
    s = (s or "").strip()
    if not s:
        return "target"
    for ch in _UNSAFE:
        s = s.replace(ch, "_")
    return s

def home_dir() -> Path:
    """Home of the invoking user: passwd entry, then $HOME, then the cwd."""
    try:
        home = pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        home = ""
    if not home:
        home = os.environ.get("HOME", "")
    return Path(home or ".")

def base_dir(override: str | os.PathLike | None = None) -> Path:
    """BUGx data directory (~/BUGx unless overridden by config)."""
    if override:
        return Path(os.path.expanduser(str(override)))
    return home_dir() / "BUGx"

def temp_dir(host: str, mode: str) -> Path:
    """Per-run scratch path: <tmp>/BUGx-<mode>-<host>-<ns>. Not created here."""
    ts = time.time_ns()
    return Path(tempfile.gettempdir()) / f"BUGx-{mode or 'run'}-{sanitise_for_path(host)}-{ts}"

def results_dir(mode: str, host: str, base: Path | None = None) -> Path:
    """Persistent results path: <base>/results/<mode>/<host>."""
    root = base if base is not None else base_dir()
    return root / "results" / (mode or "misc").lower() / sanitise_for_path(host)
