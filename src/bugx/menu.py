"""Interactive menu screens and prompt parsing."""
from __future__ import annotations
from dataclasses import dataclass, field
from rich.align import Align
from rich.markup import escape
from rich.panel import Panel
from .config import DEFAULT_SPEED
from .modes import MODES, Mode, normalize_modes
from .utils import console

@dataclass
class Selection:
    modes: list[int] = field(default_factory=list)
    exit: bool = False

def _atoi(s: str) -> int:
    """Plain ASCII decimal with optional sign; no underscores or other digit scripts."""
    if not (s.isascii() and s.lstrip("+-").isdigit() and len(s) - len(s.lstrip("+-")) <= 1):
        raise ValueError(f"not a decimal integer: {s!r}")
    return int(s)

def parse_modes(line: str) -> Selection:
    """Parse "3,1,2" style input. A 0 anywhere means exit."""
    values: list[int] = []
    for part in (line or "").split(","):
        part = part.strip()
        if not part:
            continue
        try:
            n = _atoi(part)
        except ValueError:
            continue
        if n == Mode.EXIT:
            return Selection(exit=True)
        if 0 < n <= Mode.RUN_ALL:
            values.append(n)
    return Selection(modes=normalize_modes(values))

def parse_speed(raw: str, default: int = DEFAULT_SPEED) -> int:
    try:
        n = _atoi((raw or "").strip())
    except ValueError:
        return default
    return n if n > 0 else default

def clear_screen() -> None:
    console.clear()

def print_header() -> None:
    console.print(Panel(Align.center("[bold]BUGx MENU[/bold]"), border_style="cyan"))

def print_main_menu() -> None:
    print_header()
    console.print("Pilih mode scan (bisa lebih dari satu, pisahkan dengan koma):\n")
    for spec in MODES.values():
        console.print(f" {int(spec.mode)}. {spec.menu}")
    console.print(f" {int(Mode.RUN_ALL)}. RUN ALL")
    console.print(f" {int(Mode.EXIT)}. Keluar\n")

def read_modes() -> Selection:
    return parse_modes(console.input("Input mode (contoh: 1,2,3): "))

def print_setup_target() -> None:
    clear_screen()
    print_header()
    console.print("[bold]Setup Target[/bold]")
    console.rule(style="dim")
    console.print("Masukan target dan kecepatan scan.")
    console.print("Contoh target: https://example.com")
    console.print("Kecepatan mempengaruhi flags tools eksternal (threads/conc).")
    console.rule(style="dim")

def read_target() -> str:
    return console.input("Masukan target url (http(s)://example.com): ").strip()

def read_speed(default: int = DEFAULT_SPEED) -> int:
    return parse_speed(console.input(f"Masukan kecepatan (default {default}): "), default)

def _fmt_modes(modes) -> str:
    return ", ".join(str(m) for m in modes or [])

def print_run_header(target: str, speed: int, modes: list[int]) -> None:
    clear_screen()
    print_header()
    console.print("[bold green]Proses scanning dimulai[/bold green]")
    console.rule(style="dim")
    console.print(f"Target  : {escape(target)}")
    console.print(f"Speed   : {speed}")
    console.print(f"Mode(s) : {_fmt_modes(modes)}")
    console.rule(style="dim")
    console.print("Output di bawah adalah output asli dari tools eksternal.\n")

def print_summary(target: str, modes: list[int], tools_used: list[str], wait: bool = True) -> None:
    """Summary box; waits for ENTER when `wait` is set."""
    tools = ", ".join(tools_used) if tools_used else "(tidak terdeteksi / tidak dicatat)"
    body = "\n".join([
        f"Target      : {escape(target)}",
        f"Mode(s)     : {_fmt_modes(modes)}",
        f"Tools Used  : {escape(tools)}",
    ])
    console.print()
    console.print(Panel(body, title="RINGKASAN", border_style="green"))
    if wait:
        console.input("Tekan ENTER untuk kembali ke menu utama...")
