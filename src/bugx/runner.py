"""Mode pipeline executor.

Each mode is a chain of Step records (see modes.py). Steps are gated on
tool presence and staged inputs; failures are logged and the chain goes on.
"""
from __future__ import annotations
from typing import Iterable
from .modes import MODES, ModeSpec, chain_for, Chain
from .paths import extract_host
from .pipeline import Context, ScanList, Step, open_context
from .utils import CommandError, choose_first_existing, file_exists, has_tool, run_command, run_shell, say

def _info(ctx: Context, msg: str) -> None:
    say(f"[{ctx.label}] [INFO] {msg}", style="cyan")

def _missing(ctx: Context, tool: str) -> None:
    say(f"[{ctx.label}] [WARN] Tool '{tool}' tidak ditemukan. Step terkait dilewati.", style="yellow")

def _fail(ctx: Context, name: str, err: Exception) -> None:
    say(f"[{ctx.label}] [FAIL] {name}: {err}", style="red")

def run_step(ctx: Context, step: Step) -> bool:
    """Run one step if its tool and inputs are there. True if the tool exited 0."""
    if not ctx.enabled(step.tool):
        _info(ctx, f"Tool '{step.tool}' dinonaktifkan lewat konfigurasi.")
        return False
    if not has_tool(step.tool):
        _missing(ctx, step.tool)
        return False
    for name in step.inputs:
        if not file_exists(ctx.stage(name)):
            _info(ctx, f"{name} tidak ada, lewati {step.name}")
            return False
    try:
        if step.shell is not None:
            line = step.shell(ctx)
            say(f"[{ctx.label}] SHELL -> {line}")
            run_shell(line, ctx.shell)
        else:
            args = step.argv(ctx) if step.argv else []
            say(f"[{ctx.label}] RUN -> {step.name} {' '.join(args)}")
            run_command(step.tool, *args)
    except CommandError as e:
        _fail(ctx, step.name, e)
        return False
    ctx.used.add(step.tool)
    return True

def run_chain(ctx: Context, chain: Chain) -> None:
    for item in chain:
        if isinstance(item, ScanList):
            ctx.scan_list = choose_first_existing(*(ctx.stage(n) for n in item.candidates))
            if not ctx.scan_list:
                _info(ctx, item.empty_message)
                return
            continue
        run_step(ctx, item)

def run_mode(spec: ModeSpec, target: str, speed: int, cfg: dict | None = None) -> list[str]:
    """Run one mode's chain; returns the tools that ran successfully."""
    say(f"========== [MODE {spec.title}] ==========", style="bold magenta")
    try:
        host = extract_host(target)
        if not host:
            say(f"[{spec.label}] Target tidak valid: {target}", style="red")
            return []
        with open_context(spec, host, speed, cfg) as ctx:
            run_chain(ctx, chain_for(spec))
        return ctx.tools_used()
    finally:
        say(f"========== [/MODE {spec.title}] =========", style="bold magenta")

def run_modes(modes: Iterable[int], target: str, speed: int, cfg: dict | None = None) -> list[str]:
    """Run modes in the given (already sorted) order; returns the union of used tools."""
    used: set[str] = set()
    for m in modes:
        spec = MODES.get(m)
        if spec is None:
            say(f"[INFO] Mode {m} belum diimplementasikan.", style="yellow")
            continue
        used.update(run_mode(spec, target, speed, cfg))
    return sorted(t for t in used if t)
