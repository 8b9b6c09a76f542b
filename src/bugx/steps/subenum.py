from __future__ import annotations
from ..pipeline import Context, Step, SUBS

def _subfinder_args(ctx: Context) -> list[str]:
    return ["-d", ctx.host, "-o", str(ctx.stage(SUBS))] + ctx.speed_flag("-t")

def subfinder() -> Step:
    """subfinder -d <host> -o subs.txt [-t speed]"""
    return Step("subfinder", "subfinder", argv=_subfinder_args)
