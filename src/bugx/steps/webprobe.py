from __future__ import annotations
from ..pipeline import Context, Step

def httpx(src: str, dst: str, name: str | None = None, tech_detect: bool = False) -> Step:
    """Keep entries of `src` answering 200 into `dst`; `tech_detect` adds -td."""
    def argv(ctx: Context) -> list[str]:
        args = ["-l", str(ctx.stage(src)), "-o", str(ctx.stage(dst)), "-mc", "200"]
        if tech_detect:
            args.append("-td")
        return args + ctx.speed_flag("-t")

    if name is None:
        name = f"httpx ({src.rsplit('.', 1)[0]}->{dst.rsplit('.', 1)[0]})"
    return Step(name, "httpx", argv=argv, inputs=(src,))
