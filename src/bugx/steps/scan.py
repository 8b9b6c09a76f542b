from __future__ import annotations
from ..pipeline import Context, Step

def nuclei(tags: str = "", severity: str | None = None) -> Step:
    """nuclei over the chosen scan list; findings land in <results>/nuclei.json."""
    def argv(ctx: Context) -> list[str]:
        args = ["-l", ctx.scan_list]
        if tags:
            args += ["-tags", tags]
        if severity:
            args += ["--severity", severity]
        args += ["-o", str(ctx.results / "nuclei.json")]
        return args + ctx.speed_flag("-c")
    return Step("nuclei", "nuclei", argv=argv)

def dalfox() -> Step:
    # payload file is operator-supplied; we never create it
    def argv(ctx: Context) -> list[str]:
        return [
            "file", ctx.scan_list,
            "--skip-mining-all",
            "--custom-payload", str(ctx.base / "wordlist" / "xss.txt"),
            "-w", str(max(ctx.speed, 1)),
            "-o", str(ctx.results / "dalfox.json"),
        ]
    return Step("dalfox", "dalfox", argv=argv)
