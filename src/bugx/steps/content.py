from __future__ import annotations
from ..pipeline import Context, Step, HOSTS, gau_file, gf_file
from ..utils import escape_shell

def gau(tag: str) -> Step:
    """cat hosts.txt | gau --threads N --verbose > gau_<tag>.txt"""
    out = gau_file(tag)

    def line(ctx: Context) -> str:
        return "cat {} | gau --threads {} --verbose > {}".format(
            escape_shell(str(ctx.stage(HOSTS))), max(ctx.speed, 1), escape_shell(str(ctx.stage(out))))

    return Step(f"gau {tag}", "gau", shell=line, inputs=(HOSTS,))

def gf(tag: str) -> Step:
    """cat gau_<tag>.txt | gf <tag> > gf_<tag>.txt"""
    src, out = gau_file(tag), gf_file(tag)

    def line(ctx: Context) -> str:
        return "cat {} | gf {} > {}".format(
            escape_shell(str(ctx.stage(src))), tag, escape_shell(str(ctx.stage(out))))

    return Step(f"gf {tag}", "gf", shell=line, inputs=(src,))
