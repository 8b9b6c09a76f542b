import typer, subprocess
from pathlib import Path
from rich.markup import escape
from . import menu as ui
from .config import ConfigError, load_config
from .paths import base_dir, normalise_target
from .runner import run_modes
from .utils import console, file_exists, has_tool, say

app = typer.Typer(help="BUGx – interactive vulnerability-scan orchestrator.")

TOOLS = ["subfinder", "httpx", "gau", "gf", "nuclei", "dalfox"]

def _version_of(bin_name: str) -> str:
    try:
        res = subprocess.run([bin_name, "-version"], capture_output=True, text=True, timeout=5)
        if res.returncode != 0:
            res = subprocess.run([bin_name, "--version"], capture_output=True, text=True, timeout=5)
        out = res.stdout or res.stderr or ""
        return out.splitlines()[0].strip() if out.strip() else ""
    except (OSError, subprocess.TimeoutExpired):
        return ""

def _load(config: Path) -> dict:
    try:
        return load_config(config)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

def _menu_round(cfg: dict) -> bool:
    """One pass through the menu. False when the operator chose exit."""
    ui.clear_screen()
    ui.print_main_menu()
    selection = ui.read_modes()
    if selection.exit:
        return False
    if not selection.modes:
        say("[INFO] Tidak ada mode valid yang dipilih. Tekan ENTER untuk kembali ke menu...", style="yellow")
        ui.print_summary("", [], [])
        return True

    ui.print_setup_target()
    target = normalise_target(ui.read_target())
    if not target:
        say("[WARN] Target tidak boleh kosong. Tekan ENTER untuk kembali ke menu...", style="yellow")
        ui.print_summary("", [], [])
        return True
    speed = ui.read_speed(cfg["speed"])

    ui.print_run_header(target, speed, selection.modes)
    try:
        tools = run_modes(selection.modes, target, speed, cfg)
    except OSError as e:
        say(f"[ERROR] {e}", style="bold red")
        tools = []
    ui.print_summary(target, selection.modes, tools)
    return True

@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Without a sub-command, start the interactive menu."""
    if ctx.invoked_subcommand is None:
        menu(config=Path("config.yaml"))

@app.command()
def menu(config: Path = typer.Option(Path("config.yaml"), help="YAML config file")):
    """Interactive menu: pick modes, target and speed, then scan."""
    cfg = _load(config)
    try:
        while _menu_round(cfg):
            pass
    except EOFError:
        console.print("\n[yellow]Input ditutup (EOF), keluar.[/yellow]")

@app.command()
def run(
    target: str = typer.Argument(..., help="Target URL or domain"),
    modes: str = typer.Option("9", help="Comma-separated modes 1-8, 9 = all"),
    speed: int = typer.Option(None, help="Threads/concurrency passed to tools"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
):
    """Run the selected modes once, without the menu."""
    cfg = _load(config)
    selection = ui.parse_modes(modes)
    if selection.exit or not selection.modes:
        raise typer.BadParameter(f"no runnable mode in {modes!r}", param_hint="--modes")
    url = normalise_target(target)
    if not url:
        raise typer.BadParameter("target must not be empty", param_hint="TARGET")
    speed = ui.parse_speed(str(speed) if speed is not None else "", cfg["speed"])

    ui.print_run_header(url, speed, selection.modes)
    tools = run_modes(selection.modes, url, speed, cfg)
    ui.print_summary(url, selection.modes, tools, wait=False)

@app.command()
def healthcheck(config: Path = typer.Option(Path("config.yaml"), help="YAML config file")):
    """Show which external tools are installed. All of them are optional."""
    cfg = _load(config)
    console.print("[bold cyan]Tools[/bold cyan]")
    for b in TOOLS:
        if has_tool(b):
            console.print(f"[green]✓[/green] {b}: [dim]{escape(_version_of(b))}[/dim]")
        else:
            console.print(f"[red]✗[/red] {b}: not found on PATH (steps using it will be skipped)")
    payload = base_dir(cfg.get("base_dir")) / "wordlist" / "xss.txt"
    mark = "[green]✓[/green]" if file_exists(payload) else "[yellow]![/yellow]"
    console.print(f"{mark} dalfox payload: {escape(str(payload))}")

if __name__ == "__main__":
    app()
