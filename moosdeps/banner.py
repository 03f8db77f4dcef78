from rich.console import Console

console = Console()

# ============================================================================
# MOOS-IvP text art
# ============================================================================
_moos_text: str = """[bold white]
█▀▄▀█ █▀█ █▀█ █▀   █ █ █ █▀█
█ ▀ █ █▄█ █▄█ ▄█ ▀ █ ▀▄▀ █▀▀[/]"""


def print_banner(version: str, out: Console | None = None) -> None:
  (out or console).print(f"{_moos_text}\n[blue]System dependencies installer v{version}[/]")
