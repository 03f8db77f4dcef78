import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()

STEP_PREFIXES = {
  "Plan": "* ",
  "Update Cache": "~ ",
  "Core Build Tools": "# ",
  "Moos Libraries": "@ ",
  "Gui Components": "^ ",
}

DISTRO_COLORS = {
  "ubuntu": {"text": "bold dark_orange", "border": "dark_orange"},
  "debian": {"text": "bold red", "border": "red"},
  "centos": {"text": "bold magenta", "border": "magenta"},
  "fedora": {"text": "bold blue", "border": "blue"},
  "arch": {"text": "bold cyan", "border": "cyan"},
  "opensuse": {"text": "bold green", "border": "green"},
}

LEVEL_STYLES = {
  "INFO": "blue",
  "SUCCESS": "green",
  "WARNING": "yellow",
  "ERROR": "red",
  "VERBOSE": "blue",
}


class TUI:
  def __init__(self, verbose: bool = False, distro_id: str = "linux", out: Console | None = None):
    self.console: Console = out or console
    self.enabled: bool = sys.stdout.isatty()
    self.verbose_mode: bool = verbose
    self.status_text: str = ""
    self.set_distro(distro_id)

  def set_distro(self, distro_id: str) -> None:
    self.distro_id: str = distro_id
    self.colors = DISTRO_COLORS.get(distro_id, {"text": "bold yellow", "border": "yellow"})

  def _create_status_panel(self, text: str) -> Panel:
    status = Text(text, style=self.colors["text"])
    return Panel(
      status,
      border_style=self.colors["border"],
      padding=(0, 1),
      expand=False,
      box=box.SQUARE,
      title="moos-ivp-deps",
      title_align="left",
    )

  def update_status(self, message: str, step_name: str = "") -> None:
    prefix = STEP_PREFIXES.get(step_name, "")
    self.status_text = f"{prefix}{message}"

    if not self.enabled:
      self.console.print(Text(self.status_text, style=self.colors["text"]))
      return

    self.console.print(self._create_status_panel(self.status_text))

  def _line(self, level: str, message: str) -> None:
    self.console.print(Text.assemble((f"[{level}]", LEVEL_STYLES[level]), " ", message))

  def info(self, message: str) -> None:
    self._line("INFO", message)

  def success(self, message: str) -> None:
    self._line("SUCCESS", message)

  def warning(self, message: str) -> None:
    self._line("WARNING", message)

  def error(self, message: str) -> None:
    self._line("ERROR", message)

  def verbose(self, message: str) -> None:
    if self.verbose_mode:
      self._line("VERBOSE", message)

  def print(self, message: str = "") -> None:
    """Print rich markup as-is."""
    self.console.print(message)
