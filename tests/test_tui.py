from __future__ import annotations

import io
from collections.abc import Callable

from moosdeps.tui import TUI


def test_level_prefixes(make_ui: Callable[..., TUI], output: io.StringIO) -> None:
  ui = make_ui()
  ui.info("plan ready")
  ui.success("done")
  ui.warning("careful")
  ui.error("broken")

  assert output.getvalue().splitlines() == [
    "[INFO] plan ready",
    "[SUCCESS] done",
    "[WARNING] careful",
    "[ERROR] broken",
  ]


def test_verbose_lines_need_verbose_mode(make_ui: Callable[..., TUI], output: io.StringIO) -> None:
  make_ui().verbose("hidden")
  make_ui(verbose=True).verbose("shown")

  assert output.getvalue() == "[VERBOSE] shown\n"


def test_status_without_terminal_is_a_plain_line(make_ui: Callable[..., TUI], output: io.StringIO) -> None:
  ui = make_ui()
  ui.enabled = False
  ui.set_distro("arch")
  ui.update_status("[▓░] Update Cache · Step 1/2", "Update Cache")

  assert output.getvalue() == "~ [▓░] Update Cache · Step 1/2\n"
  assert ui.colors["border"] == "cyan"
