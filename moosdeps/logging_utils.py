import logging
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "moosdeps"
FALLBACK_LOG_NAME = "moos-ivp-deps-install.log"
LOG_HEADER = "=== MOOS-IvP Dependencies Installation Log ==="


def _start_log_file(path: Path) -> None:
  path.parent.mkdir(parents=True, exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    print(LOG_HEADER, file=f)
    print(f"Started: {datetime.now():%a %b %d %H:%M:%S %Y}", file=f)


def configure_logging(log_path: str, verbose: bool = False) -> str:
  """
  Start a fresh log file and attach it to the package logger.

  The file is truncated and given a header, then every record is appended
  as a timestamped line. If log_path cannot be written, a file in the
  current working directory is used instead.

  Returns the path actually being written.
  """
  logger = logging.getLogger(LOGGER_NAME)
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)
  logger.propagate = False

  # Re-configuring replaces the previous file
  for handler in list(logger.handlers):
    logger.removeHandler(handler)
    handler.close()

  chosen = Path(log_path)
  fell_back = False
  try:
    _start_log_file(chosen)

  except OSError:
    fell_back = True
    chosen = Path.cwd() / FALLBACK_LOG_NAME
    _start_log_file(chosen)

  file_handler = logging.FileHandler(chosen, mode="a", encoding="utf-8")
  file_handler.setFormatter(
    logging.Formatter(fmt="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
  )
  logger.addHandler(file_handler)

  if fell_back:
    logger.warning("Log file %s not writable, using %s", log_path, chosen)

  return str(chosen)
