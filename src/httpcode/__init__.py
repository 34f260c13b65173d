import logging
import sys
from collections.abc import Sequence

from .HttpCode import HttpCode, UnknownStatusName

__all__ = ["HttpCode", "UnknownStatusName", "run", "main"]

NO_ARGS_MESSAGE = "No args provided!"

def run(args: Sequence[str], logger: logging.Logger | None = None) -> int:
  """
  Runs the command line program once and returns its exit status.

  Only the first argument is looked up; the rest are ignored.

  Args:
    args (Sequence[str]): Command line arguments, without the program name.
    logger (logging.Logger | None, optional): Receives diagnostics. Defaults to None.

  Returns:
    int: 0 on success or when no name was given, 1 for an unknown name.
  """
  if not args:
    print(NO_ARGS_MESSAGE)
    return 0

  if logger and len(args) > 1: logger.debug(f"Ignoring extra arguments: {list(args[1:])}")
  candidate = args[0].upper()
  if logger: logger.debug(f"Resolving {candidate!r}")
  try:
    code = HttpCode.resolve(candidate)
  except UnknownStatusName as e:
    if logger: logger.debug(f"Lookup failed for {e.name!r}")
    print(f"Error: {e}", file=sys.stderr)
    return 1

  print(f"Your HTTP code is: {code}")
  return 0

def main() -> None:
  logger = logging.getLogger("httpcode")
  logger.setLevel(logging.INFO)
  if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", "%H:%M:%S"))
    logger.addHandler(handler)
  sys.exit(run(sys.argv[1:], logger=logger))
