from __future__ import annotations

import logging
import sys

try:
    import readline  # line editing and history for input()
except ImportError:
    readline = None

from lilsp import __version__, config
from lilsp.errors import LilspSyntaxError
from lilsp.interpreter import Interpreter, render

logger = logging.getLogger(__name__)


def _load_prelude() -> str | None:
    try:
        return config.read_prelude()
    except OSError as exc:
        logger.warning("Prelude not loaded: %s", exc)
        return None


def main() -> int:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    interp = Interpreter(prelude=_load_prelude())
    prompt = config.get_prompt()

    print(f"Lilsp Version {__version__}")
    print("Press Ctrl+C to exit\n")

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            result = interp.eval(line)
        except LilspSyntaxError as exc:
            print(exc)
            continue
        print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
