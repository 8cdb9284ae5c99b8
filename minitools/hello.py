"""Print a friendly greeting."""

import sys


def greet(name):
    """Return the greeting for ``name``."""
    return f"Hello, {name}!"


def main(argv=None):
    """Greet the first argument, or the world when none is given."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(greet(args[0] if args else "world"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())