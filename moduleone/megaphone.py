"""Echo command-line words back in upper case."""

from __future__ import annotations

import sys
from collections.abc import Sequence

FEEDBACK_NOISE = "* LOUD AND UNBEARABLE FEEDBACK NOISE *"


def shout(words: Sequence[str]) -> str:
    """Return the words upper-cased and joined by single spaces.

    With no words at all, the feedback noise is returned instead.
    """
    if not words:
        return FEEDBACK_NOISE
    return " ".join(word.upper() for word in words)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shouted form of the arguments."""
    if argv is None:
        argv = sys.argv[1:]
    print(shout(list(argv)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())