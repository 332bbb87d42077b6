# SPDX-License-Identifier: MIT

from memote.initialize import initialize
from memote.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
