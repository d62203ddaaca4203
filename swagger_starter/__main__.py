"""
Module entrypoint: `python -m swagger_starter [COMMAND ...]`

With no arguments, starts the provider API server. Any arguments are
handed to the CLI, so `python -m swagger_starter prepare PATH server`
works the same as `python -m swagger_starter.cli prepare PATH server`.
"""

import sys


def main() -> None:
    from .cli import main as cli_main
    if len(sys.argv) < 2:
        sys.argv.append("serve")
    cli_main()


if __name__ == "__main__":
    main()
