"""Allow running devnote with `python -m devnote`."""

from devnote.interfaces.cli.app import run_cli

if __name__ == "__main__":
    run_cli()
