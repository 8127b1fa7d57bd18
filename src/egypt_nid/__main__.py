"""Entry point for running egypt_nid as a module.

This allows the package to be executed as:
    python -m egypt_nid
"""

from egypt_nid.cli.main import cli

if __name__ == "__main__":
    cli()
