"""Allow ``python -m headstamp``."""

from headstamp.cli.main import cli

if __name__ == "__main__":
    cli()
