"""Entry point for `python -m arith`."""

from arith import cli


if __name__ == "__main__":
    cli.main()
