#!/usr/bin/env python

from kubemarker.cli import cli_bootstrap
from kubemarker.main import run_cli
# Import click commands
from kubemarker.cli import mark, show  # noqa: F401, I100


def main():
    run_cli(cli_bootstrap)


if __name__ == '__main__':
    main()
