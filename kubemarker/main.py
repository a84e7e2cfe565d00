#!/usr/bin/env python

import sys

import click

from .exceptions import KubeMarkerError


def run_cli(func):
    try:
        func()

    except KubeMarkerError as e:
        click.echo('--> {0} {1}'.format(
            click.style('Kubemarker {0} exception:'.format(e.type), 'red', bold=True),
            e,
        ), err=True)
        sys.exit(1)

    except KeyboardInterrupt:
        click.echo()
        click.echo('Exiting on user request...')

    except Exception as e:
        click.echo('--> Unexpected exception: {0}'.format(
            click.style(
                '{0}{1}'.format(e.__class__.__name__, e.args),
                'red',
                bold=True,
            ),
        ), err=True)

        raise
