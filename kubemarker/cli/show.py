import click

from tabulate import tabulate

from kubemarker.kubernetes.resource import (
    get_group_version_kind,
    get_object_name,
    get_object_namespace,
)
from kubemarker.marker import is_valid_resource_name
from kubemarker.tracking import get_app_instance

from . import cli_bootstrap
from .util import manifest_file_argument, read_manifests, tracking_method_option


@cli_bootstrap.command(help_priority=3)
@manifest_file_argument
@click.option('--key', help='Marker key (defaults to the key for the tracking method).')
@tracking_method_option
@click.pass_obj
def show(settings, manifest_file, key, tracking_method):
    '''
    Show the marker value of every object in a manifest file.
    '''

    tracking_method = tracking_method or settings.TRACKING_METHOD
    key = key or settings.get_marker_key(tracking_method)

    headers = ['Kind', 'Name', 'Namespace', key]
    headers = [click.style(header, bold=True) for header in headers]

    rows = []
    for document in read_manifests(manifest_file):
        value = get_app_instance(document, key, tracking_method)
        rows.append([
            get_group_version_kind(document).kind,
            get_object_name(document),
            get_object_namespace(document),
            value or click.style('NOT MARKED', 'yellow'),
        ])

    click.echo(tabulate(rows, headers=headers, tablefmt='simple'))


@cli_bootstrap.command('check-name', help_priority=4)
@click.argument('names', nargs=-1, required=True)
@click.pass_context
def check_name(ctx, names):
    '''
    Check names are valid Kubernetes resource names.
    '''

    all_valid = True
    for name in names:
        if is_valid_resource_name(name):
            click.echo('{0}: {1}'.format(name, click.style('valid', 'green')))
        else:
            all_valid = False
            click.echo('{0}: {1}'.format(name, click.style('invalid', 'red')))

    if not all_valid:
        ctx.exit(1)
