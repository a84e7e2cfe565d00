import click

from kubemarker.exceptions import KubeCLIError
from kubemarker.log import logger
from kubemarker.marker import (
    remove_annotation,
    remove_label,
    set_app_instance_annotation,
    set_app_instance_label,
)
from kubemarker.tracking import set_app_instance

from . import cli_bootstrap
from .util import (
    manifest_file_argument,
    output_option,
    read_manifests,
    tracking_method_option,
    write_manifests,
)


def _apply_to_manifests(manifest_file, output, func, *args):
    documents = read_manifests(manifest_file)
    if not documents:
        raise KubeCLIError('No Kubernetes objects found in: {0}'.format(
            getattr(manifest_file, 'name', '-'),
        ))

    for document in documents:
        func(document, *args)

    logger.info('Updated {0} manifest(s)'.format(len(documents)))
    write_manifests(output, documents)


@cli_bootstrap.command(help_priority=0)
@manifest_file_argument
@click.argument('value')
@click.option('--key', help='Marker key (defaults to the key for the tracking method).')
@tracking_method_option
@output_option
@click.pass_obj
def mark(settings, manifest_file, value, key, tracking_method, output):
    '''
    Mark every object in a manifest file as owned by an app.
    '''

    tracking_method = tracking_method or settings.TRACKING_METHOD
    key = key or settings.get_marker_key(tracking_method)
    _apply_to_manifests(manifest_file, output, set_app_instance, key, value, tracking_method)


@cli_bootstrap.command(help_priority=1)
@manifest_file_argument
@click.argument('key')
@click.argument('value')
@output_option
def label(manifest_file, key, value, output):
    '''
    Set a marker label on every object in a manifest file.
    '''

    _apply_to_manifests(manifest_file, output, set_app_instance_label, key, value)


@cli_bootstrap.command(help_priority=1)
@manifest_file_argument
@click.argument('key')
@click.argument('value')
@output_option
def annotate(manifest_file, key, value, output):
    '''
    Set a marker annotation on every object in a manifest file.
    '''

    _apply_to_manifests(manifest_file, output, set_app_instance_annotation, key, value)


@cli_bootstrap.command(help_priority=2)
@manifest_file_argument
@click.argument('key')
@click.option(
    '--annotation', 'from_annotation',
    is_flag=True,
    help='Remove the marker annotation rather than the label.',
)
@output_option
def unmark(manifest_file, key, from_annotation, output):
    '''
    Remove a marker label (or annotation) from every object in a manifest file.
    '''

    remove_function = remove_annotation if from_annotation else remove_label
    _apply_to_manifests(manifest_file, output, remove_function, key)
