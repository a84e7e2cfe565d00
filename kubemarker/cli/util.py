import click

from kubemarker.kubernetes.manifest import dump_manifests, load_manifests_from_string
from kubemarker.tracking import TRACKING_METHODS


manifest_file_argument = click.argument('manifest_file', type=click.File('r'))

output_option = click.option(
    '-o', '--output',
    type=click.File('w'),
    default='-',
    help='Where to write the updated manifests (defaults to stdout).',
)

tracking_method_option = click.option(
    '--tracking-method',
    type=click.Choice(TRACKING_METHODS),
    help='Where the marker lives (defaults to the settings file value).',
)


def read_manifests(manifest_file):
    return load_manifests_from_string(manifest_file.read())


def write_manifests(output, documents):
    output.write(dump_manifests(documents))
