'''
Converts between the external representations of manifests (YAML streams,
kubernetes client model objects) and the plain dict documents the marker
functions operate on.
'''

import yaml

from kubernetes.client import ApiClient

from kubemarker.exceptions import KubeManifestError
from kubemarker.log import logger


def load_manifests_from_string(text):
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as e:
        raise KubeManifestError('Invalid YAML: {0}'.format(e))

    manifests = []
    for i, document in enumerate(documents):
        if document is None:  # empty document, eg a trailing ---
            continue

        if not isinstance(document, dict):
            raise KubeManifestError(
                'Document {0} is not a Kubernetes object: {1!r}'.format(i, document),
            )

        manifests.append(document)

    logger.debug('Loaded {0} manifest(s)'.format(len(manifests)))
    return manifests


def load_manifests(filename):
    with open(filename, 'r') as f:
        return load_manifests_from_string(f.read())


def dump_manifests(documents):
    return yaml.safe_dump_all(
        documents,
        default_flow_style=False,
        sort_keys=False,
    )


def document_from_object(obj):
    '''
    Returns a dict document for either an existing dict or a kubernetes client
    model object (eg `V1Deployment`).
    '''

    if isinstance(obj, dict):
        return obj

    document = ApiClient().sanitize_for_serialization(obj)
    if not isinstance(document, dict):
        raise KubeManifestError('Cannot convert {0!r} to a Kubernetes object'.format(obj))

    return document
