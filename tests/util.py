from copy import deepcopy
from os import path


MANIFESTS_DIR = path.join(path.dirname(__file__), 'manifests')


def get_manifest_filename(name):
    return path.join(MANIFESTS_DIR, name)


def make_workload(kind='Deployment', api_version='apps/v1', selector=None, template_labels=None):
    spec = {
        'replicas': 1,
        'template': {
            'metadata': {
                'labels': deepcopy(template_labels) if template_labels is not None else {
                    'app': 'web',
                },
            },
            'spec': {
                'containers': [{'name': 'web', 'image': 'nginx'}],
            },
        },
    }

    if selector is not None:
        spec['selector'] = selector

    return {
        'apiVersion': api_version,
        'kind': kind,
        'metadata': {
            'name': 'web',
            'namespace': 'default',
            'labels': {
                'app': 'web',
            },
        },
        'spec': spec,
    }
