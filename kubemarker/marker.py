'''
Sets, reads and removes the ownership marker on resource documents.

All functions mutate the document they are given in place and the caller must
be the only writer of that document for the duration of the call. Nothing here
does I/O or holds state between calls.
'''

import re

from .constants import LEGACY_APP_NAME_LABEL_KEY, RESOURCE_NAME_MAX_LENGTH
from .exceptions import KubePropagationError, KubeShapeError
from .kubernetes.resource import describe_object, get_api_version, get_group_version_kind
from .kubernetes.unstructured import (
    get_nested_map,
    get_nested_nullable_string_map,
    remove_nested_field,
    set_nested_map,
)
from .log import logger


RESOURCE_NAME_PATTERN = re.compile(r'[a-z0-9]([-a-z0-9]*[a-z0-9])?')

LABELS_PATH = ('metadata', 'labels')
ANNOTATIONS_PATH = ('metadata', 'annotations')
TEMPLATE_LABELS_PATH = ('spec', 'template', 'metadata', 'labels')
SELECTOR_PATH = ('spec', 'selector')
SELECTOR_MATCH_LABELS_PATH = ('spec', 'selector', 'matchLabels')

# What happens to the pod template when the legacy marker is set
PROPAGATE_NONE = 'none'
PROPAGATE_TEMPLATE = 'template'
PROPAGATE_TEMPLATE_AND_SELECTOR = 'template+selector'

PROPAGATION_POLICIES = {
    ('apps', 'Deployment'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('apps', 'ReplicaSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('apps', 'StatefulSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('apps', 'DaemonSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('extensions', 'Deployment'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('extensions', 'ReplicaSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('extensions', 'StatefulSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('extensions', 'DaemonSet'): PROPAGATE_TEMPLATE_AND_SELECTOR,
    ('batch', 'Job'): PROPAGATE_TEMPLATE,
}

# In these versions an omitted spec.selector is defaulted by the API server to
# the pod template labels.
LEGACY_SELECTOR_API_VERSIONS = (
    'apps/v1beta1',
    'extensions/v1beta1',
)


def is_valid_resource_name(name):
    '''
    Returns True if the given string is a valid Kubernetes resource name (DNS label).
    '''

    if not isinstance(name, str):
        return False
    return len(name) <= RESOURCE_NAME_MAX_LENGTH and bool(RESOURCE_NAME_PATTERN.fullmatch(name))


def get_propagation_policy(group, kind):
    return PROPAGATION_POLICIES.get((group, kind), PROPAGATE_NONE)


def _read_string_map(obj, fields, description):
    try:
        return get_nested_nullable_string_map(obj, *fields)
    except KubeShapeError as e:
        raise KubeShapeError('Failed to get {0} from target object {1}: {2}'.format(
            description, describe_object(obj), e,
        )) from e


def _write_string_map(obj, fields, value):
    if value:
        set_nested_map(obj, value, *fields)
    else:
        remove_nested_field(obj, *fields)


def _propagate_to_template(obj, key, value):
    try:
        template_labels, _ = get_nested_map(obj, *TEMPLATE_LABELS_PATH)
        template_labels = template_labels or {}
        template_labels[key] = value
        set_nested_map(obj, template_labels, *TEMPLATE_LABELS_PATH)
    except KubeShapeError as e:
        raise KubePropagationError('Failed to set pod template labels on {0}: {1}'.format(
            describe_object(obj), e,
        )) from e

    logger.debug('Set template label {0}={1} on {2}'.format(key, value, describe_object(obj)))
    return template_labels


def _guard_legacy_selector(obj, key, template_labels):
    '''
    Pins spec.selector.matchLabels to the template labels minus the marker so
    the API server does not default the selector to include it.
    '''

    if get_api_version(obj) not in LEGACY_SELECTOR_API_VERSIONS:
        return

    try:
        selector, _ = get_nested_map(obj, *SELECTOR_PATH)
        if selector:
            return

        match_labels = dict(template_labels)
        match_labels.pop(key, None)
        set_nested_map(obj, match_labels, *SELECTOR_MATCH_LABELS_PATH)
    except KubeShapeError as e:
        raise KubePropagationError('Failed to set selector on {0}: {1}'.format(
            describe_object(obj), e,
        )) from e

    logger.debug('Set explicit selector {0} on {1}'.format(match_labels, describe_object(obj)))


def set_app_instance_label(obj, key, value):
    '''
    Sets the marker label on a resource document.

    The legacy app name key is also pushed into the pod template of workload
    controllers. Failing to do so raises `KubePropagationError` and leaves the
    top level label in place.
    '''

    labels = _read_string_map(obj, LABELS_PATH, 'labels') or {}
    labels[key] = value
    set_nested_map(obj, labels, *LABELS_PATH)
    logger.debug('Set label {0}={1} on {2}'.format(key, value, describe_object(obj)))

    # Only the legacy key is copied to pod templates
    if key != LEGACY_APP_NAME_LABEL_KEY:
        return obj

    gvk = get_group_version_kind(obj)
    policy = get_propagation_policy(gvk.group, gvk.kind)

    if policy == PROPAGATE_NONE:
        return obj

    template_labels = _propagate_to_template(obj, key, value)

    if policy == PROPAGATE_TEMPLATE_AND_SELECTOR:
        _guard_legacy_selector(obj, key, template_labels)

    return obj


def set_app_instance_annotation(obj, key, value):
    annotations = _read_string_map(obj, ANNOTATIONS_PATH, 'annotations') or {}
    annotations[key] = value
    set_nested_map(obj, annotations, *ANNOTATIONS_PATH)
    logger.debug('Set annotation {0}={1} on {2}'.format(key, value, describe_object(obj)))
    return obj


def get_app_instance_label(obj, key):
    '''
    Returns the marker label value, or an empty string if there is none.
    '''

    labels = _read_string_map(obj, LABELS_PATH, 'labels')
    if labels is None:
        return ''
    return labels.get(key, '')


def get_app_instance_annotation(obj, key):
    '''
    Returns the marker annotation value, or an empty string if there is none.
    '''

    annotations = _read_string_map(obj, ANNOTATIONS_PATH, 'annotations')
    if annotations is None:
        return ''
    return annotations.get(key, '')


def _remove_key(obj, fields, description, key):
    values = _read_string_map(obj, fields, description)
    if not values or key not in values:
        return obj

    del values[key]
    _write_string_map(obj, fields, values)
    logger.debug('Removed {0} {1} from {2}'.format(description, key, describe_object(obj)))
    return obj


def remove_label(obj, key):
    return _remove_key(obj, LABELS_PATH, 'labels', key)


def remove_annotation(obj, key):
    return _remove_key(obj, ANNOTATIONS_PATH, 'annotations', key)
