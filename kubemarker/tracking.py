'''
Chooses where the ownership marker lives on a resource: as a label, an
annotation, or both.
'''

from .constants import (
    LABEL_VALUE_MAX_LENGTH,
    TRACKING_METHOD_ANNOTATION,
    TRACKING_METHOD_ANNOTATION_AND_LABEL,
    TRACKING_METHOD_LABEL,
)
from .exceptions import KubeConfigError
from .marker import (
    get_app_instance_annotation,
    get_app_instance_label,
    remove_annotation,
    remove_label,
    set_app_instance_annotation,
    set_app_instance_label,
)


TRACKING_METHODS = (
    TRACKING_METHOD_LABEL,
    TRACKING_METHOD_ANNOTATION,
    TRACKING_METHOD_ANNOTATION_AND_LABEL,
)


def validate_tracking_method(tracking_method):
    if tracking_method not in TRACKING_METHODS:
        raise KubeConfigError('Invalid tracking method: {0} (must be one of: {1})'.format(
            tracking_method, ', '.join(TRACKING_METHODS),
        ))
    return tracking_method


def set_app_instance(obj, key, value, tracking_method=TRACKING_METHOD_LABEL):
    validate_tracking_method(tracking_method)

    if tracking_method == TRACKING_METHOD_LABEL:
        return set_app_instance_label(obj, key, value)

    set_app_instance_annotation(obj, key, value)

    if tracking_method == TRACKING_METHOD_ANNOTATION_AND_LABEL:
        # The label is informational only, the annotation holds the full value
        set_app_instance_label(obj, key, value[:LABEL_VALUE_MAX_LENGTH])

    return obj


def get_app_instance(obj, key, tracking_method=TRACKING_METHOD_LABEL):
    validate_tracking_method(tracking_method)

    if tracking_method == TRACKING_METHOD_LABEL:
        return get_app_instance_label(obj, key)
    return get_app_instance_annotation(obj, key)


def remove_app_instance(obj, key, tracking_method=TRACKING_METHOD_LABEL):
    validate_tracking_method(tracking_method)

    if tracking_method in (TRACKING_METHOD_LABEL, TRACKING_METHOD_ANNOTATION_AND_LABEL):
        remove_label(obj, key)

    if tracking_method in (TRACKING_METHOD_ANNOTATION, TRACKING_METHOD_ANNOTATION_AND_LABEL):
        remove_annotation(obj, key)

    return obj
