from collections import namedtuple


GroupVersionKind = namedtuple('GroupVersionKind', ('group', 'version', 'kind'))


def _get_string(obj, *fields):
    value = obj
    for field in fields:
        if not isinstance(value, dict):
            return ''
        value = value.get(field)

    if isinstance(value, str):
        return value
    return ''


def parse_api_version(api_version):
    '''
    Splits an apiVersion into (group, version); core resources ("v1") have no group.
    '''

    if not api_version:
        return '', ''

    if '/' not in api_version:
        return '', api_version

    group, version = api_version.split('/', 1)
    return group, version


def get_api_version(obj):
    return _get_string(obj, 'apiVersion')


def get_group_version_kind(obj):
    group, version = parse_api_version(get_api_version(obj))
    return GroupVersionKind(group, version, _get_string(obj, 'kind'))


def get_object_name(obj):
    return _get_string(obj, 'metadata', 'name')


def get_object_namespace(obj):
    return _get_string(obj, 'metadata', 'namespace')


def format_group_version_kind(gvk):
    api_version = gvk.version
    if gvk.group:
        api_version = '{0}/{1}'.format(gvk.group, gvk.version)
    return '{0}, Kind={1}'.format(api_version, gvk.kind)


def describe_object(obj):
    return '{0} {1}/{2}'.format(
        format_group_version_kind(get_group_version_kind(obj)),
        get_object_namespace(obj),
        get_object_name(obj),
    )
