'''
Accessors for untyped resource documents: plain dicts/lists/scalars as loaded
from YAML or JSON.

Readers return `(value, found)` pairs so callers can tell an absent field from
one that holds `None`. Whenever a field exists but has the wrong shape a
`KubeShapeError` is raised instead, nothing is ever coerced.
'''

from kubemarker.exceptions import KubeShapeError


def _jsonpath(fields):
    return '.{0}'.format('.'.join(fields))


def _type_name(value):
    return type(value).__name__


def get_nested_field(obj, *fields):
    '''
    Returns `(value, found)` for the field at the given path, without copying.
    '''

    value = obj
    for i, field in enumerate(fields):
        # A null parent (eg an empty `metadata:` in YAML) means the field is absent
        if value is None:
            return None, False

        if not isinstance(value, dict):
            raise KubeShapeError(
                '{0} accessor error: {1!r} is of the type {2}, expected dict'.format(
                    _jsonpath(fields[:i + 1]), value, _type_name(value),
                ),
            )

        if field not in value:
            return None, False

        value = value[field]

    return value, True


def get_nested_map(obj, *fields):
    value, found = get_nested_field(obj, *fields)
    if not found or value is None:
        return None, found

    if not isinstance(value, dict):
        raise KubeShapeError('{0} accessor error: {1!r} is of the type {2}, expected dict'.format(
            _jsonpath(fields), value, _type_name(value),
        ))

    return dict(value), True


def get_nested_string_map(obj, *fields):
    value, found = get_nested_map(obj, *fields)
    if value is None:
        return None, found

    for key, item in value.items():
        if not isinstance(item, str):
            raise KubeShapeError(
                '{0} accessor error: contains non-string value in the map under key {1!r}: '
                '{2!r} is of the type {3}, expected str'.format(
                    _jsonpath(fields), key, item, _type_name(item),
                ),
            )

    return value, True


def get_nested_nullable_string_map(obj, *fields):
    '''
    Returns a copy of the string -> string map at the given path, or `None`
    when the field is absent or null.

    Raises:
        KubeShapeError: the field is not a map, or the map holds a non-string value
    '''

    value, _ = get_nested_string_map(obj, *fields)
    return value


def set_nested_field(obj, value, *fields):
    target = obj
    for i, field in enumerate(fields[:-1]):
        existing = target.get(field)

        if existing is None:
            existing = target[field] = {}
        elif not isinstance(existing, dict):
            raise KubeShapeError('value cannot be set because {0} is not a map'.format(
                _jsonpath(fields[:i + 1]),
            ))

        target = existing

    target[fields[-1]] = value


def set_nested_map(obj, value, *fields):
    set_nested_field(obj, dict(value), *fields)


def remove_nested_field(obj, *fields):
    target = obj
    for field in fields[:-1]:
        target = target.get(field)
        if not isinstance(target, dict):
            return

    target.pop(fields[-1], None)
