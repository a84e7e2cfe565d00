from configparser import ConfigParser
from functools import lru_cache
from os import environ, path

import click

from .constants import (
    INSTANCE_LABEL_KEY,
    TRACKING_ID_ANNOTATION_KEY,
    TRACKING_METHOD_LABEL,
)
from .log import logger
from .tracking import validate_tracking_method


class KubemarkerSettings(object):
    LABEL_KEY = INSTANCE_LABEL_KEY  # key used when tracking by label
    ANNOTATION_KEY = TRACKING_ID_ANNOTATION_KEY  # key used when tracking by annotation

    TRACKING_METHOD = environ.get('KUBEMARKER_TRACKING_METHOD', TRACKING_METHOD_LABEL)
    ''' Where the ownership marker is written: one of `label`, `annotation` or
    `annotation+label`. '''

    def __init__(self, filename=None):
        self.filename = filename

    def get_marker_key(self, tracking_method=None):
        tracking_method = tracking_method or self.TRACKING_METHOD
        if tracking_method == TRACKING_METHOD_LABEL:
            return self.LABEL_KEY
        return self.ANNOTATION_KEY


def get_settings_directory():
    return click.get_app_dir('kubemarker', force_posix=True)


@lru_cache(maxsize=1)
def get_settings(settings_directory=None):
    settings_directory = settings_directory or get_settings_directory()
    settings_file = path.join(settings_directory, 'kubemarker.conf')

    settings = KubemarkerSettings(filename=settings_file)

    if path.exists(settings_file):
        logger.info('Loading settings file: {0}'.format(settings_file))
        parser = ConfigParser()
        parser.read(settings_file)

        if parser.has_section('kubemarker'):
            for option in parser.options('kubemarker'):
                setattr(
                    settings,
                    option.upper().replace('-', '_'),
                    parser.get('kubemarker', option),
                )

    else:
        logger.info('No settings file: {0}'.format(settings_file))

    validate_tracking_method(settings.TRACKING_METHOD)
    return settings
