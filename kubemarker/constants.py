# Marker key that still gets pushed into pod templates (and guarded out of
# legacy selectors); every other key stays in top-level metadata.
LEGACY_APP_NAME_LABEL_KEY = 'kubemarker/app-name'

INSTANCE_LABEL_KEY = 'app.kubernetes.io/instance'
TRACKING_ID_ANNOTATION_KEY = 'kubemarker/tracking-id'

# Label values are limited to 63 characters
LABEL_VALUE_MAX_LENGTH = 63
RESOURCE_NAME_MAX_LENGTH = 63

TRACKING_METHOD_LABEL = 'label'
TRACKING_METHOD_ANNOTATION = 'annotation'
TRACKING_METHOD_ANNOTATION_AND_LABEL = 'annotation+label'
