class KubeMarkerError(Exception):
    type = 'generic'


# Config errors
#

class KubeConfigError(KubeMarkerError):
    type = 'config'


# Manifest/document errors
#

class KubeManifestError(KubeMarkerError):
    type = 'manifest'


class KubeShapeError(KubeManifestError):
    type = 'shape'


class KubePropagationError(KubeShapeError):
    type = 'propagation'


# CLI errors
#

class KubeCLIError(KubeMarkerError):
    type = 'cli'
