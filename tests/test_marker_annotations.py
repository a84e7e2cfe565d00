from copy import deepcopy
from unittest import TestCase

from kubemarker.constants import LEGACY_APP_NAME_LABEL_KEY, TRACKING_ID_ANNOTATION_KEY
from kubemarker.exceptions import KubeShapeError
from kubemarker.marker import (
    get_app_instance_annotation,
    remove_annotation,
    set_app_instance_annotation,
)

from .util import make_workload


class TestSetAppInstanceAnnotation(TestCase):
    def test_set_without_annotations(self):
        obj = make_workload()
        tracking_id = 'my-app:apps/Deployment:default/web'
        result = set_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY, tracking_id)
        self.assertIs(result, obj)
        self.assertEqual(obj['metadata']['annotations'], {
            TRACKING_ID_ANNOTATION_KEY: tracking_id,
        })

    def test_keeps_existing_annotations(self):
        obj = make_workload()
        obj['metadata']['annotations'] = {'description': 'Web frontend'}
        set_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY, 'my-app')
        self.assertEqual(obj['metadata']['annotations'], {
            'description': 'Web frontend',
            TRACKING_ID_ANNOTATION_KEY: 'my-app',
        })

    def test_null_annotations_treated_as_absent(self):
        obj = {'metadata': {'annotations': None}}
        set_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY, 'my-app')
        self.assertEqual(obj['metadata']['annotations'], {TRACKING_ID_ANNOTATION_KEY: 'my-app'})

    def test_never_propagates(self):
        for api_version in ('apps/v1', 'apps/v1beta1'):
            obj = make_workload(api_version=api_version)
            spec = deepcopy(obj['spec'])
            set_app_instance_annotation(obj, LEGACY_APP_NAME_LABEL_KEY, 'my-app')
            self.assertEqual(obj['spec'], spec)

    def test_non_string_annotation_value(self):
        obj = make_workload()
        obj['metadata']['annotations'] = {'replicas': 3}
        with self.assertRaises(KubeShapeError) as context:
            set_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY, 'my-app')
        self.assertIn('Failed to get annotations from target object', str(context.exception))


class TestGetAppInstanceAnnotation(TestCase):
    def test_get(self):
        obj = {'metadata': {'annotations': {TRACKING_ID_ANNOTATION_KEY: 'my-app'}}}
        self.assertEqual(get_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY), 'my-app')

    def test_get_without_annotations(self):
        obj = make_workload()
        self.assertEqual(get_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY), '')

    def test_get_empty_value_same_as_missing(self):
        obj = {'metadata': {'annotations': {TRACKING_ID_ANNOTATION_KEY: ''}}}
        self.assertEqual(get_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY), '')
        self.assertEqual(get_app_instance_annotation(obj, 'other'), '')

    def test_get_annotations_not_a_map(self):
        obj = {'metadata': {'annotations': 'oops'}}
        with self.assertRaises(KubeShapeError):
            get_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY)


class TestRemoveAnnotation(TestCase):
    def test_remove(self):
        obj = {'metadata': {'annotations': {TRACKING_ID_ANNOTATION_KEY: 'my-app', 'a': 'b'}}}
        remove_annotation(obj, TRACKING_ID_ANNOTATION_KEY)
        self.assertEqual(obj, {'metadata': {'annotations': {'a': 'b'}}})

    def test_remove_last_annotation_clears_field(self):
        obj = {'metadata': {'name': 'web', 'annotations': {TRACKING_ID_ANNOTATION_KEY: 'my-app'}}}
        remove_annotation(obj, TRACKING_ID_ANNOTATION_KEY)
        self.assertEqual(obj, {'metadata': {'name': 'web'}})

    def test_remove_missing_key(self):
        obj = {'metadata': {'annotations': {'a': 'b'}}}
        remove_annotation(obj, TRACKING_ID_ANNOTATION_KEY)
        self.assertEqual(obj, {'metadata': {'annotations': {'a': 'b'}}})

    def test_remove_without_annotations(self):
        obj = make_workload()
        expected = deepcopy(obj)
        remove_annotation(obj, TRACKING_ID_ANNOTATION_KEY)
        self.assertEqual(obj, expected)

    def test_null_metadata(self):
        obj = {'kind': 'Service', 'metadata': None}
        self.assertEqual(get_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY), '')
        remove_annotation(obj, TRACKING_ID_ANNOTATION_KEY)
        self.assertEqual(obj, {'kind': 'Service', 'metadata': None})
        set_app_instance_annotation(obj, TRACKING_ID_ANNOTATION_KEY, 'my-app')
        self.assertEqual(obj['metadata'], {'annotations': {TRACKING_ID_ANNOTATION_KEY: 'my-app'}})
