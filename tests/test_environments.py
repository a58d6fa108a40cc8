import os
from unittest import TestCase
from unittest.mock import patch

from blctl.common.environments import env, flag


class TestEnvironments(TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_default_when_not_set(self):
        self.assertEqual('fallback', env('BLCTL_TEST_UNSET', default='fallback'))
        self.assertIsNone(env('BLCTL_TEST_UNSET'))

    @patch.dict(os.environ, {'BLCTL_TEST_NUMBER': '42'})
    def test_transform(self):
        self.assertEqual(42, env('BLCTL_TEST_NUMBER', transform=int))

    @patch.dict(os.environ, {'BLCTL_TEST_SECRET': 's3cr3t'})
    def test_secret_value_is_returned(self):
        self.assertEqual('s3cr3t', env('BLCTL_TEST_SECRET', env_type='secret'))

    @patch.dict(os.environ, {'BLCTL_TEST_ON': 'True', 'BLCTL_TEST_ONE': '1', 'BLCTL_TEST_OFF': 'no'})
    def test_flag(self):
        self.assertTrue(flag('BLCTL_TEST_ON'))
        self.assertTrue(flag('BLCTL_TEST_ONE'))
        self.assertFalse(flag('BLCTL_TEST_OFF'))
        self.assertFalse(flag('BLCTL_TEST_MISSING'))
