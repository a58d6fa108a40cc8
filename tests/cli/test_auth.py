import os
import shutil
import tempfile
from unittest.mock import patch

import yaml

from blctl.configuration.manager import ConfigurationManager
from tests.cli.base import CliTestCase
from tests.mock_api import respond


class TestAuthCommands(CliTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.temp_dir = tempfile.mkdtemp()
        self.config_manager = ConfigurationManager(os.path.join(self.temp_dir, 'config.yaml'))

        self.container_patcher = patch('blctl.cli.auth.commands.container')
        mock_container = self.container_patcher.start()
        mock_container.get.return_value = self.config_manager

    def tearDown(self) -> None:
        self.container_patcher.stop()
        shutil.rmtree(self.temp_dir)
        super().tearDown()

    def test_init_verifies_the_token(self):
        self.api.on('GET', '/v2/account', respond(200, {'account': {'email': 'user@example.com'}}))

        result = self.invoke('auth', 'init', '-t', 'new-token', '-u', self.api.url, '--context', 'work')

        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual('Bearer new-token', self.api.requests_to('/v2/account')[0].headers['Authorization'])

        config = self.config_manager.load()
        self.assertEqual('work', config.current_context)
        self.assertEqual('new-token', config.contexts['work'].access_token)
        self.assertEqual(self.api.url, config.contexts['work'].api_url)

    def test_init_with_rejected_token(self):
        self.api.on('GET', '/v2/account', respond(401, {'id': 'unauthorized'}))

        result = self.invoke('auth', 'init', '-t', 'bad-token', '-u', self.api.url)

        self.assertEqual(1, result.exit_code)
        self.assertEqual({}, self.config_manager.load().contexts)

    def test_list_switch_remove(self):
        for context_name in ['personal', 'work']:
            result = self.invoke('auth', 'init', '-t', f'{context_name}-token', '--context', context_name,
                                 '--skip-verify')
            self.assertEqual(0, result.exit_code, result.output)

        contexts = self.parse_yaml(self.invoke('auth', 'list'))
        self.assertEqual(['personal', 'work'], [c['name'] for c in contexts])
        self.assertEqual([False, True], [c['current'] for c in contexts])

        self.assertEqual(0, self.invoke('auth', 'switch', 'personal').exit_code)
        self.assertEqual('personal', self.config_manager.load().current_context)

        self.assertEqual(0, self.invoke('auth', 'rm', 'personal').exit_code)
        config = self.config_manager.load()
        self.assertEqual(['work'], list(config.contexts.keys()))
        self.assertEqual('default', config.current_context)

        with open(self.config_manager.file_path) as f:
            self.assertIn('work-token', yaml.safe_load(f)['contexts']['work']['access_token'])

    def test_switch_to_unknown_context(self):
        result = self.invoke('auth', 'switch', 'nowhere')

        self.assertEqual(1, result.exit_code)
        self.assertIn('UnknownContextError', result.stderr)


class TestVersion(CliTestCase):
    def test_version(self):
        from blctl.constants import __version__

        result = self.invoke('version')

        self.assertEqual(0, result.exit_code)
        self.assertIn(__version__, result.stdout)

        result = self.invoke('--version')

        self.assertEqual(__version__, result.stdout.strip())
