"""Unit tests for settings loading and user store composition."""

import logging
import unittest
from unittest.mock import patch

from adapter.memory.user_repository import InMemoryUserRepository
from config.dependencies import bootstrap, get_user_repo
from config.settings import Settings, load_settings


class TestLoadSettings(unittest.TestCase):

    @patch.dict('os.environ', {}, clear=True)
    def test_defaults(self):
        self.assertEqual(load_settings(), Settings(log_level='INFO', bcrypt_rounds=12))

    @patch.dict('os.environ', {'LOG_LEVEL': 'debug', 'BCRYPT_ROUNDS': '4'}, clear=True)
    def test_reads_environment(self):
        settings = load_settings()

        self.assertEqual(settings.log_level, 'DEBUG')
        self.assertEqual(settings.bcrypt_rounds, 4)


class TestGetUserRepo(unittest.TestCase):

    def test_returns_injected_repo(self):
        repo = InMemoryUserRepository(bcrypt_rounds=4)

        self.assertIs(get_user_repo(repo), repo)

    def test_rejects_object_without_store_methods(self):
        with self.assertRaises(TypeError) as ctx:
            get_user_repo(object())

        self.assertIn("UserRepository", str(ctx.exception))

    def test_builds_in_memory_repo_from_settings(self):
        repo = get_user_repo(settings=Settings(bcrypt_rounds=5))

        self.assertIsInstance(repo, InMemoryUserRepository)
        self.assertEqual(repo.bcrypt_rounds, 5)


class TestBootstrap(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers = self._handlers
        root.setLevel(self._level)

    @patch('config.dependencies.load_dotenv')
    @patch.dict('os.environ', {'LOG_LEVEL': 'WARNING', 'BCRYPT_ROUNDS': '4'}, clear=True)
    def test_bootstrap(self, mock_load_dotenv):
        settings, repo = bootstrap()

        mock_load_dotenv.assert_called_once()
        self.assertEqual(settings.bcrypt_rounds, 4)
        self.assertEqual(repo.bcrypt_rounds, 4)
        self.assertEqual(logging.getLogger().level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
