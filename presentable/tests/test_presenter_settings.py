from unittest.mock import patch
import os

from environs import Env, EnvError

from presentable.presenter_settings import create_settings
from presentable.tests.test_case import TestCase


_ENV_VAR_NAMES = (
    'PRESENTABLE_SNAKE_ATTRIBUTES',
    'PRESENTABLE_JSON_INDENT',
    'PRESENTABLE_JSON_ENSURE_ASCII',
)


class PresenterSettingsTests(TestCase):


    def _create_settings(self, **env_vars):

        environ = dict(
            (k, v) for k, v in os.environ.items()
            if k not in _ENV_VAR_NAMES)
        environ.update(env_vars)

        with patch.dict(os.environ, environ, clear=True):
            return create_settings(Env())


    def test_defaults(self):

        settings = self._create_settings()

        self.assertIs(settings.snake_attributes, True)
        self.assertIsNone(settings.json.indent)
        self.assertIs(settings.json.ensure_ascii, True)


    def test_environment_overrides(self):

        settings = self._create_settings(
            PRESENTABLE_SNAKE_ATTRIBUTES='false',
            PRESENTABLE_JSON_INDENT='2')

        self.assertIs(settings.snake_attributes, False)
        self.assertEqual(settings.json.indent, 2)

        # Setting not overridden keeps its default.
        self.assertIs(settings.json.ensure_ascii, True)


    def test_nested_environment_override(self):
        settings = self._create_settings(PRESENTABLE_JSON_ENSURE_ASCII='0')
        self.assertIs(settings.json.ensure_ascii, False)
        self.assertIsNone(settings.json.indent)


    def test_invalid_environment_values(self):

        cases = (
            ('PRESENTABLE_SNAKE_ATTRIBUTES', 'bobo'),
            ('PRESENTABLE_JSON_INDENT', 'two'),
        )

        for name, value in cases:
            self.assert_raises(
                EnvError, self._create_settings, **{name: value})
