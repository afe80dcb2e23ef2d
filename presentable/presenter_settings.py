"""
Presentable settings.

The presenter settings are the composition of a set of default settings
(hard-coded in this module) and settings (optionally) specified in
environment variables. The settings are:

    snake_attributes - the default case style of presenter output keys,
        `True` for snake case and `False` for camel case. Presenter
        classes can override this with their `snake_attributes`
        attribute. Environment variable: PRESENTABLE_SNAKE_ATTRIBUTES.

    json.indent - the default indentation of JSON output, or `None`
        for compact output. Environment variable: PRESENTABLE_JSON_INDENT.

    json.ensure_ascii - whether or not JSON output escapes non-ASCII
        characters. Environment variable: PRESENTABLE_JSON_ENSURE_ASCII.

The settings are read once, when this module is first imported.
"""


import logging

from environs import Env

from presentable.util.settings import Settings


_logger = logging.getLogger(__name__)


_DEFAULT_SETTINGS = Settings.create_from_yaml('''
snake_attributes: true
json:
    indent: null
    ensure_ascii: true
''')


_ENV_PREFIX = 'PRESENTABLE_'


def create_settings(env=None):

    """
    Creates presenter settings from the defaults and the environment.

    `env` is an `environs.Env`, and defaults to one that reads
    `os.environ`. An environment variable that is set but whose value
    is not valid for its setting raises an `environs.EnvError`.
    """

    if env is None:
        env = Env()

    overrides = {}

    with env.prefixed(_ENV_PREFIX):

        snake_attributes = env.bool('SNAKE_ATTRIBUTES', None)
        if snake_attributes is not None:
            overrides['snake_attributes'] = snake_attributes

        json_overrides = {}

        indent = env.int('JSON_INDENT', None)
        if indent is not None:
            json_overrides['indent'] = indent

        ensure_ascii = env.bool('JSON_ENSURE_ASCII', None)
        if ensure_ascii is not None:
            json_overrides['ensure_ascii'] = ensure_ascii

        if len(json_overrides) != 0:
            overrides['json'] = json_overrides

    if len(overrides) != 0:
        _logger.debug(
            f'Overriding default presenter settings with environment '
            f'settings {overrides}.')

    return _DEFAULT_SETTINGS.merge(overrides)


presenter_settings = create_settings()
