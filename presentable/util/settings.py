"""Module containing class `Settings`."""


from ruamel.yaml import YAML


class Settings:

    """
    Collection of software configuration settings.

    A *setting* has a *name* and a *value*. The name must be a Python
    identifier. The value must be `None` or a boolean, integer, float,
    string, list, or `Settings` object. A setting contained in a
    `Settings` object is accessed as an attribute of the object.
    For example, a setting `x` of a settings object `s` is accessed
    as `s.x`.

    Settings objects are built once and then only read, so they offer
    no way to modify a setting. To change settings, create a new
    settings object with `merge`.
    """


    @staticmethod
    def create_from_dict(d):

        """Creates a settings object from a dictionary."""

        if not isinstance(d, dict):
            raise TypeError(
                f'Settings data must be a dictionary, not a '
                f'{d.__class__.__name__}.')

        d = dict(
            (k, Settings._create_from_dict_aux(v))
            for k, v in d.items())

        return Settings(**d)


    @staticmethod
    def _create_from_dict_aux(v):
        if isinstance(v, dict):
            return Settings.create_from_dict(v)
        elif isinstance(v, list):
            return [Settings._create_from_dict_aux(i) for i in v]
        else:
            return v


    @staticmethod
    def create_from_yaml(s):

        """Creates a settings object from a YAML string."""

        try:
            d = _load_yaml(s)

        except Exception as e:
            raise ValueError(f'YAML parse failed. Error message was:\n{e}')

        if d is None:
            d = dict()

        elif not isinstance(d, dict):
            raise ValueError('Settings must be a YAML mapping.')

        return Settings.create_from_dict(_to_plain_data(d))


    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


    def __eq__(self, other):
        if not isinstance(other, Settings):
            return False
        else:
            return self.__dict__ == other.__dict__


    def __contains__(self, name):
        return name in self.__dict__


    def __iter__(self):
        return iter(self.__dict__)


    def __repr__(self):
        items = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'Settings({items})'


    def get(self, name, default=None):
        return self.__dict__.get(name, default)


    def to_dict(self):

        """Gets the settings of this object as a nested dictionary."""

        return dict(
            (k, _to_dict_aux(v)) for k, v in self.__dict__.items())


    def merge(self, overrides):

        """
        Creates a new settings object from this one and overrides.

        `overrides` is a dictionary or a `Settings` object. Nested
        settings are merged recursively, so an override of one setting
        of a nested settings object leaves the other settings of that
        object intact. This settings object is not modified.
        """

        if isinstance(overrides, Settings):
            overrides = overrides.to_dict()

        d = self.to_dict()
        _merge_dicts(d, overrides)
        return Settings.create_from_dict(d)


def _load_yaml(s):

    # We use the default 'rt' type, which is safe, with the pure-Python
    # implementation, which is slower than the C implementation but
    # less quirky.
    yaml = YAML(pure=True)

    return yaml.load(s)


def _to_plain_data(x):

    # The round-trip loader produces `CommentedMap` and `CommentedSeq`
    # objects, which we convert to plain dictionaries and lists.
    if isinstance(x, dict):
        return dict((k, _to_plain_data(v)) for k, v in x.items())
    elif isinstance(x, list):
        return [_to_plain_data(i) for i in x]
    else:
        return x


def _to_dict_aux(v):
    if isinstance(v, Settings):
        return v.to_dict()
    elif isinstance(v, list):
        return [_to_dict_aux(i) for i in v]
    else:
        return v


def _merge_dicts(d, overrides):
    for k, v in overrides.items():
        if isinstance(v, dict) and isinstance(d.get(k), dict):
            _merge_dicts(d[k], v)
        else:
            d[k] = v
