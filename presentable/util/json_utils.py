"""JSON utility functions."""


import json

from django.core.serializers.json import DjangoJSONEncoder

from presentable.presenter_settings import presenter_settings


class PresenterJSONEncoder(DjangoJSONEncoder):

    """
    JSON encoder for presenters and presentable models.

    In addition to the types handled by `DjangoJSONEncoder` (dates,
    times, decimals, UUIDs, and lazy translation strings), this encoder
    handles any object with a `to_dict` method, for example a presenter
    nested in the output of a mutator, by encoding its dictionary.
    """


    def default(self, o):

        to_dict = getattr(type(o), 'to_dict', None)

        if to_dict is not None:
            return to_dict(o)

        return super().default(o)


def dumps(obj, **options):

    """
    Serializes an object to a JSON string.

    The `json` presenter settings supply default `indent` and
    `ensure_ascii` options. Any options specified as keyword arguments
    take precedence over the settings, and are passed on to `json.dumps`.
    """

    options.setdefault('cls', PresenterJSONEncoder)
    options.setdefault('indent', presenter_settings.json.indent)
    options.setdefault('ensure_ascii', presenter_settings.json.ensure_ascii)

    return json.dumps(obj, **options)
