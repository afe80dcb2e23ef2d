"""
Utility functions pertaining to models.

A *model* is the object at the end of a chain of presenters. The
functions of this module read the attributes of a model as an ordered
dictionary, its "attribute set". A model can supply its attribute set
itself via a `to_dict` method. Otherwise the attribute set is obtained
from the model's Django fields, dataclass fields, mapping items, or
public instance attributes, whichever applies first.
"""


from collections.abc import Mapping
import dataclasses

from django.db.models import Model

import presentable.util.json_utils as json_utils


def get_attributes(obj):

    """
    Gets the attribute set of the specified object.

    If the object has a `to_dict` method (as do presenters and
    presentable models), the attribute set is the result of calling
    that method. Otherwise it is the field values of the object as
    returned by `get_field_values`.
    """

    to_dict = getattr(type(obj), 'to_dict', None)

    if to_dict is not None:
        return dict(to_dict(obj))
    else:
        return get_field_values(obj)


def get_field_values(obj):

    """
    Gets the field values of the specified object as a dictionary.

    For a Django model instance the dictionary includes every concrete
    field of the model in declaration order, keyed by field attribute
    name. So, for example, the value of a foreign key field `station`
    appears as the primary key of the related object under the key
    `station_id`. Accessing the dictionary does not query the database.

    For a dataclass instance the dictionary includes every dataclass
    field, in declaration order. Field values are not converted
    recursively.

    For a mapping the dictionary is a shallow copy of the mapping.

    For any other object with a `__dict__`, the dictionary includes
    the object's instance attributes whose names do not start with an
    underscore.

    Raises `TypeError` for objects that have none of the above.
    """

    if isinstance(obj, Model):
        return dict(
            (f.attname, getattr(obj, f.attname))
            for f in obj._meta.concrete_fields)

    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dict(
            (f.name, getattr(obj, f.name))
            for f in dataclasses.fields(obj))

    elif isinstance(obj, Mapping):
        return dict(obj)

    elif hasattr(obj, '__dict__'):
        return dict(
            (k, v) for k, v in vars(obj).items() if not k.startswith('_'))

    else:
        raise TypeError(
            f'Could not get attributes of object of type '
            f'{obj.__class__.__name__}.')


def to_json(obj, **options):

    """
    Serializes the attribute set of the specified object to JSON.

    Keyword arguments are passed on to `json_utils.dumps`.
    """

    return json_utils.dumps(get_attributes(obj), **options)
