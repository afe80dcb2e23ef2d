"""
Functions that present the elements of collections.

The functions of this module work with any iterable collection of
models or presenters, including lists, tuples, Django query sets, and
Django paginator pages, and with mappings, whose values they present.
The module also includes a `PresentableCollection` class, a list with
methods for these functions.
"""


from collections.abc import Mapping, MutableMapping, MutableSequence
import logging

from presentable.presenter_factory import PresenterFactory
import presentable.model_utils as model_utils
import presentable.util.json_utils as json_utils


_logger = logging.getLogger(__name__)


_factory = PresenterFactory()


def present(collection, presenter=None):

    """
    Presents the elements of a collection.

    Each element of the collection is presented as by
    `presenter_factory.present`. The collection is not modified.
    Elements that are already presenters are wrapped in new presenters,
    extending their presenter chains by one.

    Returns
    -------
    dict or PresentableCollection
        a new collection containing the presenters. If `collection` is
        a mapping the new collection is a `dict` with the same keys.
        Otherwise it is a `PresentableCollection` whose elements are
        in the same order as those of `collection`.
    """

    if isinstance(collection, Mapping):
        result = dict(
            (k, _factory(v, presenter)) for k, v in collection.items())

    else:
        result = PresentableCollection(
            _factory(v, presenter) for v in collection)

    _logger.debug(f'Presented {len(result)} collection elements.')

    return result


def present_transformed(collection, presenter=None):

    """
    Presents the elements of a collection, in place.

    Each element of the collection is replaced with its presenter, as
    created by `presenter_factory.present`. The original element
    objects are not modified. If any element cannot be presented, no
    element is replaced.

    Returns
    -------
    MutableSequence or MutableMapping
        `collection` itself, so that calls can be chained.

    Raises
    ------
    TypeError
        if `collection` is neither a mutable sequence nor a mutable
        mapping.
    """

    # We create all of the presenters before replacing any elements, so
    # that if presentation fails the collection is left unchanged.

    if isinstance(collection, MutableMapping):
        presenters = dict(
            (k, _factory(v, presenter)) for k, v in collection.items())
        collection.update(presenters)

    elif isinstance(collection, MutableSequence):
        presenters = [_factory(v, presenter) for v in collection]
        for i, p in enumerate(presenters):
            collection[i] = p

    else:
        raise TypeError(
            f'Cannot transform collection of type '
            f'{collection.__class__.__name__} in place since it is not '
            f'mutable. Consider using `present` instead.')

    _logger.debug(f'Transformed {len(collection)} collection elements.')

    return collection


def to_list(collection):

    """Gets the attribute dictionaries of the elements of a collection."""

    return [model_utils.get_attributes(v) for v in collection]


def to_json(collection, **options):

    """
    Serializes the elements of a collection to a JSON array.

    Keyword arguments are passed on to `json.dumps`.
    """

    return json_utils.dumps(to_list(collection), **options)


class PresentableCollection(list):

    """
    List of models or presenters.

    A presentable collection is a list with additional methods for
    presenting and serializing its elements.
    """


    def present(self, presenter=None):

        """
        Creates a new collection presenting the elements of this one.

        See the `present` function of this module for details.
        """

        return present(self, presenter)


    def present_transformed(self, presenter=None):

        """
        Replaces the elements of this collection with their presenters.

        Returns this collection. See the `present_transformed` function
        of this module for details.
        """

        return present_transformed(self, presenter)


    def first(self, default=None):
        return self[0] if len(self) != 0 else default


    def pluck(self, name):

        """
        Gets the values of an attribute of the elements of this collection.

        The value of an attribute of a mapping element is the value of
        the item whose key is the attribute name.
        """

        return PresentableCollection(_get_value(v, name) for v in self)


    def to_list(self):
        return to_list(self)


    def to_json(self, **options):
        return to_json(self, **options)


    def __str__(self):
        return self.to_json()


def _get_value(obj, name):
    if isinstance(obj, Mapping):
        return obj[name]
    else:
        return getattr(obj, name)
