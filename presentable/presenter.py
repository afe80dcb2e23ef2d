"""
Module containing class `Presenter`.

A presenter decorates a model with presentation logic without modifying
the model's class. It wraps the model, adding its own methods and
computed attributes and forwarding everything else to the model. A
presenter can wrap another presenter, forming a *chain* of presenters
that ends with a single model.

Example:

    class UserPresenter(Presenter):

        hidden = ['password']

        def get_full_name_attribute(self):
            return f'{self.model.first_name} {self.model.last_name}'

    presenter = UserPresenter(user)
    presenter.full_name         # computed by the presenter
    presenter.first_name        # forwarded to `user`
    presenter.to_dict()         # `user` attributes plus `full_name`,
                                # without `password`

Presenters are read-only views of their models. They reject all
attribute and item assignments.
"""


from presentable.presenter_settings import presenter_settings
import presentable.attribute_resolver as attribute_resolver
import presentable.model_utils as model_utils
import presentable.util.case_utils as case_utils
import presentable.util.json_utils as json_utils
import presentable.visibility_filter as visibility_filter


class PresenterError(Exception):
    pass


class AttributeNotFoundError(PresenterError, AttributeError):
    pass


class MethodNotFoundError(AttributeNotFoundError):
    pass


class WriteNotSupportedError(PresenterError, TypeError):
    pass


class Presenter:

    """
    Model decorator that adds presentation logic to a model.

    Subclasses define methods and computed attributes (see the
    `attribute_resolver` module for how to define the latter), and
    configure serialization via the `hidden`, `visible`, and
    `snake_attributes` class attributes.
    """


    hidden = ()
    """
    Names of attributes to omit from serialized output.

    This is ignored if `visible` is not empty.
    """

    visible = ()
    """
    Names of the only attributes to include in serialized output.

    If this is empty, all attributes not in `hidden` are included.
    """

    snake_attributes = presenter_settings.snake_attributes
    """
    `True` if serialized output keys are snake case, or `False` if they
    are camel case.
    """


    def __init__(self, model):

        if model is None:
            raise ValueError(
                f'Cannot create {self.__class__.__name__} for `None` model.')

        # We bypass our own `__setattr__`, which rejects all writes.
        object.__setattr__(self, '_model', model)


    @property
    def model(self):
        return self._model


    @property
    def original_model(self):
        model = self._model
        while isinstance(model, Presenter):
            model = model._model
        return model


    def get_model(self):

        """
        Gets the object wrapped by this presenter.

        The object is either a model or another presenter.
        """

        return self._model


    def get_original_model(self):

        """Gets the model at the end of this presenter's chain."""

        return self.original_model


    def __getattr__(self, name):

        # Python calls this method only for attributes not found by
        # normal lookup, so methods and properties of this presenter
        # take precedence over computed attributes and attributes of
        # the wrapped object.

        # Special method lookups (e.g. by `copy` or `pickle`) are never
        # forwarded. Neither is `_model`, which is missing only if
        # `__init__` has not run.
        if (name.startswith('__') and name.endswith('__')) or \
                name == '_model':
            raise AttributeError(name)

        return self._get_attribute(name, getattr)


    def __getitem__(self, name):

        if not isinstance(name, str):
            raise TypeError(
                f'{self.__class__.__name__} keys must be strings, not '
                f'{name.__class__.__name__}.')

        return self._get_attribute(name, _get_item)


    def _get_attribute(self, name, get):

        mutator = attribute_resolver.get_mutator(type(self), name)

        if mutator is not None:
            return mutator(self)

        try:
            return get(self._model, name)

        except AttributeNotFoundError:
            # wrapped object is presenter that could not find attribute

            raise AttributeNotFoundError(
                f'{self.__class__.__name__} chain has no attribute '
                f'"{name}".') from None

        except AttributeError:
            raise AttributeNotFoundError(
                f'Neither {self.__class__.__name__} nor its '
                f'{self._model.__class__.__name__} model has an attribute '
                f'"{name}".') from None


    def __contains__(self, name):

        if not isinstance(name, str):
            return False

        if attribute_resolver.get_mutator(type(self), name) is not None:
            return True

        if isinstance(self._model, Presenter):
            return name in self._model
        else:
            return hasattr(self._model, name)


    def __setattr__(self, name, value):
        self._reject_write(f'set attribute "{name}"')


    def __delattr__(self, name):
        self._reject_write(f'delete attribute "{name}"')


    def __setitem__(self, name, value):
        self._reject_write(f'set item "{name}"')


    def __delitem__(self, name):
        self._reject_write(f'delete item "{name}"')


    def _reject_write(self, action):
        raise WriteNotSupportedError(
            f'Cannot {action} of {self.__class__.__name__}. Presenters '
            f'are read-only.')


    # Presenters support item access by attribute name, but they are
    # not sequences.
    __iter__ = None


    def call_method(self, name, *args, **kwargs):

        """
        Calls a method of this presenter or its wrapped object.

        A method of this presenter takes precedence over a method of the
        same name of the wrapped object.

        Raises `MethodNotFoundError` if neither this presenter nor its
        wrapped object has a callable attribute named `name`.
        """

        try:
            method = getattr(self, name)

        except AttributeNotFoundError:
            method = None

        if not callable(method):
            raise MethodNotFoundError(
                f'Neither {self.__class__.__name__} nor its '
                f'{self._model.__class__.__name__} model has a method '
                f'"{name}".')

        return method(*args, **kwargs)


    def mutators_to_dict(self):

        """
        Gets the computed attributes of this presenter.

        The returned dictionary maps snake case attribute names to
        attribute values. It is neither filtered nor case-converted.
        """

        return attribute_resolver.get_mutator_values(self)


    def get_mutated_attributes(self):

        """
        Gets the names of the computed attributes of this presenter.

        The names are in the case of this presenter's serialized output.
        """

        names = attribute_resolver.get_mutator_names(type(self))
        return [self._convert_key(n) for n in names]


    def get_hidden_presenter_attributes(self):
        return list(self.hidden)


    def get_visible_presenter_attributes(self):
        return list(self.visible)


    def to_dict(self):

        """
        Gets the attributes of this presenter as a dictionary.

        The dictionary contains the attributes of the wrapped object
        followed by the computed attributes of this presenter, filtered
        according to `visible` and `hidden` and with keys in the case
        indicated by `snake_attributes`. A computed attribute overrides
        a wrapped object attribute of the same name.
        """

        attributes = model_utils.get_attributes(self._model)
        attributes.update(self.mutators_to_dict())

        attributes = visibility_filter.filter_attributes(
            attributes, self.hidden, self.visible)

        if self.snake_attributes:
            return attributes
        else:
            return case_utils.convert_keys(
                attributes, case_utils.snake_to_camel)


    def to_json(self, **options):

        """
        Serializes the attributes of this presenter to JSON.

        Keyword arguments are passed on to `json.dumps`.
        """

        return json_utils.dumps(self.to_dict(), **options)


    def _convert_key(self, key):
        if self.snake_attributes:
            return key
        else:
            return case_utils.snake_to_camel(key)


    def __str__(self):
        return self.to_json()


    def __repr__(self):
        return f'{self.__class__.__name__}({self._model!r})'


def _get_item(obj, name):
    if isinstance(obj, Presenter):
        return obj[name]
    else:
        return getattr(obj, name)
