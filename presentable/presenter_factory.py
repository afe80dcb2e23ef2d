"""
Module containing class `PresenterFactory` and function `present`.

A presenter factory creates a presenter for a model from a *presenter
designation*, which can be any of:

    * a `Presenter` subclass.

    * the dotted import path of a `Presenter` subclass, for example
      `'myapp.presenters.UserPresenter'`. This allows a model module to
      designate a presenter without importing it.

    * a callable, for example a function or lambda, that accepts the
      model and returns a mapping from attribute names to values. The
      factory creates an ad hoc presenter with one computed attribute
      per mapping item. If an item's value is callable it is called
      with the wrapped model every time the attribute is read, and
      otherwise it is the attribute value.

    * `None`, in which case the factory uses the model's default
      presenter. A model declares its default presenter (either a
      `Presenter` subclass or a dotted import path) with its class's
      `default_presenter` attribute.
"""


from collections.abc import Mapping
import logging

from django.utils.module_loading import import_string

from presentable.presenter import Presenter, PresenterError
import presentable.attribute_resolver as attribute_resolver
import presentable.util.case_utils as case_utils


_logger = logging.getLogger(__name__)


class NoDefaultPresenterError(PresenterError, TypeError):
    pass


class PresenterFactory:


    def __call__(self, model, presenter=None):

        """
        Creates a presenter for a model.

        Parameters
        ----------
        model : object
            the object to present, either a model or a presenter.

        presenter : type, str, callable, or None
            the presenter designation, as described in the module
            docstring.

        Returns
        -------
        Presenter
            the new presenter, wrapping `model`.

        Raises
        ------
        NoDefaultPresenterError
            if `presenter` is `None` and the model has no default
            presenter.

        TypeError
            if `presenter` is not a valid presenter designation.
        """

        if presenter is None:
            presenter = self._get_default_presenter(model)

        presenter_class = self._get_presenter_class(presenter)

        if presenter_class is not None:

            _logger.debug(
                f'Presenting {model.__class__.__name__} with '
                f'{presenter_class.__name__}.')

            return presenter_class(model)

        elif callable(presenter):

            _logger.debug(
                f'Presenting {model.__class__.__name__} with closure '
                f'{getattr(presenter, "__qualname__", repr(presenter))}.')

            return self._create_closure_presenter(model, presenter)

        else:
            raise TypeError(
                f'Presenter must be a Presenter subclass, a dotted '
                f'import path, or a callable, not a '
                f'{presenter.__class__.__name__}.')


    def _get_default_presenter(self, model):

        presenter = getattr(type(model), 'default_presenter', None)

        if presenter is None:
            raise NoDefaultPresenterError(
                f'Cannot present {model.__class__.__name__} since no '
                f'presenter was specified and the model has no default '
                f'presenter.')

        return presenter


    def _get_presenter_class(self, presenter):

        if isinstance(presenter, str):
            presenter = import_string(presenter)

        if isinstance(presenter, type):

            if not issubclass(presenter, Presenter):
                raise TypeError(
                    f'Presenter class {presenter.__name__} is not a '
                    f'subclass of Presenter.')

            return presenter

        else:
            return None


    def _create_closure_presenter(self, model, closure):

        attributes = closure(model)

        if not isinstance(attributes, Mapping):
            raise TypeError(
                f'Presenter closure must return a mapping, not a '
                f'{attributes.__class__.__name__}.')

        mutators = dict(
            _create_mutator(name, value)
            for name, value in attributes.items())

        cls = type('ClosurePresenter', (Presenter,), mutators)

        return cls(model)


def _create_mutator(name, value):

    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(
            f'Presenter closure attribute name {name!r} is not a valid '
            f'identifier.')

    name = case_utils.camel_to_snake(name)

    if callable(value):

        def mutator(self):
            return value(self.model)

    else:

        def mutator(self):
            return value

    method_name = attribute_resolver.get_mutator_method_name(name)
    mutator.__name__ = method_name

    return method_name, mutator


_factory = PresenterFactory()


def present(model, presenter=None):

    """
    Creates a presenter for a model.

    This is a shorthand for calling a `PresenterFactory`. See the
    module docstring for the kinds of presenter designations that can
    be specified with `presenter`.
    """

    return _factory(model, presenter)
