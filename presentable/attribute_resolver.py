"""
Functions that resolve presenter attributes.

A presenter class defines a *computed attribute* with a *mutator*,
a method whose name has the form `get_<attribute name>_attribute`.
For example, the mutator of the computed attribute `full_name` is
named `get_full_name_attribute`. A mutator takes no arguments other
than `self`.

Attribute names are snake case. The attribute name of a mutator whose
name is not in snake case is converted to snake case, so the mutator
`get_URL_attribute` computes the attribute `url`. Requested attribute
names are compared with mutator attribute names in camel case, so
`fullName` and `full_name` resolve to the same mutator, and so do
`addressLine2` and `address_line_2`.
"""


import re

import presentable.util.case_utils as case_utils


_MUTATOR_NAME_RE = re.compile(r'^get_(?P<name>\w+?)_attribute$')


def get_mutator_method_name(attribute_name):

    """Gets the name of the mutator method for an attribute."""

    return f'get_{case_utils.camel_to_snake(attribute_name)}_attribute'


def get_mutator_attribute_name(method_name):

    """
    Gets the name of the attribute computed by a mutator method.

    The name is in snake case. Returns `None` if `method_name` is not
    a mutator method name.
    """

    m = _MUTATOR_NAME_RE.match(method_name)

    if m is None:
        return None
    else:
        return case_utils.camel_to_snake(m.group('name'))


def get_mutator_names(presenter_class):

    """
    Gets the names of the computed attributes of a presenter class.

    The returned list includes the attributes of mutators that are
    inherited from superclasses. Attributes are listed in the order in
    which their mutators were declared, with superclass mutators before
    subclass ones. A mutator that overrides a superclass mutator keeps
    the place of the mutator it overrides.
    """

    return list(_get_mutator_method_names(presenter_class))


def _get_mutator_method_names(presenter_class):

    # Maps attribute names to mutator method names, in the order of
    # `get_mutator_names`. A subclass mutator replaces the method name
    # of the superclass mutator it overrides, even if it spells the
    # attribute name differently.

    method_names = {}

    for cls in reversed(presenter_class.__mro__):
        for method_name, value in vars(cls).items():
            if callable(value):
                name = get_mutator_attribute_name(method_name)
                if name is not None:
                    method_names[name] = method_name

    # A subclass can remove a mutator by setting its method to `None`.
    return dict(
        (name, method_name) for name, method_name in method_names.items()
        if callable(getattr(presenter_class, method_name, None)))


def get_mutator(presenter_class, attribute_name):

    """
    Gets the mutator of a presenter class for an attribute.

    Returns `None` if the class has no such mutator.
    """

    key = case_utils.snake_to_camel(attribute_name)

    method_names = _get_mutator_method_names(presenter_class)

    for name, method_name in method_names.items():
        if case_utils.snake_to_camel(name) == key:
            return getattr(presenter_class, method_name)

    return None


def get_mutator_values(presenter):

    """
    Computes the values of all of the computed attributes of a presenter.

    Returns a dictionary mapping attribute names to values, in the
    order of `get_mutator_names`.
    """

    cls = type(presenter)

    return dict(
        (name, getattr(cls, method_name)(presenter))
        for name, method_name in _get_mutator_method_names(cls).items())
