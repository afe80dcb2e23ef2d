"""
Function that filters presenter attributes by visibility.

A presenter class can restrict the attributes that appear in its
serialized output with either of two lists of attribute names. A
non-empty *visible* list is an allow-list: only the attributes it names
appear. Otherwise, a non-empty *hidden* list is a deny-list: all
attributes except the ones it names appear.
"""


import presentable.util.case_utils as case_utils


def filter_attributes(attributes, hidden=(), visible=()):

    """
    Filters an attribute dictionary by visibility.

    If `visible` is not empty, `hidden` is ignored. Attribute names
    are compared in camel case, so names listed in snake case also
    match camel case keys, including keys like `addressLine2` whose
    snake case form has a digit part.

    Returns a new dictionary with items in the same order as those of
    `attributes`.
    """

    if len(visible) != 0:
        names = _normalize(visible)
        return dict(
            (k, v) for k, v in attributes.items()
            if _normalize_key(k) in names)

    elif len(hidden) != 0:
        names = _normalize(hidden)
        return dict(
            (k, v) for k, v in attributes.items()
            if _normalize_key(k) not in names)

    else:
        return dict(attributes)


def _normalize(names):
    return frozenset(_normalize_key(n) for n in names)


def _normalize_key(key):
    return case_utils.snake_to_camel(key)
