"""Utility functions for converting between snake case and camel case."""


import re


_ACRONYM_BOUNDARY_RE = re.compile(r'([A-Z]+)([A-Z][a-z])')
_WORD_BOUNDARY_RE = re.compile(r'([a-z\d])([A-Z])')


def snake_to_camel(s):

    """
    Converts a snake case string to camel case.

    The first letter of the first part of the string is lowercased, as
    is the whole part if it is all uppercase. Each following part has
    its first letter capitalized. The remaining letters of a part are
    left alone, so a string that is already in camel case is
    returned unchanged.

    Examples:

        'one' -> 'one'
        'one_two' -> 'oneTwo'
        'oneTwo' -> 'oneTwo'
        'address_line_2' -> 'addressLine2'
        'URL_path' -> 'urlPath'
    """

    parts = [p for p in s.split('_') if p != '']

    if len(parts) == 0:
        return ''

    first = parts[0]

    if first.isupper():
        # acronym, like `ID` or `URL`
        first = first.lower()
    else:
        first = first[0].lower() + first[1:]

    return first + ''.join(p[0].upper() + p[1:] for p in parts[1:])


def camel_to_snake(s):

    """
    Converts a camel case string to snake case.

    Examples:

        'one' -> 'one'
        'oneTwo' -> 'one_two'
        'one_two' -> 'one_two'
        'HTMLParser' -> 'html_parser'
        'addressLine2' -> 'address_line2'
    """

    s = _ACRONYM_BOUNDARY_RE.sub(r'\1_\2', s)
    s = _WORD_BOUNDARY_RE.sub(r'\1_\2', s)
    return s.lower()


def convert_keys(d, converter):

    """
    Converts the keys of the specified dictionary.

    Only the top-level keys are converted. The returned dictionary is a
    new one with its items in the same order as the items of `d`.
    """

    return dict((converter(k), v) for k, v in d.items())
