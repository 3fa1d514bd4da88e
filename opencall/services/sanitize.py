"""
Input Sanitization

Form fields are filtered character by character before any validation, so
disallowed characters are dropped rather than rejected.
"""

import re

EMAIL_DISALLOWED = re.compile(r'[^a-zA-Z0-9@.]')
NAME_DISALLOWED = re.compile(r'[^a-zA-Z0-9]')

# local@domain.tld, one @, at least one dot after it
EMAIL_SHAPE = re.compile(r'^[^@]+@[^@]+\.[^@]+$')


def sanitize_email(value):
    """Remove everything except ASCII letters, digits, ``@`` and ``.``."""
    return EMAIL_DISALLOWED.sub('', value or '')


def sanitize_name(value):
    """Remove everything except ASCII letters and digits."""
    return NAME_DISALLOWED.sub('', value or '')


def is_valid_email(email):
    return EMAIL_SHAPE.match(email) is not None
