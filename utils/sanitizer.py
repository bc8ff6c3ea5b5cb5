"""
Input Sanitization Module

Validates recipe names taken from the URL path and image hrefs taken from
recipe documents before they reach the filesystem or a template.
"""

import re
from urllib.parse import urlparse

from constants import RECIPE_SLUG_PATTERN, MAX_LENGTHS, DANGEROUS_URL_SCHEMES


def recipe_slug(name):
    """
    Normalize a bundled recipe name.

    Returns the stripped name if it is a plain file stem, otherwise None.
    Blocks path traversal ('../x') and hidden files.
    """
    if not name or not isinstance(name, str):
        return None

    name = name.strip()
    if len(name) > MAX_LENGTHS['recipe_name']:
        return None
    if not RECIPE_SLUG_PATTERN.match(name):
        return None
    return name


def sanitize_url(url):
    """
    Sanitize an href by rejecting dangerous schemes.

    Relative paths (bundled images) are allowed. Returns the URL if safe,
    empty string if unsafe or invalid.
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()
    if len(url) > MAX_LENGTHS['image_href']:
        return ''

    # Control characters can hide a scheme from the browser's parser
    if re.search(r'[\x00-\x1f\x7f]', url):
        return ''

    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError:
        return ''

    if scheme and scheme not in ('http', 'https'):
        return ''

    url_lower = url.lower()
    for dangerous in DANGEROUS_URL_SCHEMES:
        if dangerous + ':' in url_lower:
            return ''

    return url
