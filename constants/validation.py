"""
Validation Constants

Whitelist values for validating recipe names and URLs that come from
request parameters or from recipe documents.
"""

import re

# Bundled recipe names are file stems: letters, digits, underscore, dash
RECIPE_SLUG_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')

# Maximum field lengths for security
MAX_LENGTHS = {
    'recipe_name': 100,
    'source_url': 500,
    'image_href': 500,
}

# Schemes allowed in fetched URLs and rendered image hrefs
ALLOWED_URL_SCHEMES = {'http', 'https'}

# Schemes that must never end up in an href attribute
DANGEROUS_URL_SCHEMES = {
    'javascript', 'data', 'vbscript', 'file',
    'blob', 'about', 'chrome', 'moz-extension'
}
