# Utility modules for the recipe book
from .url_validator import is_safe_url, safe_fetch, SSRFError
from .sanitizer import recipe_slug, sanitize_url
