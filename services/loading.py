"""
Recipe Loading Service

Finds recipe documents in the bundled recipes folder or on a remote
server, and hands their text to the parser.
"""

import logging
import os

import requests

from constants import RECIPE_EXTENSION
from utils.sanitizer import recipe_slug
from utils.url_validator import safe_fetch, SSRFError
from .errors import RecipeError, RecipeNotFound
from .parsing import parse_recipe

logger = logging.getLogger(__name__)


def list_recipes(folder):
    """Return the sorted names of all bundled recipe documents in folder."""
    if not os.path.isdir(folder):
        logger.warning("Recipes folder %s does not exist", folder)
        return []

    names = []
    for entry in os.listdir(folder):
        stem, ext = os.path.splitext(entry)
        if ext == RECIPE_EXTENSION and recipe_slug(stem) and os.path.isfile(os.path.join(folder, entry)):
            names.append(stem)
    return sorted(names)


def read_recipe_text(name, folder):
    """Read a bundled recipe document. Raises RecipeNotFound for unknown or invalid names."""
    slug = recipe_slug(name)
    if slug is None:
        raise RecipeNotFound(name)

    path = os.path.join(folder, slug + RECIPE_EXTENSION)
    try:
        with open(path, encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        raise RecipeNotFound(name) from None
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeError(str(e)) from e


def fetch_recipe_text(url, timeout=10, max_size=1024 * 1024, validate=True):
    """Fetch a remote recipe document. Network and validation failures become RecipeError."""
    try:
        return safe_fetch(url, timeout=timeout, max_size=max_size, validate=validate)
    except SSRFError as e:
        logger.warning("Blocked recipe URL %s: %s", url, e)
        raise RecipeError(f"URL blocked for security: {e}") from e
    except requests.HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            raise RecipeNotFound(url) from e
        logger.warning("Could not fetch %s: %s", url, e)
        raise RecipeError(f"Could not fetch URL: {e}") from e
    except requests.RequestException as e:
        logger.warning("Could not fetch %s: %s", url, e)
        raise RecipeError(f"Could not fetch URL: {e}") from e
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Could not decode %s: %s", url, e)
        raise RecipeError(f"Could not decode recipe text: {e}") from e


def recipe_url(name, base_url):
    """Build the URL of a recipe document served under base_url."""
    slug = recipe_slug(name)
    if slug is None:
        raise RecipeNotFound(name)
    return f"{base_url.rstrip('/')}/{slug}{RECIPE_EXTENSION}"


def load_recipe(name, config):
    """
    Load and parse the recipe called name.

    Reads from config['RECIPES_BASE_URL'] when it is set, otherwise from
    config['RECIPES_FOLDER'].
    """
    base_url = config.get('RECIPES_BASE_URL')
    if base_url:
        url = recipe_url(name, base_url)
        logger.info("Fetching recipe %s from %s", name, url)
        text = fetch_recipe_text(
            url,
            timeout=config.get('FETCH_TIMEOUT', 10),
            max_size=config.get('MAX_RECIPE_SIZE', 1024 * 1024),
            validate=False,
        )
    else:
        logger.info("Reading bundled recipe %s", name)
        text = read_recipe_text(name, config['RECIPES_FOLDER'])

    return parse_recipe(text)
