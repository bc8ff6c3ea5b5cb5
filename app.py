import logging
import os

from flask import Flask, render_template, request, jsonify, url_for

from config import get_config
from models import UnitSystem
from services import (
    RecipeError, RecipeNotFound, MeasurementError,
    parse_recipe, format_quantity, format_ingredient,
    list_recipes, load_recipe, fetch_recipe_text,
)
from utils.sanitizer import sanitize_url

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(level=app.config['LOG_LEVEL'], format=app.config['LOG_FORMAT'])
logger = logging.getLogger(__name__)

# Register Jinja filters for quantity display
app.jinja_env.filters['quantity'] = format_quantity
app.jinja_env.filters['ingredient'] = format_ingredient
app.jinja_env.filters['safe_href'] = sanitize_url


def selected_unit_system():
    """Unit system from the ?units= query parameter, else the configured default."""
    default = UnitSystem.from_name(app.config['DEFAULT_UNIT_SYSTEM'])
    return UnitSystem.from_name(request.args.get('units'), default)


def other_unit_system(system):
    if system is UnitSystem.METRIC:
        return UnitSystem.IMPERIAL
    return UnitSystem.METRIC


def quantity_to_dict(quantity):
    if quantity is None:
        return None
    return {
        'kind': type(quantity).__name__.lower(),
        'value': quantity.get(),
        'display': format_quantity(quantity),
    }


def recipe_to_dict(recipe):
    """Serialize a recipe for the JSON API, in the recipe's own unit system."""
    return {
        'title': recipe.title,
        'image': {'href': recipe.image.href} if recipe.image else None,
        'introduction': recipe.introduction,
        'units': recipe.system.value,
        'ingredients': [
            {
                'name': ingredient.name,
                'quantity': quantity_to_dict(ingredient.quantity),
                'display': format_ingredient(ingredient),
            }
            for ingredient in recipe.ingredients
        ],
        'steps': [step.body for step in recipe.steps],
    }


def toggle_url(system):
    """Current page's URL with the unit system switched."""
    args = request.args.to_dict()
    args.update(request.view_args or {})
    args['units'] = system.value
    return url_for(request.endpoint, **args)


def render_recipe(recipe, system, source=None):
    other = other_unit_system(system)
    return render_template(
        'recipe_view.html',
        recipe=recipe.as_system(system),
        system=system,
        other_system=other,
        toggle_url=toggle_url(other),
        source=source,
    )


def render_error(error, status):
    return render_template('error.html', error=str(error)), status


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    name = app.config['DEFAULT_RECIPE']
    try:
        recipe = load_recipe(name, app.config)
    except RecipeNotFound:
        logger.warning("Default recipe %s not found, showing list", name)
        return render_template('recipes.html', recipes=list_recipes(app.config['RECIPES_FOLDER']))
    except (RecipeError, MeasurementError) as e:
        logger.warning("Default recipe %s failed to load: %s", name, e)
        return render_error(e, 422)
    return render_recipe(recipe, selected_unit_system(), source=name)


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/list')
def recipes_list():
    recipes = list_recipes(app.config['RECIPES_FOLDER'])
    return render_template('recipes.html', recipes=recipes)


@app.route('/recipe/<name>')
def recipe_view(name):
    try:
        recipe = load_recipe(name, app.config)
    except RecipeNotFound as e:
        return render_error(e, 404)
    except (RecipeError, MeasurementError) as e:
        logger.warning("Recipe %s failed to load: %s", name, e)
        return render_error(e, 422)
    return render_recipe(recipe, selected_unit_system(), source=name)


@app.route('/recipe/import')
def recipe_import():
    url = request.args.get('url', '').strip()
    if not url:
        return render_template('recipe_import.html')

    try:
        text = fetch_recipe_text(
            url,
            timeout=app.config['FETCH_TIMEOUT'],
            max_size=app.config['MAX_RECIPE_SIZE'],
        )
        recipe = parse_recipe(text)
    except RecipeNotFound as e:
        return render_template('recipe_import.html', url=url, error=str(e)), 404
    except (RecipeError, MeasurementError) as e:
        logger.warning("Import of %s failed: %s", url, e)
        return render_template('recipe_import.html', url=url, error=str(e)), 422
    return render_recipe(recipe, selected_unit_system(), source=url)


# ============================================
# ROUTES - API
# ============================================

@app.route('/api/recipes')
def api_recipes():
    names = list_recipes(app.config['RECIPES_FOLDER'])
    return jsonify([{'name': name, 'url': url_for('api_recipe', name=name)} for name in names])


@app.route('/api/recipe/<name>')
def api_recipe(name):
    try:
        recipe = load_recipe(name, app.config)
    except RecipeNotFound as e:
        return jsonify({'error': str(e)}), 404
    except (RecipeError, MeasurementError) as e:
        return jsonify({'error': str(e)}), 422
    return jsonify(recipe_to_dict(recipe.as_system(selected_unit_system())))


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), port=int(os.environ.get('PORT', '5000')))
