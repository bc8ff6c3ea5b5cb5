"""
Tests for the web front end.
"""

import services.loading as loading


def test_home_shows_default_recipe(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'<h1>Tea</h1>' in response.data
    assert b'236 ml water' in response.data


def test_list(client):
    response = client.get('/list')
    assert response.status_code == 200
    assert b'/recipe/tea' in response.data
    assert b'/recipe/broken' in response.data


def test_recipe_metric_and_imperial(client):
    metric = client.get('/recipe/tea')
    assert metric.status_code == 200
    assert b'236 ml water' in metric.data
    assert b'units=imperial' in metric.data

    imperial = client.get('/recipe/tea?units=imperial')
    assert imperial.status_code == 200
    assert b'1.0 cups water' in imperial.data
    assert b'1 tsp loose leaf tea' in imperial.data
    assert b'units=metric' in imperial.data


def test_unknown_units_fall_back_to_default(client):
    response = client.get('/recipe/tea?units=cubits')
    assert b'236 ml water' in response.data


def test_unknown_recipe_is_404(client):
    response = client.get('/recipe/missing')
    assert response.status_code == 404


def test_malformed_recipe_is_422(client):
    response = client.get('/recipe/broken')
    assert response.status_code == 422
    assert b'---steps' in response.data


def test_api_recipe(client):
    response = client.get('/api/recipe/tea?units=imperial')
    assert response.status_code == 200
    data = response.get_json()
    assert data['title'] == 'Tea'
    assert data['units'] == 'imperial'
    assert data['image'] is None
    assert data['ingredients'][0] == {
        'name': 'water',
        'quantity': {'kind': 'volume', 'value': 236588, 'display': '1.0 cups'},
        'display': '1.0 cups water',
    }
    assert data['steps'] == ['Boil the water.', 'Steep the tea.']


def test_api_errors(client):
    assert client.get('/api/recipe/missing').status_code == 404
    response = client.get('/api/recipe/broken')
    assert response.status_code == 422
    assert 'error' in response.get_json()


def test_api_recipes(client):
    data = client.get('/api/recipes').get_json()
    assert [item['name'] for item in data] == ['broken', 'tea']


def test_import_form(client):
    response = client.get('/recipe/import')
    assert response.status_code == 200
    assert b'<form' in response.data


def test_import_renders_fetched_recipe(client, monkeypatch):
    def fake_fetch(url, **kwargs):
        assert kwargs['validate'] is True
        return "Soup\n\n---ingredients\n1 l stock\n\n---steps\nHeat it.\n"

    monkeypatch.setattr(loading, 'safe_fetch', fake_fetch)
    response = client.get('/recipe/import?url=https://recipes.example.com/soup.txt')
    assert response.status_code == 200
    assert b'<h1>Soup</h1>' in response.data
    assert b'1.0 l stock' in response.data


def test_import_blocked_url(client):
    response = client.get('/recipe/import?url=http://127.0.0.1/soup.txt')
    assert response.status_code == 422
    assert b'blocked' in response.data
