import pytest

TEA = "Tea\n\n---ingredients\n1 cup water\n1 tsp loose leaf tea\n\n---steps\nBoil the water.\n\nSteep the tea.\n"

BROKEN = "Broken\n\n---ingredients\n1 cup water\n\nBoil it.\n"


@pytest.fixture
def recipes_folder(tmp_path):
    """A recipes folder with one good and one malformed document."""
    (tmp_path / 'tea.txt').write_text(TEA, encoding='utf-8')
    (tmp_path / 'broken.txt').write_text(BROKEN, encoding='utf-8')
    (tmp_path / 'notes.md').write_text('not a recipe', encoding='utf-8')
    return tmp_path


@pytest.fixture
def client(recipes_folder):
    from app import app
    app.config.update(
        TESTING=True,
        RECIPES_FOLDER=str(recipes_folder),
        RECIPES_BASE_URL='',
        DEFAULT_RECIPE='tea',
        DEFAULT_UNIT_SYSTEM='metric',
    )
    with app.test_client() as client:
        yield client
