import pytest

from simply.runtime.settings import RunSettings

from unit_utils import find_file


def test_defaults():
    settings = RunSettings()
    assert settings.verbose is False
    assert settings.max_steps is None


def test_update_ignores_none():
    settings = RunSettings().update(verbose=True, max_steps=5)
    settings.update(verbose=None, max_steps=None)
    assert settings.verbose is True
    assert settings.max_steps == 5


def test_update_rejects_non_positive():
    with pytest.raises(ValueError):
        RunSettings().update(max_steps=0)


def test_load():
    settings = RunSettings().load(find_file('testdata/limits.toml'))
    assert settings.max_steps == 50
    assert settings.verbose is False


def test_load_without_table(tmp_path):
    config = tmp_path / 'other.toml'
    config.write_text('[other]\nmax_steps = 3\n')
    assert RunSettings().load(config).max_steps is None


@pytest.mark.parametrize('params', [
    {'max_steps': '10'},
    {'max_steps': True},
    {'max_steps': 2.5},
    {'verbose': 'yes'},
    {'verbose': 1},
])
def test_update_rejects_wrong_types(params):
    with pytest.raises(ValueError):
        RunSettings().update(**params)


def test_load_rejects_wrong_types(tmp_path):
    config = tmp_path / 'typed.toml'
    config.write_text('[simply]\nverbose = "true"\n')

    with pytest.raises(ValueError):
        RunSettings().load(config)
