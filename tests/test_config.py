import pytest

from lightsgame.config import GameConfig
from lightsgame.session import GameSession
from lightsgame.storage import YamlBestStore


def test_defaults():
    config = GameConfig()
    assert config.size == 3
    assert config.sizes == (3, 4, 5, 6, 7)
    assert config.shuffle_presses(3) == 27
    assert config.shuffle_presses(7) == 147
    assert config.tick_interval == pytest.approx(0.1)
    assert not config.auto_hint
    assert config.persist_best


def test_load_yaml(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "game:\n  size: 5\n  shuffle_factor: 2\n  auto_hint: true\n  seed: 9\n",
        encoding="utf-8",
    )
    config = GameConfig.load(path)
    assert config.size == 5
    assert config.shuffle_presses(5) == 50
    assert config.auto_hint
    assert config.seed == 9


def test_load_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("", encoding="utf-8")
    assert GameConfig.load(path).size == 3


def test_zero_tick_interval_disables_timer():
    assert GameConfig(tick_interval=0).tick_interval is None


@pytest.mark.parametrize(
    "cfg",
    [
        {"colour": "blue"},
        {"size": 9},
        {"sizes": []},
        {"sizes": [0, 3]},
        {"shuffle_factor": -1},
        {"shuffle_factor": 0},
        {"tick_interval": -0.5},
    ],
)
def test_invalid_config(cfg):
    with pytest.raises(ValueError):
        GameConfig.from_dict(cfg)


def test_best_store_path_selects_yaml_store(tmp_path):
    config = GameConfig.from_dict(
        {"best_store": str(tmp_path / "best.yaml"), "tick_interval": 0}
    )
    session = GameSession(config)
    assert isinstance(session.store, YamlBestStore)
