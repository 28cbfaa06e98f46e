import pytest
import yaml

from lightsgame.storage import MemoryBestStore, YamlBestStore


def test_missing_record_is_none():
    store = MemoryBestStore()
    assert store.load_best(3, "moves") is None
    assert store.load_best(3, "time") is None


def test_unknown_kind_rejected():
    store = MemoryBestStore()
    with pytest.raises(ValueError):
        store.load_best(3, "score")
    with pytest.raises(ValueError):
        store.persist_best(3, "score", 1)


def test_memory_store_keys_by_size():
    store = MemoryBestStore()
    store.persist_best(3, "moves", 7)
    store.persist_best(4, "time", 12.5)
    assert store.load_best(3, "moves") == 7
    assert store.load_best(4, "moves") is None
    assert store.load_best(4, "time") == 12.5


def test_yaml_store_missing_file(tmp_path):
    store = YamlBestStore(tmp_path / "best.yaml")
    assert store.load_best(5, "moves") is None
    assert not (tmp_path / "best.yaml").exists()


def test_yaml_store_survives_reload(tmp_path):
    path = tmp_path / "nested" / "best.yaml"
    store = YamlBestStore(path)
    store.persist_best(5, "moves", 14)
    store.persist_best(5, "time", 31.2)

    reloaded = YamlBestStore(path)
    assert reloaded.load_best(5, "moves") == 14
    assert reloaded.load_best(5, "time") == pytest.approx(31.2)
    with open(path, "r", encoding="utf-8") as f:
        assert yaml.safe_load(f) == {5: {"moves": 14, "time": 31.2}}


def test_yaml_store_empty_file(tmp_path):
    path = tmp_path / "best.yaml"
    path.write_text("", encoding="utf-8")
    assert YamlBestStore(path).load_best(3, "moves") is None


def test_yaml_store_malformed(tmp_path):
    path = tmp_path / "best.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        YamlBestStore(path)
