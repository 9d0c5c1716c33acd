from tracking import t

import json

from botapp.state.subscriber_store import SubscriberStore
from tests.helpers import DummyLogger


def test_add_and_remove_persist_between_instances(tmp_path):
    t('tests.unit.test_subscriber_store.test_add_and_remove_persist_between_instances')
    path = tmp_path / "nested" / "subscribers.json"
    store = SubscriberStore(str(path), logger=DummyLogger())

    assert store.add(42) is True
    assert store.add(7) is True
    assert store.add(42) is False
    assert json.loads(path.read_text()) == [7, 42]

    reloaded = SubscriberStore(str(path), logger=DummyLogger())
    assert reloaded.all() == [7, 42]
    assert reloaded.contains(7)

    assert reloaded.remove(7) is True
    assert reloaded.remove(7) is False
    assert SubscriberStore(str(path)).all() == [42]


def test_missing_file_starts_empty(tmp_path):
    t('tests.unit.test_subscriber_store.test_missing_file_starts_empty')
    store = SubscriberStore(str(tmp_path / "absent.json"), logger=DummyLogger())

    assert store.all() == []
    assert not store.contains(1)


def test_corrupt_file_is_tolerated(tmp_path):
    t('tests.unit.test_subscriber_store.test_corrupt_file_is_tolerated')
    path = tmp_path / "subscribers.json"
    path.write_text("{not json")
    logger = DummyLogger()

    store = SubscriberStore(str(path), logger=logger)

    assert store.all() == []
    assert logger.last("error") is not None


def test_wrong_shape_and_bad_ids_are_skipped(tmp_path):
    t('tests.unit.test_subscriber_store.test_wrong_shape_and_bad_ids_are_skipped')
    path = tmp_path / "subscribers.json"
    path.write_text(json.dumps({"chat_ids": [1]}))
    assert SubscriberStore(str(path), logger=DummyLogger()).all() == []

    path.write_text(json.dumps([5, "6", "seven", None]))
    assert SubscriberStore(str(path), logger=DummyLogger()).all() == [5, 6]
