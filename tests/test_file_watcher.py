import threading
import time
from datetime import timedelta

import pytest

from betbot.file_watcher import FileWatcher

LONG_DELAY = 3600


def test_check_reports_every_entry(tmp_path):
    (tmp_path / "a.json").write_text("{}")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.json").write_text("{}")
    seen = []
    with FileWatcher(tmp_path, LONG_DELAY, seen.append) as watcher:
        watcher.check()
    assert set(seen) == {tmp_path / "a.json", tmp_path / "sub", tmp_path / "sub" / "b.json"}


def test_check_reports_files_again_until_removed(tmp_path):
    target = tmp_path / "match.json"
    target.write_text("{}")
    seen = []
    with FileWatcher(tmp_path, LONG_DELAY, seen.append) as watcher:
        watcher.check()
        watcher.check()
        target.unlink()
        watcher.check()
    assert seen == [target, target]


def test_background_checks_call_callback(tmp_path):
    target = tmp_path / "result.json"
    target.write_text("{}")
    found = threading.Event()
    received = []

    def on_file(path):
        received.append(path)
        path.unlink()
        found.set()

    with FileWatcher(tmp_path, 0.05, on_file):
        assert found.wait(5)
    assert received == [target]
    assert not target.exists()


def test_timedelta_delay(tmp_path):
    (tmp_path / "x.json").write_text("{}")
    found = threading.Event()
    with FileWatcher(tmp_path, timedelta(milliseconds=50), lambda path: found.set()) as watcher:
        assert found.wait(5)
    assert watcher.delay == pytest.approx(0.05)


def test_stop_does_not_wait_for_delay(tmp_path):
    calls = []
    start = time.monotonic()
    with FileWatcher(tmp_path, LONG_DELAY, calls.append):
        pass
    assert time.monotonic() - start < 5
    assert calls == []


def test_check_missing_folder(tmp_path):
    with FileWatcher(tmp_path / "missing", LONG_DELAY, lambda path: None) as watcher:
        with pytest.raises(NotADirectoryError):
            watcher.check()