# src/e2e/test_app_source_label.py

from pathlib import Path
import pytest

pytest.importorskip("tkinter")
pytest.importorskip("customtkinter")

import app as gui
from concordance import Engine


class FakeWindow:
    """
    Stand-in for ConcordanceApp carrying only what _choose_folder/_load_bundled touch,
    so the label handling runs without a display.
    """
    def __init__(self):
        self._engine = Engine()
        self._current_root_label = "No source selected"
        self.statuses, self.logs, self.loaded = [], [], []

        class _Unit:
            def get(self):
                return "line"
        self.opt_unit = _Unit()

    def _set_status(self, text):
        self.statuses.append(text)

    def _log(self, msg):
        self.logs.append(msg)

    def _on_loaded(self, n_sentences, n_words):
        self.loaded.append((self._current_root_label, n_sentences))


@pytest.fixture(autouse=True)
def no_dialogs(monkeypatch):
    monkeypatch.setattr(gui.mb, "showerror", lambda *a, **kw: None)


def _choose(monkeypatch, win, path):
    monkeypatch.setattr(gui.fd, "askdirectory", lambda **kw: path)
    gui.ConcordanceApp._choose_folder(win)


def test_label_survives_failed_folder_load(monkeypatch, tmp_path: Path):
    win = FakeWindow()
    gui.ConcordanceApp._load_bundled(win)
    assert win._current_root_label == gui.source_label(None)

    _choose(monkeypatch, win, str(tmp_path / "missing"))
    assert win._current_root_label == gui.source_label(None)
    assert win.statuses == ["Error while loading corpus."]
    assert len(win.loaded) == 1


def test_label_set_after_successful_folder_load(monkeypatch, tmp_path: Path):
    (tmp_path / "a.txt").write_text("one\ntwo\n", encoding="utf-8")
    win = FakeWindow()
    _choose(monkeypatch, win, str(tmp_path))
    assert win.loaded == [(f"Folder: {gui.shorten_path(str(tmp_path))}", 2)]


def test_shorten_path_keeps_both_ends():
    p = "/very/long/" + "x" * 100 + "/corpus"
    short = gui.shorten_path(p)
    assert len(short) < len(p)
    assert short.startswith("/very") and short.endswith("corpus") and "..." in short
