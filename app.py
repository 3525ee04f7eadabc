# app.py
# CustomTkinter GUI for the Concordance project (dark theme).
# - Load the bundled declaration, or every .txt under a chosen folder.
# - Search with debounce; results & event log panes.
# Install with the "gui" extra: pip install -e .[gui]

from __future__ import annotations
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from concordance import Engine
from concordance import config as CFG


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def source_label(path: Optional[str]) -> str:
    """Label for the loaded corpus; None means the bundled declaration."""
    if path is None:
        return "Universal Declaration of Human Rights"
    return f"Folder: {shorten_path(path)}"


# -------------------- main app --------------------

class ConcordanceApp(ctk.CTk):
    """Dark-themed GUI that loads a corpus and runs word queries against its concordance."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Concordance")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._search_after_id: Optional[str] = None
        self._current_root_label: str = "No source selected"

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Concordance", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(3, weight=1)

        btn_folder = ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder)
        btn_folder.grid(row=0, column=0, padx=(12, 6), pady=10)

        btn_bundled = ctk.CTkButton(bar, text="Use Declaration", command=self._load_bundled)
        btn_bundled.grid(row=0, column=1, padx=(0, 6), pady=10)

        # Text unit for folder loads
        self.opt_unit = ctk.CTkOptionMenu(bar, values=list(CFG.TEXT_UNITS), width=110)
        self.opt_unit.set(CFG.TEXT_UNIT)
        self.opt_unit.grid(row=0, column=2, padx=(0, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text=self._current_root_label, anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=3, sticky="ew", padx=(6, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: -", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Words to search:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        self.entry_query = ctk.CTkEntry(box, placeholder_text="e.g. human free enjoy")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Matching sentences", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet; load a corpus and type some words)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a folder or use the bundled declaration.")

    # --------- source selection ---------

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if not path:
            return
        try:
            corpus = self._engine.load_roots([path], unit=self.opt_unit.get())
        except (OSError, ValueError) as exc:
            self._set_status("Error while loading corpus.")
            self._log(f"ERROR: {exc!r}")
            mb.showerror("Load error", "Failed to load corpus.\nSee event log for details.")
            return
        self._current_root_label = source_label(path)
        self._on_loaded(len(corpus), len(corpus.concordance))

    def _load_bundled(self) -> None:
        corpus = self._engine.load()
        self._current_root_label = source_label(None)
        self._on_loaded(len(corpus), len(corpus.concordance))

    def _on_loaded(self, n_sentences: int, n_words: int) -> None:
        self.lbl_source.configure(text=self._current_root_label)
        self._set_status(f"Loaded {n_sentences:,} sentences.")
        self._log(f"Concordance ready ({n_sentences} sentences, {n_words} words).")
        self.entry_query.focus_set()
        self._do_search()

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        words = self.entry_query.get().split()
        if not words:
            self._set_results("")
            return
        if self._engine.corpus is None:
            self._set_results("error: please load a corpus before searching.")
            self._log("Search attempted before corpus load.")
            return

        results = self._engine.search(words)
        if not results:
            missing = [w for w in words if not self._engine.lookup(w)]
            if missing:
                self._set_results(f"(no matches: not in concordance: {', '.join(missing)})")
            else:
                self._set_results("(no matches)")
            return

        lines = [f"{i:>3}. {s}" for i, s in enumerate(results, 1)]
        self._set_results("\n".join(lines))

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = ConcordanceApp()
    app.mainloop()
