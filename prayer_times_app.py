#!/usr/bin/env python3
"""
Prayer Times Desktop Widget
Always-on-top window for the fixed location showing:
  - Location, Gregorian date and Hijri date
  - The six daily prayer times with the next prayer highlighted
  - Countdown to the next prayer
  - Desktop notification when a prayer time arrives
  - Daily rotating ayah / hadith message
  - Arabic / English / French labels
"""

import logging
import os
import tkinter as tk

from prayer_engine.config import SUPPORTED_LANGUAGES, load_settings, save_settings
from prayer_engine.display import StableNextPrayer
from prayer_engine.i18n import t
from prayer_engine.messages import message_type_label
from prayer_engine.notifier import ArrivalNotifier
from prayer_engine.selector import CURRENT, PASSED

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Theme constants
# ──────────────────────────────────────────────────────────────────────────────
BG_DARK = "#0d1117"          # near-black background
BG_CARD = "#161b22"          # slightly lighter card
BG_HIGHLIGHT = "#1a3a2a"     # deep green for the next prayer
BORDER_COLOR = "#2ea043"
ACCENT_GOLD = "#f0c040"
ACCENT_GREEN = "#3fb950"
TEXT_WHITE = "#e6edf3"
TEXT_DIM = "#8b949e"
TEXT_RED = "#ff6b6b"

FONT_SMALL = ("Courier", 9)
FONT_ROW = ("Arial", 12, "bold")
FONT_TITLE = ("Arial", 13, "bold")
FONT_CLOCK = ("Courier", 22, "bold")

WINDOW_W = 420
WINDOW_H = 580

PRAYER_ICONS = {
    "fajr": "🌙",
    "sunrise": "🌅",
    "dhuhr": "☀️",
    "asr": "⛅",
    "maghrib": "🌇",
    "isha": "✨",
}


class PrayerTimesWidget:
    def __init__(self, root: tk.Tk, adapter: StableNextPrayer | None = None):
        self.root = root
        self._drag_x = 0
        self._drag_y = 0
        self.settings = load_settings()
        self.adapter = adapter or StableNextPrayer(language=self.settings["language"])
        self.rows = {}

        self._setup_window()
        self._build_ui()

        self.adapter.subscribe(self._on_state)
        self.adapter.subscribe(ArrivalNotifier(lambda: self.adapter.language, self._on_notification))
        self.root.bind("<Destroy>", self._on_destroy)
        self.adapter.attach(self.root)

    # ──────────────────────────────────────────────────────────────────────
    # Window setup
    # ──────────────────────────────────────────────────────────────────────
    def _setup_window(self):
        root = self.root
        root.title(t("prayer_times", self.adapter.language))
        root.configure(bg=BG_DARK)
        root.resizable(False, False)
        root.overrideredirect(True)
        root.attributes("-topmost", True)

        x = root.winfo_screenwidth() - WINDOW_W - 40
        y = (root.winfo_screenheight() - WINDOW_H) // 2
        root.geometry(f"{WINDOW_W}x{WINDOW_H}+{x}+{y}")

        root.bind("<ButtonPress-1>", self._on_drag_start)
        root.bind("<B1-Motion>", self._on_drag_motion)

    def _on_drag_start(self, event):
        self._drag_x = event.x_root - self.root.winfo_x()
        self._drag_y = event.y_root - self.root.winfo_y()

    def _on_drag_motion(self, event):
        self.root.geometry(f"+{event.x_root - self._drag_x}+{event.y_root - self._drag_y}")

    # ──────────────────────────────────────────────────────────────────────
    # UI construction
    # ──────────────────────────────────────────────────────────────────────
    def _build_ui(self):
        outer = tk.Frame(self.root, bg=BORDER_COLOR, bd=0)
        outer.pack(fill=tk.BOTH, expand=True, padx=2, pady=2)
        inner = tk.Frame(outer, bg=BG_DARK, bd=0)
        inner.pack(fill=tk.BOTH, expand=True, padx=1, pady=1)

        title_bar = tk.Frame(inner, bg=BG_CARD, height=32)
        title_bar.pack(fill=tk.X, side=tk.TOP)
        title_bar.pack_propagate(False)

        self.lbl_title = tk.Label(title_bar, font=FONT_TITLE, fg=ACCENT_GOLD, bg=BG_CARD)
        self.lbl_title.pack(side=tk.LEFT, padx=8)

        tk.Button(
            title_bar, text=" ✕ ", font=FONT_SMALL, fg=TEXT_RED, bg=BG_CARD,
            activebackground="#3a1a1a", bd=0, cursor="hand2", command=self.root.destroy,
        ).pack(side=tk.RIGHT, padx=4, pady=4)

        self.btn_language = tk.Button(
            title_bar, font=FONT_SMALL, fg=TEXT_DIM, bg=BG_CARD,
            activebackground="#1a1a3a", bd=0, cursor="hand2", command=self._cycle_language,
        )
        self.btn_language.pack(side=tk.RIGHT, padx=4, pady=4)

        self.lbl_location = tk.Label(inner, font=FONT_SMALL, fg=ACCENT_GREEN, bg=BG_DARK)
        self.lbl_location.pack(pady=(8, 0))
        self.lbl_date = tk.Label(inner, font=FONT_SMALL, fg=TEXT_WHITE, bg=BG_DARK)
        self.lbl_date.pack()
        self.lbl_hijri = tk.Label(inner, font=FONT_SMALL, fg=ACCENT_GOLD, bg=BG_DARK)
        self.lbl_hijri.pack()

        self.lbl_next_name = tk.Label(inner, font=FONT_TITLE, fg=ACCENT_GREEN, bg=BG_DARK)
        self.lbl_next_name.pack(pady=(10, 0))
        self.lbl_countdown = tk.Label(inner, text="--:--:--", font=FONT_CLOCK, fg=ACCENT_GOLD, bg=BG_DARK)
        self.lbl_countdown.pack()

        self.prayer_frame = tk.Frame(inner, bg=BG_CARD, padx=8, pady=6)
        self.prayer_frame.pack(fill=tk.BOTH, expand=True, padx=12, pady=10)

        self.lbl_empty = tk.Label(self.prayer_frame, font=FONT_SMALL, fg=TEXT_DIM, bg=BG_CARD, wraplength=340)

        message_frame = tk.Frame(inner, bg=BG_CARD, padx=8, pady=6)
        message_frame.pack(fill=tk.X, padx=12, pady=(0, 8))
        self.lbl_message_type = tk.Label(message_frame, font=FONT_SMALL, fg=ACCENT_GOLD, bg=BG_CARD)
        self.lbl_message_type.pack()
        self.lbl_message_text = tk.Label(message_frame, font=FONT_ROW, fg=TEXT_WHITE, bg=BG_CARD, wraplength=360)
        self.lbl_message_text.pack()
        self.lbl_message_source = tk.Label(message_frame, font=FONT_SMALL, fg=TEXT_DIM, bg=BG_CARD)
        self.lbl_message_source.pack()

        self.lbl_notif = tk.Label(inner, font=FONT_SMALL, fg=ACCENT_GOLD, bg=BG_HIGHLIGHT)

        self._build_prayer_rows()

    def _build_prayer_rows(self):
        for name, icon in PRAYER_ICONS.items():
            row = tk.Frame(self.prayer_frame, bg=BG_CARD, pady=2)
            lbl_name = tk.Label(row, font=FONT_ROW, fg=TEXT_WHITE, bg=BG_CARD, anchor="w", width=18)
            lbl_name.pack(side=tk.LEFT, padx=4)
            lbl_time = tk.Label(row, text="--:--", font=FONT_ROW, fg=TEXT_WHITE, bg=BG_CARD, anchor="e", width=10)
            lbl_time.pack(side=tk.RIGHT, padx=4)
            self.rows[name] = {"row": row, "lbl_name": lbl_name, "lbl_time": lbl_time, "icon": icon}

    # ──────────────────────────────────────────────────────────────────────
    # Rendering
    # ──────────────────────────────────────────────────────────────────────
    def _on_state(self, state, changed):
        language = self.adapter.language
        labels = self.adapter.date_labels()
        self.lbl_title.config(text=f"🕌  {t('prayer_times', language)}")
        self.btn_language.config(text=f" {language.upper()} ")
        self.lbl_location.config(text=f"📍 {labels['location']}")
        self.lbl_date.config(text=f"📅 {labels['gregorian']}")
        self.lbl_hijri.config(text=f"☪  {labels['hijri']}")

        message = self.adapter.message()
        self.lbl_message_type.config(text=message_type_label(message, language))
        self.lbl_message_text.config(text=message["text"])
        self.lbl_message_source.config(text=message["source"])

        rows = self.adapter.display_times()
        if not state or not rows:
            self._render_empty(language)
            return

        self.lbl_empty.pack_forget()
        self.lbl_next_name.config(text=f"{t('next_prayer', language)}: {state.event.display_name}")
        self.lbl_countdown.config(text=f"{t('in', language)} {state.remaining}")

        status = self.adapter.status()
        for item in rows:
            widgets = self.rows[item["name"]]
            if item["is_next"]:
                bg, fg = BG_HIGHLIGHT, ACCENT_GOLD
            elif status.get(item["name"]) == PASSED:
                bg, fg = BG_CARD, TEXT_DIM
            elif status.get(item["name"]) == CURRENT:
                bg, fg = BG_CARD, ACCENT_GREEN
            else:
                bg, fg = BG_CARD, TEXT_WHITE
            widgets["row"].config(bg=bg)
            widgets["row"].pack(fill=tk.X, pady=1)
            widgets["lbl_name"].config(text=f" {widgets['icon']}  {item['label']}", bg=bg, fg=fg)
            widgets["lbl_time"].config(text=item["time"], bg=bg, fg=fg)

    def _render_empty(self, language):
        for widgets in self.rows.values():
            widgets["row"].pack_forget()
        self.lbl_next_name.config(text="")
        self.lbl_countdown.config(text="")
        self.lbl_empty.config(text=t("not_available", language))
        self.lbl_empty.pack(pady=20)

    def _on_notification(self, title: str, message: str):
        self.lbl_notif.config(text=f"{title}  {message}")
        self.lbl_notif.pack(fill=tk.X, padx=12, pady=4)
        self.root.bell()
        self.root.after(15000, self.lbl_notif.pack_forget)

    def _cycle_language(self):
        index = SUPPORTED_LANGUAGES.index(self.adapter.language)
        language = SUPPORTED_LANGUAGES[(index + 1) % len(SUPPORTED_LANGUAGES)]
        self.adapter.set_language(language)
        self.settings["language"] = language
        try:
            save_settings(self.settings)
        except OSError:
            logger.warning("Could not save language preference", exc_info=True)
        self._on_state(self.adapter.state, False)

    def _on_destroy(self, event):
        if event.widget is self.root:
            self.adapter.close()


# ──────────────────────────────────────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────────────────────────────────────
def main():
    logging.basicConfig(
        level=os.environ.get("PRAYER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = tk.Tk()
    PrayerTimesWidget(root)
    root.mainloop()


if __name__ == "__main__":
    main()
