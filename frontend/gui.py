#!/usr/bin/env python3
"""
Calculator GUI

Tkinter window for the four-function calculator:
- Read-only display entry on top, 4x5 keypad grid below (0 spans two columns).
- Dark theme; buttons colored by their style class (digit / operator / clear / equals).
- Keyboard input: 0-9, '.', + - * /, %, Enter or '=' to compute, Esc to clear.

All clicks and key presses go through backend.keypad.press() against the one
CalculatorState owned by the window; the returned text is written to the display.
"""

import logging
import tkinter as tk
from typing import Dict

from backend.engine import CalculatorState
from backend.keypad import KEYPAD, key_for_event, press


logger = logging.getLogger("fredulator.gui")


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_TITLE = "Fredulator"
WINDOW_WIDTH = 300
WINDOW_HEIGHT = 400

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # grid / container background
FG = "#E6EEF3"          # foreground text (light)
GAP = 5                 # spacing between tiles, px

# style class -> (background, active background)
BUTTON_COLORS = {
    "digit-button": ("#2b2d30", "#3a3d41"),
    "op-button": ("#44484C", "#55595e"),
    "clear-button": ("#a33a3a", "#bf4a4a"),
    "equals-button": ("#d9822b", "#e8953f"),
}

DISPLAY_FONT = ("Consolas", 24)
BUTTON_FONT = ("Segoe UI", 14)


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self):
        super().__init__()

        # Window setup
        self.title(WINDOW_TITLE)
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.resizable(True, True)
        self.configure(bg=BG)

        # The single calculator state every handler reads and mutates
        self.calc = CalculatorState()
        self.buttons: Dict[str, tk.Button] = {}

        self._build_display()
        self._build_keypad()

        # Keyboard input goes through the same dispatch as the buttons
        self.bind("<Key>", self._on_key)

    # -------------------------
    # Display
    # -------------------------
    def _build_display(self):
        """Read-only entry showing the buffer or the last value."""
        self.display_var = tk.StringVar(value="0")
        self.display = tk.Entry(self, textvariable=self.display_var, state="readonly",
                                readonlybackground=BG, fg=FG, relief="flat",
                                justify="right", font=DISPLAY_FONT)
        self.display.pack(fill="x", padx=GAP, pady=(GAP, 0), ipady=10)

    # -------------------------
    # Keypad grid
    # -------------------------
    def _build_keypad(self):
        """Lay out KEYPAD on a homogeneous grid; every tile expands to fill its cell."""
        grid = tk.Frame(self, bg=PANEL_BG)
        grid.pack(fill="both", expand=True, padx=GAP, pady=GAP)

        rows = 0
        columns = 0
        for key in KEYPAD:
            bg, active_bg = BUTTON_COLORS[key.style]
            btn = tk.Button(grid, text=key.label, bg=bg, fg=FG, activebackground=active_bg,
                            activeforeground=FG, relief="flat", font=BUTTON_FONT,
                            command=lambda l=key.label: self.on_press(l))
            btn.grid(row=key.row, column=key.column, columnspan=key.span, sticky="nsew",
                     padx=GAP // 2, pady=GAP // 2)
            self.buttons[key.label] = btn
            rows = max(rows, key.row + 1)
            columns = max(columns, key.column + key.span)

        # equal weights + uniform groups keep the tiles the same size
        for r in range(rows):
            grid.grid_rowconfigure(r, weight=1, uniform="row")
        for c in range(columns):
            grid.grid_columnconfigure(c, weight=1, uniform="col")

    # -------------------------
    # Event handling
    # -------------------------
    def on_press(self, label: str):
        """Apply one keypad event and show the resulting text."""
        logger.info("pressed %s", label)
        text = press(self.calc, label)
        self.display_var.set(text)

    def _on_key(self, event):
        label = key_for_event(event.char, event.keysym)
        if label is None:
            return None
        self.on_press(label)
        return "break"


# -------------------------
# Run the application
# -------------------------
def main():
    app = CalculatorGUI()
    logger.info("started")
    app.mainloop()
    logger.info("closed")


if __name__ == "__main__":
    main()
