"""
GUI for Kiddy Calc
Tkinter-based single screen with big, colourful buttons
"""
import tkinter as tk
import tkinter.font as tkfont

from PIL import Image, ImageDraw, ImageTk

import config
from calculator import Calculator


def display_font_size(text):
    """Shrink the display font as the equation grows so it stays on one line"""
    base = config.DISPLAY_FONT[1]
    if len(text) <= 8:
        return base
    size = int(base * 8 / len(text))
    return max(size, config.DISPLAY_FONT_MIN)


def build_app_icon(size=64):
    """Draw the window icon: a pink bubble with a plus sign"""
    P = config.PALETTE
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse((2, 2, size - 3, size - 3), fill=P["equals"], outline=P["title_fg"], width=3)
    bar = max(size // 10, 2)
    mid = size // 2
    arm = size // 4
    draw.rectangle((mid - arm, mid - bar, mid + arm, mid + bar), fill=P["important_fg"])
    draw.rectangle((mid - bar, mid - arm, mid + bar, mid + arm), fill=P["important_fg"])
    return img


class KiddyCalcGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")
        self.P = config.PALETTE
        self.root.configure(bg=self.P["bg"])

        self.calculator = Calculator()
        self.buttons = {}
        self.emoji_labels = {}

        self._icon = ImageTk.PhotoImage(build_app_icon(), master=self.root)
        self.root.iconphoto(True, self._icon)

        self.create_widgets()
        self.update_display(self.calculator.get_equation())

    def _kid_btn(self, parent, label, color, emoji=None, important=False):
        """Create a big flat button cell; the emoji sits small under the label"""
        P = self.P
        cell = tk.Frame(parent, bg=color, bd=0,
                        highlightthickness=2, highlightbackground=P["border"])
        btn = tk.Button(
            cell, text=label,
            command=lambda: self.calculator_button_click(label),
            font=config.BUTTON_FONT,
            bg=color, fg=P["important_fg"] if important else P["btn_fg"],
            activebackground=P["pressed"], activeforeground=P["btn_fg"],
            relief=tk.FLAT, bd=0, cursor="hand2", highlightthickness=0,
        )
        btn.pack(fill=tk.BOTH, expand=True)
        self.buttons[label] = btn

        if emoji:
            tag = tk.Label(cell, text=emoji, font=config.EMOJI_FONT, bg=color, cursor="hand2")
            tag.pack(side=tk.BOTTOM, pady=(0, 4))
            tag.bind("<Button-1>", lambda e: btn.invoke())
            self.emoji_labels[label] = tag
        return cell

    def create_widgets(self):
        """Create title, display and button grid"""
        P = self.P

        self.title_label = tk.Label(
            self.root, text=config.cute_title(),
            font=config.TITLE_FONT, bg=P["bg"], fg=P["title_fg"]
        )
        self.title_label.pack(side=tk.TOP, pady=(12, 6))

        # Display area
        outer = tk.Frame(self.root, bg=P["border"], bd=0)
        outer.pack(fill=tk.X, padx=12, pady=(0, 10))
        self.display_frame = tk.Frame(outer, bg=P["display_bg"], height=90)
        self.display_frame.pack(fill=tk.BOTH, expand=True, padx=2, pady=2)
        self.display_frame.pack_propagate(False)

        self.display_font = tkfont.Font(family=config.DISPLAY_FONT[0],
                                        size=config.DISPLAY_FONT[1],
                                        weight=config.DISPLAY_FONT[2])
        self.display = tk.Label(
            self.display_frame, text="0", font=self.display_font,
            bg=P["display_bg"], fg=P["display_fg"],
            anchor=tk.E, padx=12
        )
        self.display.pack(fill=tk.BOTH, expand=True)

        # Button grid
        grid = tk.Frame(self.root, bg=P["bg"])
        grid.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 10))
        for r, row in enumerate(config.BUTTON_ROWS):
            grid.rowconfigure(r, weight=1)
            for c, (label, color, emoji, important) in enumerate(row):
                grid.columnconfigure(c, weight=1)
                cell = self._kid_btn(grid, label, color, emoji, important)
                cell.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)

        label, color, emoji, important = config.EQUALS_BUTTON
        last = len(config.BUTTON_ROWS)
        grid.rowconfigure(last, weight=1)
        cell = self._kid_btn(grid, label, color, emoji, important)
        cell.grid(row=last, column=0, columnspan=4, sticky="nsew", padx=4, pady=4)

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        self.update_display(self.calculator.press(button))

    def update_display(self, text):
        """Update the display"""
        self.display_font.configure(size=display_font_size(text))
        self.display.config(text=text)
