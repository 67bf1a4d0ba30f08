#!/usr/bin/env python3

import ctypes
import logging
import tkinter as tk
from tkinter import ttk

import pyperclip

from .__about__ import APP_TITLE
from .converter import (
    DEFAULT_WIDTH,
    DIGITS,
    Base,
    ConversionError,
    format_value,
    parse,
)


logger = logging.getLogger(__name__)


def allowed_digits(base: Base) -> str:
    return base.digits


def is_valid_key(char: str, base: Base) -> bool:
    return len(char) == 1 and char.lower() in allowed_digits(base)


def refresh_fields(buffer: str, base: Base, width: int = DEFAULT_WIDTH) -> dict[Base, str]:
    """Parse the entry buffer in the current mode and format it in every base."""
    value = parse(base.prefix + buffer, width)
    return {target: format_value(value, target) for target in Base}


class RadixCalculator:
    def __init__(self, root, width: int = DEFAULT_WIDTH):
        self.root = root
        self.root.title(APP_TITLE)
        self.root.geometry("560x520")
        self.root.resizable(False, False)

        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError):
            pass

        self.width = width
        self.mode = Base.DEC
        self.buffer_var = tk.StringVar()
        self.mode_var = tk.StringVar(value=self.mode.name)
        self.field_vars = {base: tk.StringVar(value="0") for base in Base}
        self.key_buttons: dict[str, ttk.Button] = {}

        self.setup_ui()
        self.update_keypad()

        self.root.bind("<Key>", self.on_key)

    def setup_ui(self):
        style = ttk.Style()
        style.configure('TLabel', font=('Segoe UI', 11))
        style.configure('TButton', font=('Segoe UI', 10))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'))
        style.configure('Field.TEntry', font=('Consolas', 11))

        main_frame = ttk.Frame(self.root, padding=15)
        main_frame.pack(fill=tk.BOTH, expand=True)

        header_frame = ttk.Frame(main_frame)
        header_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Label(header_frame, text=APP_TITLE, style='Title.TLabel').pack(side=tk.LEFT)
        ttk.Label(header_frame, text=f"{self.width}-bit").pack(side=tk.RIGHT)

        entry = ttk.Entry(
            main_frame,
            textvariable=self.buffer_var,
            font=('Consolas', 14),
            justify=tk.RIGHT,
            state='readonly',
        )
        entry.pack(fill=tk.X, pady=(0, 10))

        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(fill=tk.X, pady=(0, 10))

        for base in Base:
            ttk.Radiobutton(
                mode_frame,
                text=base.label,
                value=base.name,
                variable=self.mode_var,
                command=self.on_mode_change,
            ).pack(side=tk.LEFT, padx=(0, 15))

        keypad = ttk.Frame(main_frame)
        keypad.pack(fill=tk.X, pady=(0, 10))

        for index, char in enumerate(DIGITS):
            btn = ttk.Button(keypad, text=char.upper(), width=4, command=lambda c=char: self.press(c))
            btn.grid(row=index // 8, column=index % 8, padx=2, pady=2)
            self.key_buttons[char] = btn

        ttk.Button(keypad, text="⌫", width=4, command=self.backspace).grid(row=2, column=6, padx=2, pady=2)
        ttk.Button(keypad, text="C", width=4, command=self.clear).grid(row=2, column=7, padx=2, pady=2)

        fields_frame = ttk.LabelFrame(main_frame, text="Values", padding=10)
        fields_frame.pack(fill=tk.BOTH, expand=True)

        for row, base in enumerate(Base):
            ttk.Label(fields_frame, text=f"{base.label}:", width=5).grid(row=row, column=0, sticky="w", pady=3)
            ttk.Entry(
                fields_frame,
                textvariable=self.field_vars[base],
                style='Field.TEntry',
                width=40,
                state='readonly',
            ).grid(row=row, column=1, sticky="we", padx=5, pady=3)
            ttk.Button(
                fields_frame,
                text="Copy",
                command=lambda b=base: self.copy_field(b),
            ).grid(row=row, column=2, pady=3)

        fields_frame.grid_columnconfigure(1, weight=1)

        self.status_label = ttk.Label(main_frame, text="Ready", font=('Segoe UI', 9))
        self.status_label.pack(fill=tk.X, pady=(10, 0))

    def update_keypad(self):
        allowed = allowed_digits(self.mode)
        for char, btn in self.key_buttons.items():
            btn.state(['!disabled'] if char in allowed else ['disabled'])

    def on_key(self, event):
        if event.keysym == "BackSpace":
            self.backspace()
        elif event.keysym == "Escape":
            self.clear()
        elif is_valid_key(event.char, self.mode):
            self.press(event.char.lower())

    def press(self, char):
        if not is_valid_key(char, self.mode):
            return
        buffer = self.buffer_var.get()
        if buffer == "0":
            buffer = ""
        self.set_buffer(buffer + char)

    def backspace(self):
        self.set_buffer(self.buffer_var.get()[:-1])

    def clear(self):
        self.set_buffer("")

    def set_buffer(self, buffer):
        try:
            fields = refresh_fields(buffer, self.mode, self.width)
        except ConversionError as e:
            logger.info("rejected %r: %s", buffer, e)
            self.status_label.config(text=str(e))
            return

        self.buffer_var.set(buffer)
        for base, text in fields.items():
            self.field_vars[base].set(text)
        self.status_label.config(text="Ready")

    def on_mode_change(self):
        new_mode = Base[self.mode_var.get()]
        buffer = self.buffer_var.get()
        if buffer:
            buffer = self.field_vars[new_mode].get()

        self.mode = new_mode
        self.update_keypad()
        self.set_buffer(buffer)

    def copy_field(self, base):
        text = self.field_vars[base].get()
        pyperclip.copy(text)
        self.status_label.config(text=f"Copied {base.label} value: {text}")


def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    root = tk.Tk()
    RadixCalculator(root)
    root.mainloop()


if __name__ == '__main__':
    main()
