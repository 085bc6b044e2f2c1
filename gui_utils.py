import customtkinter as ctk
import tkinter as tk
from tkinter import messagebox

KEYPAD_ROWS = [["7", "8", "9"], ["4", "5", "6"], ["1", "2", "3"], ["C", "0", "⌫"]]

def show_virtual_keyboard(entry_widget, title=""):
    """
    Show a number keypad that types into entry_widget, for quantities on a touch screen.
    "C" empties the entry. Works with tkinter and customtkinter entries.
    """
    # Only one keypad at a time
    if hasattr(show_virtual_keyboard, "keyboard_window") and \
            show_virtual_keyboard.keyboard_window.winfo_exists():
        show_virtual_keyboard.keyboard_window.lift()
        show_virtual_keyboard.keyboard_window.focus_force()
        return

    def on_key_press(key):
        if key == '⌫':
            current = entry_widget.get()
            if len(current) > 0:
                entry_widget.delete(len(current)-1, tk.END)
        elif key == 'C':
            entry_widget.delete(0, tk.END)
        elif key == 'Done':
            show_virtual_keyboard.keyboard_window.destroy()
        else:
            entry_widget.insert(tk.END, key)

    window = ctk.CTkToplevel()
    show_virtual_keyboard.keyboard_window = window
    window.title(f"Enter {title.lower()}" if title else "Enter number")
    window.geometry("230x330")
    window.resizable(False, False)
    window.attributes('-topmost', True)
    window.grab_set()

    btn_style = {'font': ('Arial', 18, 'bold'), 'width': 64, 'height': 56}

    num_frame = ctk.CTkFrame(window)
    num_frame.pack(padx=8, pady=(8, 4))
    for r, keys in enumerate(KEYPAD_ROWS):
        for c, key in enumerate(keys):
            ctk.CTkButton(num_frame, text=key, command=lambda k=key: on_key_press(k), **btn_style).grid(row=r, column=c, padx=2, pady=2)

    ctk.CTkButton(window, text="Done", command=lambda: on_key_press("Done"),
                  font=('Arial', 16), width=200, height=44).pack(padx=8, pady=(4, 8))

def show_popup_error(msg, title="Error"):
    """
    Show an error popup.
    """
    messagebox.showerror(title, msg)
