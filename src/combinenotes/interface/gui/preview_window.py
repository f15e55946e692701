from __future__ import annotations

"""
Combined Notes Preview Window.

Shows a combined document in a read-only, styled text view with a
"Copy to Clipboard" button. Nothing is copied until the button is pressed.
"""

from typing import Callable

import customtkinter as ctk

from combinenotes.domain.combine_models import CombinedDocument
from combinenotes.interface.gui.markdown_styles import STYLE_COLORS, copy_status, markdown_line_tags
from combinenotes.utils.i18n import i18n

# -----------------------------------------------------------------------------
# PUBLIC DIALOG API
# -----------------------------------------------------------------------------

def show_preview_window(document: CombinedDocument, on_copy: Callable[[], bool]) -> None:
    """
    Open the preview window and block until it is closed.

    Args:
        document: The combined document to display.
        on_copy: Copy action; returns True when the clipboard was written.
    """
    ctk.set_appearance_mode("System")

    app = ctk.CTk()
    app.title(i18n.t("preview.title", path=document.root_path))
    app.geometry("900x700")

    ctk.CTkLabel(
        app,
        text=i18n.t("preview.files_label", count=document.file_count),
        font=ctk.CTkFont(size=16, weight="bold"),
    ).pack(pady=(15, 5))

    # -----------------------------------------------------------------------------
    # ACTION CONTROLS
    # -----------------------------------------------------------------------------
    btn_frame = ctk.CTkFrame(app, fg_color="transparent")
    btn_frame.pack(fill="x", padx=20, pady=5)

    status_label = ctk.CTkLabel(btn_frame, text="")

    def _copy() -> None:
        text, color = copy_status(on_copy())
        status_label.configure(text=text, text_color=color)

    ctk.CTkButton(
        btn_frame,
        text=i18n.t("preview.btn_copy"),
        command=_copy,
    ).pack(side="left", padx=5)

    ctk.CTkButton(
        btn_frame,
        text=i18n.t("preview.btn_close"),
        fg_color="transparent",
        border_width=1,
        text_color=("gray10", "#DCE4EE"),
        command=app.destroy,
    ).pack(side="right", padx=5)

    status_label.pack(side="left", padx=10)

    # -----------------------------------------------------------------------------
    # DOCUMENT VIEW
    # -----------------------------------------------------------------------------
    textbox = ctk.CTkTextbox(app, wrap="word")
    textbox.pack(fill="both", expand=True, padx=20, pady=(5, 20))
    textbox.insert("1.0", document.text)

    for tag, color in STYLE_COLORS.items():
        textbox.tag_config(tag, foreground=color)
    for line_no, tag in markdown_line_tags(document.text):
        textbox.tag_add(tag, f"{line_no}.0", f"{line_no}.end")

    textbox.configure(state="disabled")

    app.mainloop()
