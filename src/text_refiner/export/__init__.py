"""Export module for text-refiner."""
from text_refiner.export.clipboard import ClipboardDeniedError, copy_to_clipboard
from text_refiner.export.plain_text import (
    PlainTextExport,
    export_plain_text,
    save_plain_text,
)

__all__ = [
    "ClipboardDeniedError",
    "PlainTextExport",
    "copy_to_clipboard",
    "export_plain_text",
    "save_plain_text",
]
