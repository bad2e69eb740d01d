_PANGO_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "'": "&#39;",
        '"': "&quot;",
        "\n": "\r",
    }
)


def escape_pango_markup(text: str) -> str:
    """Escape characters with a meaning in pango markup (for markup-rows)."""
    return text.translate(_PANGO_ESCAPES)
