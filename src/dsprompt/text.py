"""Reply cleanup.

A literal strip of markdown punctuation. Nothing here parses markdown:
nested or malformed markup is not special-cased.
"""

# Removing "*" also removes "**". "__" goes last: removing a single
# character can join two underscores into a fresh "__".
MARKDOWN_CHARS = ("`", "#", "*", "~", "[", "]", "(", ")")
MARKDOWN_SEQUENCES = ("__",)


def strip_markdown(text: str) -> str:
    """Remove markdown emphasis, code, heading and link punctuation.

    Examples:
        >>> strip_markdown("**Hi** there!")
        'Hi there!'
        >>> strip_markdown("[docs](https://example.com)")
        'docshttps://example.com'
    """
    for char in MARKDOWN_CHARS:
        text = text.replace(char, "")
    for sequence in MARKDOWN_SEQUENCES:
        text = text.replace(sequence, "")
    return text
