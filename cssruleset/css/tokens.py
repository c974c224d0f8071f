"""CSS tokens helpers."""

from .units import LENGTH_UNITS


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported values for a known CSS property."""


def split_on_comma(tokens):
    """Split a list of tokens on commas, ie ``LiteralToken(',')``.

    Only "top-level" comma tokens are splitting points, not commas inside a
    function or blocks.

    """
    parts = []
    this_part = []
    for token in tokens:
        if token.type == 'literal' and token.value == ',':
            parts.append(this_part)
            this_part = []
        else:
            this_part.append(token)
    parts.append(this_part)
    return tuple(parts)


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def split_words(tokens):
    """Split a list of tokens into words.

    Words are separated by top-level whitespace and commas. A ``/``
    delimiter glues its neighbours together, so that ``12px / 1.5`` is a
    single word.

    """
    glued = []
    for token in tokens:
        if token.type == 'comment':
            continue
        if token.type == 'whitespace' and glued and glued[-1] == '/':
            continue
        if token == '/':
            while glued and glued[-1].type == 'whitespace':
                glued.pop()
        glued.append(token)

    words = []
    word = []
    for token in glued:
        if token.type == 'whitespace' or token == ',':
            if word:
                words.append(word)
                word = []
        else:
            word.append(token)
    if word:
        words.append(word)
    return words


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_single_keyword(tokens):
    """If ``values`` is a 1-element list of keywords, return its name.

    Otherwise return ``None``.

    """
    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'ident':
            return token.lower_value


def get_length(token, percentage=False):
    """Return ``token`` if it is a <length>.

    Unitless zero is a length. Percentages are accepted when ``percentage``
    is true.

    """
    if percentage and token.type == 'percentage':
        return token
    if token.type == 'dimension' and token.unit.lower() in LENGTH_UNITS:
        return token
    if token.type == 'number' and token.value == 0:
        return token


def get_url(token):
    """If ``token`` is an <url>, return the URL it references.

    Otherwise return ``None``.

    """
    if token.type == 'url':
        return token.value
    elif token.type == 'function' and token.lower_name == 'url':
        arguments = remove_whitespace(token.arguments)
        if len(arguments) == 1 and arguments[0].type == 'string':
            return arguments[0].value
