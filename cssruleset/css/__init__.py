"""Parse and serialize CSS declaration blocks.

This module takes care of the text of a single rule's block: turning it
into an ordered mapping of :class:`Declaration` values, and back.

Shorthand properties are expanded by :mod:`.expanders`.

"""

from collections import namedtuple

import tinycss2

from ..logger import LOGGER

#: A declaration value, with its ``!important`` flag.
Declaration = namedtuple('Declaration', 'value, important')


def _preprocess(block):
    # Same replacements as the tinycss2 tokenizer, token positions point into
    # the returned text.
    return (
        block.replace('\0', '\ufffd').replace('\r\n', '\n')
        .replace('\r', '\n').replace('\f', '\n'))


def _offsets(text):
    """Return a function giving the offset of a token in ``text``."""
    line_starts = [0]
    for index, character in enumerate(text):
        if character == '\n':
            line_starts.append(index + 1)

    def offset(token):
        return line_starts[token.source_line - 1] + token.source_column - 1
    return offset


def _split_fragments(tokens):
    """Split top-level tokens on ``;``, yield ``(tokens, semicolon)``."""
    fragment = []
    for token in tokens:
        if token == ';':
            yield fragment, token
            fragment = []
        else:
            fragment.append(token)
    yield fragment, None


def _dropped_spans(tokens):
    """Yield ``(first, after, important)`` spans of value tokens to drop.

    Dropped spans are comments and ``!important`` markers.

    """
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.type == 'comment':
            yield index, index + 1, False
        elif token == '!':
            following = index + 1
            while following < len(tokens) and tokens[following].type in (
                    'whitespace', 'comment'):
                following += 1
            if following < len(tokens) and (
                    tokens[following].type == 'ident' and
                    tokens[following].lower_value == 'important'):
                yield index, following + 1, True
                index = following
        index += 1


def parse_declarations(block):
    """Parse the text of a declaration block.

    Return a :obj:`dict` mapping lowercase property names to
    :class:`Declaration` tuples. A property declared more than once keeps
    its last value, and the position of its last occurrence.

    The block is split on top-level semicolons, then each declaration on its
    first top-level colon. Semicolons and colons in strings, comments,
    ``url()`` and parentheses don't split anything. Anything before the colon
    is the property, so hacks like ``*zoom`` are kept.

    Values are the trimmed source text, strings keep their quotes. Comments
    are removed, and so is a ``!important`` marker wherever it appears,
    flagging the declaration.

    Fragments without colon or without property are skipped.

    """
    declarations = {}
    if not block:
        return declarations

    text = _preprocess(block)
    offset = _offsets(text)
    tokens = tinycss2.parse_component_value_list(text)

    start = 0
    for fragment, semicolon in _split_fragments(tokens):
        end = len(text) if semicolon is None else offset(semicolon)
        source, start = text[start:end].strip(), end + 1
        colon = next(
            (index for index, token in enumerate(fragment) if token == ':'),
            None)
        name = tinycss2.serialize(
            token for token in fragment[:colon or 0]
            if token.type != 'comment').strip().lower()
        if not name:
            if source:
                LOGGER.debug(
                    'Ignored declaration at %d:%d, `%s`.',
                    fragment[0].source_line, fragment[0].source_column,
                    source)
            continue

        value_tokens = fragment[colon + 1:]
        value_start = offset(fragment[colon]) + 1
        pieces, important = [], False
        for first, after, marker in _dropped_spans(value_tokens):
            important = important or marker
            pieces.append(text[value_start:offset(value_tokens[first])])
            value_start = (
                offset(value_tokens[after]) if after < len(value_tokens)
                else end)
        pieces.append(text[value_start:end])
        value = ' '.join(piece.strip() for piece in pieces if piece.strip())

        declarations.pop(name, None)
        declarations[name] = Declaration(value, important)

    return declarations


def serialize_declarations(declarations, force_important=False):
    """Serialize ``declarations`` as the text of a declaration block."""
    text = []
    for name, (value, important) in declarations.items():
        importance = ' !important' if important or force_important else ''
        text.append(f'{name}: {value}{importance}; ')
    return ''.join(text).strip()
