"""Expand shorthand properties into longhand declarations.

Expanders are registered in :data:`EXPANDERS` and are called with the
tokens of a shorthand value. They yield ``(longhand, value)`` tuples, the
values being serialized text.

:func:`expand_shorthand` merges the longhands back into the declaration
block, following the cascade inside a single block.

"""

import tinycss2
from tinycss2.color3 import parse_color

from ..logger import LOGGER
from . import Declaration

from .tokens import (  # isort:skip
    InvalidValues, get_keyword, get_length, get_single_keyword, get_url,
    remove_whitespace, split_words)

EXPANDERS = {}

FONT_LONGHANDS = (
    'font-style', 'font-variant', 'font-weight', 'font-size', 'line-height')
FONT_SIZE_KEYWORDS = {
    'xx-small', 'x-small', 'small', 'medium', 'large', 'x-large', 'xx-large',
    'smaller', 'larger'}
FONT_WEIGHTS = {100, 200, 300, 400, 500, 600, 700, 800, 900}
POSITION_KEYWORDS = {'left', 'center', 'right', 'top', 'bottom'}


def expander(property_name):
    """Decorator adding a function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def expand_shorthands(declarations):
    """Expand all the known shorthands of ``declarations``.

    Return a new :obj:`dict`, ``declarations`` is left untouched.

    """
    for name in EXPANDERS:
        declarations = expand_shorthand(declarations, name)
    return declarations


def expand_shorthand(declarations, name):
    """Expand the ``name`` shorthand of ``declarations``.

    Return a new :obj:`dict` where ``name`` is replaced by its longhands,
    or ``declarations`` itself if ``name`` is not declared.

    """
    if name not in declarations:
        return declarations

    value, important = declarations[name]
    tokens = tinycss2.parse_component_value_list(value, skip_comments=True)
    longhands = {
        longhand: Declaration(longhand_value, important)
        for longhand, longhand_value in EXPANDERS[name](tokens, name)}
    return _merge(declarations, name, longhands)


def _merge(declarations, name, longhands):
    """Replace the ``name`` shorthand by its ``longhands``.

    A longhand already in ``declarations`` is kept at its own position when
    it is more important than the shorthand, or as important and declared
    after it.

    """
    names = list(declarations)
    position = names.index(name)
    kept = set()
    for longhand, declaration in longhands.items():
        if longhand in declarations:
            existing = declarations[longhand]
            later = names.index(longhand) > position
            if (existing.important, later) > (declaration.important, False):
                kept.add(longhand)

    merged = {}
    for key, declaration in declarations.items():
        if key == name:
            merged.update(
                (longhand, longhand_declaration)
                for longhand, longhand_declaration in longhands.items()
                if longhand not in kept)
        elif key not in longhands or key in kept:
            merged[key] = declaration
    return merged


def _four_sides(values):
    """Return top, right, bottom and left values from 1 to 4 values."""
    if len(values) == 1:
        return values * 4
    elif len(values) == 2:
        return values * 2  # (bottom, left) defaults to (top, right)
    elif len(values) == 3:
        return [*values, values[1]]  # left defaults to right
    elif len(values) == 4:
        return values
    raise InvalidValues(f'Expected 1 to 4 token components got {len(values)}')


def _box_model_value(token):
    return (
        get_length(token, percentage=True) is not None or
        get_keyword(token) in ('auto', 'inherit'))


@expander('margin')
@expander('padding')
def expand_four_sides(tokens, name):
    """Expand properties setting a token for the four sides of a box.

    Tokens that are not lengths, percentages, ``auto`` or ``inherit`` are
    ignored. A wrong count of values gives empty longhands.

    """
    expanded_names = [
        f'{name}-{side}' for side in ('top', 'right', 'bottom', 'left')]
    values = [token.serialize() for token in tokens if _box_model_value(token)]
    try:
        values = _four_sides(values)
    except InvalidValues as exception:
        LOGGER.debug(
            'Emptied `%s: %s`, %s.',
            name, tinycss2.serialize(tokens).strip(), exception)
        values = [''] * 4
    yield from zip(expanded_names, values)


def _single_keyword(*keywords):
    """Build a predicate matching words made of one of ``keywords``."""
    keywords = set(keywords)

    def predicate(word):
        return get_single_keyword(word) in keywords
    return predicate


def font_weight(word):
    """Match ``100`` to ``900``, ``bold``, ``bolder`` and ``lighter``."""
    if get_single_keyword(word) in ('bold', 'bolder', 'lighter'):
        return True
    return (
        len(word) == 1 and word[0].type == 'number' and
        word[0].int_value in FONT_WEIGHTS)


def _line_height(token):
    return (
        token.type == 'number' or
        get_length(token, percentage=True) is not None or
        get_keyword(token) in ('normal', 'inherit'))


def font_size(word):
    """Match a font size, optionally followed by ``/`` and a line height."""
    size, *line_height = word
    if (get_length(size, percentage=True) is None and
            get_keyword(size) not in FONT_SIZE_KEYWORDS):
        return False
    if not line_height:
        return True
    return (
        len(line_height) == 2 and line_height[0] == '/' and
        _line_height(line_height[1]))


def _set(*names):
    """Build an assignment giving the word's text to ``names``."""
    def assignment(word):
        value = tinycss2.serialize(word)
        return {name: value for name in names}
    return assignment


def _set_font_size(word):
    size, *line_height = word
    values = {'font-size': size.serialize()}
    if line_height:
        values['line-height'] = line_height[-1].serialize()
    return values


#: Rules classifying the words of a ``font`` value before the font size.
#:
#: Each rule is a ``(predicate, assignment, explicit)`` tuple, the first
#: rule whose predicate matches a word is applied. Assignments of
#: non-explicit rules don't override values explicitly set by previous
#: words.
FONT_RULES = (
    (_single_keyword('normal', 'inherit'),
     _set('font-style', 'font-weight', 'font-variant'), False),
    (_single_keyword('italic', 'oblique'), _set('font-style'), True),
    (_single_keyword('small-caps'), _set('font-variant'), True),
    (font_weight, _set('font-weight'), True),
    (font_size, _set_font_size, True),
)


@expander('font')
def expand_font(tokens, name):
    """Expand the ``font`` shorthand property.

    Every word after the font size is a font family.

    See https://www.w3.org/TR/CSS21/fonts.html#font-shorthand

    """
    values = dict.fromkeys(FONT_LONGHANDS, 'normal')
    explicit = set()
    families = []
    for word in split_words(tokens):
        if 'font-size' in explicit:
            families.append(tinycss2.serialize(word))
            continue
        for predicate, assignment, explicit_rule in FONT_RULES:
            if predicate(word):
                for longhand, value in assignment(word).items():
                    if explicit_rule:
                        explicit.add(longhand)
                    elif longhand in explicit:
                        continue
                    values[longhand] = value
                break
        else:
            LOGGER.debug(
                'Ignored `%s` in `%s` shorthand.',
                tinycss2.serialize(word), name)

    if families:
        values['font-family'] = ', '.join(families)
    yield from values.items()


def _keyword(*keywords):
    """Build a predicate matching one of ``keywords`` tokens."""
    keywords = set(keywords)

    def predicate(token):
        return get_keyword(token) in keywords
    return predicate


def background_color(token):
    return parse_color(token) is not None


def background_position(token):
    return (
        get_length(token, percentage=True) is not None or
        get_keyword(token) in POSITION_KEYWORDS)


def background_image(token):
    return get_url(token) is not None or get_keyword(token) == 'none'


#: Independent searches run on the tokens of a ``background`` value.
#:
#: Each rule is a ``(longhand, predicate, every_match)`` tuple. The value of
#: the longhand is the first token matching the predicate, or all of them
#: joined with spaces when ``every_match`` is true.
BACKGROUND_RULES = (
    ('background-attachment', _keyword('scroll', 'fixed'), False),
    ('background-repeat',
     _keyword('repeat', 'repeat-x', 'repeat-y', 'no-repeat'), False),
    ('background-color', background_color, False),
    ('background-position', background_position, True),
    ('background-image', background_image, False),
)


@expander('background')
def expand_background(tokens, name):
    """Expand the ``background`` shorthand property.

    Longhands with no matching token are not set, unless the value includes
    ``inherit``.

    See https://www.w3.org/TR/CSS21/colors.html#propdef-background

    """
    tokens = remove_whitespace(tokens)
    values = {}
    for longhand, predicate, every_match in BACKGROUND_RULES:
        matches = [token.serialize() for token in tokens if predicate(token)]
        if matches:
            values[longhand] = ' '.join(matches) if every_match else matches[0]

    if any(get_keyword(token) == 'inherit' for token in tokens):
        for longhand, _, _ in BACKGROUND_RULES:
            values.setdefault(longhand, 'inherit')
    elif not values:
        LOGGER.debug(
            'Ignored `%s: %s`, no valid value found.',
            name, ' '.join(token.serialize() for token in tokens))
    yield from values.items()
