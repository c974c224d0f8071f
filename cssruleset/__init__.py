"""CSS rule sets, with their declarations and shorthands.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for command-line and Python API options.
#:
#: :param bool force_important:
#:     Whether all the declarations are serialized with ``!important``,
#:     whatever their own importance is.
DEFAULT_OPTIONS = {
    'force_important': False,
}

__all__ = [
    'DEFAULT_OPTIONS', 'VERSION', 'Declaration', 'RuleSet', '__version__',
    'calculate_specificity', 'expand_shorthands', 'parse_declarations']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .css import (  # noqa: E402
    Declaration, parse_declarations, serialize_declarations)
from .css.expanders import expand_shorthands  # noqa: E402
from .css.selectors import calculate_specificity, split_selectors  # noqa: E402


def _merge_options(options):
    """Return ``options`` completed with :data:`DEFAULT_OPTIONS`."""
    for unknown in set(options) - set(DEFAULT_OPTIONS):
        LOGGER.warning('Unknown option: %s.', unknown)
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    return new_options


class RuleSet:
    """A CSS rule set, made of selectors and of a declaration block.

    The block is parsed when the rule set is created, shorthand properties
    are only expanded when :meth:`expand_shorthand` is called.

    :param str selectors:
        A comma-separated list of selectors.
    :param str block:
        The text of the declaration block, without the braces. Can be
        :obj:`None`.
    :param specificity:
        The specificity shared by all the selectors. When :obj:`None`, the
        specificity of each selector is calculated when iterating on
        selectors.

    """
    def __init__(self, selectors, block, specificity=None):
        self.selectors = selectors
        self.block = block
        self.specificity = specificity
        #: A :obj:`dict` mapping property names to :class:`Declaration`.
        self.declarations = parse_declarations(block)

    def __repr__(self):
        return f'<{type(self).__name__} {self.selectors!r}>'

    def __str__(self):
        return f'{self.selectors} {{ {self.declarations_to_string()} }}'

    def add_declaration(self, name, value):
        """Append a ``name: value`` declaration and parse the block again.

        Declarations are parsed again from the whole block, previously
        expanded shorthands are thus back in :attr:`declarations`.

        """
        block = f'{self.block};' if self.block else ''
        self.block = f'{block}{name}: {value};'
        self.declarations = parse_declarations(self.block)

    def expand_shorthand(self):
        """Split shorthand declarations into their longhands.

        ``margin``, ``padding``, ``font`` and ``background`` are expanded.

        """
        if not self.declarations:
            self.declarations = parse_declarations(self.block)
        self.declarations = expand_shorthands(self.declarations)

    def escape_declarations(self):
        """Replace double quotes by single quotes in declaration values.

        Escaped declarations can be used in double-quoted ``style``
        attributes.

        """
        self.declarations = {
            name: declaration._replace(
                value=declaration.value.replace('"', "'"))
            for name, declaration in self.declarations.items()}

    def iter_declarations(self):
        """Yield ``(name, value, important)`` tuples for declarations."""
        for name, (value, important) in self.declarations.items():
            yield name, value, important

    def declarations_to_string(self, **options):
        """Return all the declarations as a string.

        :param options:
            The ``options`` parameter includes by default the
            :data:`DEFAULT_OPTIONS` values.

        """
        options = _merge_options(options)
        return serialize_declarations(
            self.declarations, options['force_important'])

    def iter_selectors(self, score=calculate_specificity, **options):
        """Yield ``(selector, declarations, specificity)`` tuples.

        :param score:
            A function returning the specificity of a selector, used when
            no specificity has been given to the rule set.
        :param options:
            The ``options`` parameter includes by default the
            :data:`DEFAULT_OPTIONS` values.

        """
        declarations = self.declarations_to_string(**options)
        for selector in split_selectors(self.selectors):
            if self.specificity is None:
                yield selector, declarations, score(selector)
            else:
                yield selector, declarations, self.specificity
