"""Split selector lists and compute their specificity."""

import cssselect2
import tinycss2

from ..logger import LOGGER
from .tokens import split_on_comma


def split_selectors(selectors):
    """Split a comma-separated list of selectors.

    Only top-level commas are splitting points, ``:is(a, b)`` is a single
    selector. Return a list of stripped selectors, empty ones are dropped.

    """
    tokens = tinycss2.parse_component_value_list(selectors or '')
    return [
        selector for selector in (
            tinycss2.serialize(part).strip()
            for part in split_on_comma(tokens))
        if selector]


def calculate_specificity(selector):
    """Return the specificity of ``selector`` as a number.

    The ``(a, b, c)`` specificity given by cssselect2 is folded into
    ``100 * a + 10 * b + c``. Invalid or unsupported selectors have a null
    specificity.

    """
    try:
        compiled = cssselect2.compile_selector_list(selector)
    except cssselect2.SelectorError as exception:
        LOGGER.warning(
            'Invalid or unsupported selector %r, %s', selector, exception)
        return 0
    if not compiled:
        return 0
    a, b, c = max(
        compiled_selector.specificity for compiled_selector in compiled)
    return 100 * a + 10 * b + c
