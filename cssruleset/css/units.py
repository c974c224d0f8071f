"""Constants for units."""

# https://www.w3.org/TR/CSS21/syndata.html#length-units
ABSOLUTE_UNITS = {'px', 'pt', 'pc', 'in', 'cm', 'mm', 'q'}

# https://drafts.csswg.org/css-values-4/#lengths
FONT_UNITS = {'em', 'ex', 'cap', 'ch', 'ic', 'lh'}
FONT_UNITS |= {f'r{unit}' for unit in FONT_UNITS}

# https://drafts.csswg.org/css-values-4/#viewport-relative-lengths
VIEWPORT_UNITS = {'vw', 'vh', 'vmin', 'vmax'}

LENGTH_UNITS = ABSOLUTE_UNITS | FONT_UNITS | VIEWPORT_UNITS
