"""
# Render time values through token templates.

# Templates are plain strings containing two character tokens. Each recognized token is
# replaced, in every occurrence, by a field selected from the value being rendered:

# /`%Y`/
	# The year; unpadded.
# /`%m`/
	# The month of the year; two digits.
# /`%D`/
	# The total number of days; unpadded. When zero, the token is removed and the
	# result is stripped of surrounding whitespace.
# /`%d`/
	# The day of the month; two digits.
# /`%H`/
	# The hour of the day; two digits.
# /`%M`/
	# The minute of the hour; two digits.
# /`%S`/
	# The second of the minute; two digits.
# /`%f`/
	# The fraction of the second; three digits at millisecond resolution,
	# nine at nanosecond resolution.

# Other character sequences pass through unchanged. Fields are only selected when their
# token is present in the template.
"""

#: Default template for calendar instants.
calendar_template = "%Y-%m-%d %H:%M:%S.%f"

#: Default template for durations.
duration_template = "%D %H:%M:%S.%f"

#: Digits of the `%f` field by resolution.
resolutions = {
	'millisecond': 3,
	'nanosecond': 9,
}

#: Token to selection, `(part, of)`, for the fixed width and unpadded fields.
fields = (
	('%Y', ('year', None), "{0}".format),
	('%m', ('month', 'year'), "{0:02}".format),
	('%d', ('day', 'month'), "{0:02}".format),
	('%H', ('hour', 'day'), "{0:02}".format),
	('%M', ('minute', 'hour'), "{0:02}".format),
	('%S', ('second', 'minute'), "{0:02}".format),
)

def render(select, template, resolution='millisecond', fields=fields):
	"""
	# Replace the tokens in &template with the values produced by &select.

	# [ Parameters ]
	# /select/
		# Callable taking `(part, of)` and returning the integer field.
		# Usually, the `select` method of a &.types instance.
	# /template/
		# The string containing the tokens to replace.
	# /resolution/
		# The unit of the fractional second. A key of &resolutions.
	"""
	s = template

	if '%D' in s:
		days = select('day', None)
		if days:
			s = s.replace('%D', str(days))
		else:
			s = s.replace('%D', '').strip()

	for token, (part, of), fmt in fields:
		if token in s:
			s = s.replace(token, fmt(select(part, of)))

	if '%f' in s:
		width = resolutions[resolution]
		s = s.replace('%f', str(select(resolution, 'second')).rjust(width, '0'))

	return s
