"""
Information about the metric second and the sub-second units used by horology.
"""
from . import earth

#: The names of the SI multiples associated with their exponent.
name_to_exponent = {
	'nanosecond': -9,
	'microsecond': -6,
	'millisecond': -3,
	'second': 0,
}

#: Number of milliseconds contained in a `second`.
milliseconds_in_second = 1000

def sizes(base = 'nanosecond'):
	"""
	# Construct the mapping of unit names to their size expressed in &base units.
	# Metric units finer than &base are not included.
	"""
	exp = name_to_exponent[base]
	d = {
		k: 10 ** (v - exp)
		for k, v in name_to_exponent.items()
		if v >= exp
	}

	s = d['second']
	d['minute'] = s * earth.seconds_in_minute
	d['hour'] = d['minute'] * earth.minutes_in_hour
	d['day'] = d['hour'] * earth.hours_in_day
	return d
