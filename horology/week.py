"""
# Week based measures of time: days of seven.
"""
#: English names of the days of the week.
weekday_names = (
	'sunday',
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Calibration of day zero of the year zero grid against a known reference date.
AD_ZERO_OFFSET = 3

#: Weekday of Unix day zero, a Thursday.
unix_weekday = 4

def day_of_week(days, offset=AD_ZERO_OFFSET, bias=unix_weekday):
	"""
	# Derive the day of the week, Sunday being zero, from the &days elapsed on the
	# year zero grid.
	"""
	return (days + offset + bias) % days_in_week

def weekday_name(days):
	return weekday_names[day_of_week(days)]
