"""
# Gregorian calendar functions and data.

# Days are counted on the year zero grid: day zero is the first day of January in year zero
# and year zero occupies 365 days. The first day of year one is day 365, and from there on
# the grid is the proleptic Gregorian calendar.
"""
import bisect
import itertools
import operator
from . import calendar as callib

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = centuries_in_cycle * years_in_century

#: number of months in a year.
months_in_year = 12

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding each month of a common year; the last entry is the length of the year.
common_breakpoints = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))

#: Days preceding each month of a leap year; the last entry is the length of the year.
leap_breakpoints = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))

#: Days occupied by year zero on the grid.
year_zero_days = common_breakpoints[-1]

### Gregorian Cycle
# After aggregation, nodes take the form:
# (title, repeat, sub, (months, days), (total_months, total_days))
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

# Year zero is laid out as a common year.
year_zero = callib.aggregate(('year-zero', 1, calendar_year))

def resolve_by_days(days,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_days, _select_months), days, _calendar)

def is_leap_year(year):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.

	# Year zero is a leap year by this rule even though the day grid
	# lays it out as a common year. 0000-02-29 is not on the grid; the
	# fields overflow to 0000-03-01.
	"""
	if year % 4 == 0 and (year % 400 == 0 or not year % 100 == 0):
		return True
	return False

def month_lengths(year):
	"""
	# The number of days in each month of the given &year on the day grid.
	"""
	if year and is_leap_year(year):
		return calendar_leap
	return calendar_year

def breakpoints(year):
	"""
	# The number of days preceding each month of &year; thirteen entries,
	# the last being the number of days in the year.
	"""
	if year and is_leap_year(year):
		return leap_breakpoints
	return common_breakpoints

def days_in_year(year):
	return breakpoints(year)[-1]

def days_from_date(date):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days leading up to the date.

	# Days are not validated and overflow into the following months. Months must be
	# within one and twelve.
	"""
	year, month, day = date
	if not 1 <= month <= months_in_year:
		raise ValueError("month must be within 1 and 12, not %r" % (month,))

	days = year * 365
	if year != 0:
		# Leap days of the preceding years; year zero contributes none.
		y = year - 1
		days += (y // 4) - (y // 100) + (y // 400)

	return days + breakpoints(year)[month-1] + (day - 1)

def date_from_days(days, _resolver=resolve_by_days, _year_zero=year_zero):
	"""
	# Convert the given Earth-days into a Gregorian date in the common form:
	# (year, month, day).
	"""
	if days < year_zero_days:
		cycles, months, day, _d = _resolver(days, _calendar=_year_zero)
		return (0, months + 1, day + 1)

	# Beyond year zero the grid is one day short of the full proleptic cycle
	# that begins with the leap year zero.
	cycles, months, day, _d = _resolver(days + 1)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

def month_of_day(year, day_of_year, bisect_left=bisect.bisect_left):
	"""
	# Identify the month, one-based, containing the one-based &day_of_year.
	"""
	return bisect_left(breakpoints(year), day_of_year)
