"""
# Conversion between milliseconds elapsed since the start of year zero and calendar fields.

# All functions are pure integer arithmetic over non-negative millisecond counts.

# [ Elements ]

# /EPOCH_OFFSET/
	# Milliseconds between the start of year zero and the Unix epoch, 1970-01-01T00:00:00.
# /milliseconds_in_day/
	# Size of the Earth day in milliseconds.
"""
from . import earth
from . import metric
from . import gregorian
from . import week

milliseconds_in_second = metric.milliseconds_in_second
milliseconds_in_minute = milliseconds_in_second * earth.seconds_in_minute
milliseconds_in_hour = milliseconds_in_minute * earth.minutes_in_hour
milliseconds_in_day = milliseconds_in_hour * earth.hours_in_day

EPOCH_OFFSET = 62_167_132_800_000

def fields_to_milliseconds(year, month, day, hour=0, minute=0, second=0, millisecond=0):
	"""
	# Convert the calendar fields into milliseconds elapsed since the start of year zero.

	# Excess values overflow into the larger units; `day=32` of January is the first of
	# February and `hour=24` is the following day.
	"""
	days = gregorian.days_from_date((year, month, day))
	return (
		(days * milliseconds_in_day) +
		(hour * milliseconds_in_hour) +
		(minute * milliseconds_in_minute) +
		(second * milliseconds_in_second) +
		millisecond
	)

def milliseconds_to_days(ms):
	"""
	# Whole days elapsed since the start of year zero.
	"""
	return ms // milliseconds_in_day

def milliseconds_to_date(ms):
	"""
	# The `(year, month, day)` tuple of the day containing &ms.
	"""
	return gregorian.date_from_days(milliseconds_to_days(ms))

def milliseconds_to_datetime(ms):
	"""
	# The `(year, month, day, hour, minute, second)` tuple for &ms.
	"""
	return milliseconds_to_date(ms) + (
		milliseconds_to_hour(ms),
		milliseconds_to_minute(ms),
		milliseconds_to_second(ms),
	)

def milliseconds_to_year(ms):
	return milliseconds_to_date(ms)[0]

def milliseconds_to_day_of_year(ms):
	"""
	# The one-based day of the year containing &ms.
	"""
	days = milliseconds_to_days(ms)
	year = gregorian.date_from_days(days)[0]
	return days - gregorian.days_from_date((year, 1, 1)) + 1

def milliseconds_to_month(ms):
	"""
	# The one-based month containing &ms.
	"""
	return gregorian.month_of_day(milliseconds_to_year(ms), milliseconds_to_day_of_year(ms))

def milliseconds_to_day_of_month(ms):
	"""
	# The one-based day of the month containing &ms.
	"""
	year = milliseconds_to_year(ms)
	day = milliseconds_to_day_of_year(ms)
	month = gregorian.month_of_day(year, day)
	return day - gregorian.breakpoints(year)[month-1]

def milliseconds_to_day_of_week(ms):
	"""
	# The day of the week, zero being Sunday.
	"""
	return week.day_of_week(milliseconds_to_days(ms))

def milliseconds_to_hour(ms):
	return (ms // milliseconds_in_hour) % earth.hours_in_day

def milliseconds_to_minute(ms):
	return (ms // milliseconds_in_minute) % earth.minutes_in_hour

def milliseconds_to_second(ms):
	return (ms // milliseconds_in_second) % earth.seconds_in_minute

def milliseconds_to_millisecond(ms):
	return ms % milliseconds_in_second

def to_unix(ms):
	"""
	# Convert milliseconds since year zero into milliseconds since the Unix epoch.
	"""
	return ms - EPOCH_OFFSET

def from_unix(ms):
	"""
	# Convert milliseconds since the Unix epoch into milliseconds since year zero.
	"""
	return ms + EPOCH_OFFSET
