"""
[ About ]
---------

horology is a calendar and duration arithmetic package based on the built-in Python &int.
Points in time are stored as milliseconds elapsed since the start of year zero on the
proleptic Gregorian calendar; durations are stored as milliseconds or nanoseconds. Calendar
and clock fields are derived from the stored integer whenever they are selected.

Calendar Support:

	- Proleptic Gregorian

No time zones are supported; all points in time are UTC.

&.library will be referred to as `libhorology` throughout the examples in this documentation.

#!/pl/python
	from horology import library as libhorology

Current date and time as a &.types.CalendarInstant.

#!/pl/python
	now = libhorology.now()
	print(now.format())

[ Calendar Representation ]
---------------------------

Instants are constructed from calendar fields or from Unix epoch milliseconds.

#!/pl/python
	ts = libhorology.CalendarInstant.of(2023, 5, 28, 14, 36, 46)
	assert ts == libhorology.CalendarInstant.from_unix_milliseconds(1_685_284_606_000)
	assert ts.select('date') == (2023, 5, 28)
	assert ts.select('day', 'week') == 0 # Sunday

Fields with excess values overflow onto larger units; no calendrical validation is
performed beyond the month.

#!/pl/python
	assert libhorology.CalendarInstant.of(2023, 1, 32).select('date') == (2023, 2, 1)

The day grid counts year zero as a common year of 365 days. This keeps the Unix epoch at
exactly 62,167,132,800,000 milliseconds after the start of year zero.

[ Formatting ]
--------------

Templates use two character tokens: `%Y`, `%m`, `%d`, `%H`, `%M`, `%S`, `%f`, and `%D`.

#!/pl/python
	assert ts.format("%H:%M") == "14:36"
	assert libhorology.ElapsedTime.of(day=1).format() == "1 00:00:00.000"
	assert libhorology.ElapsedTime.of(hour=1).format() == "01:00:00.000"

[ Clocks ]
----------

Measuring the execution time of a code block is done with a stopwatch::

#!/pl/python
	with libhorology.stopwatch() as snapshot:
		work()

	print(snapshot().format())

Stopwatches and time stamps sample the wall clock through &.system.Clock instances passed
as the `clock` keyword; the system's real clock is used by default.
"""
