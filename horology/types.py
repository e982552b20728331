"""
# Calendar instant and elapsed duration types.

#!python
	ts = types.CalendarInstant.of(2023, 5, 28, 14, 36, 46)
	assert ts.format() == "2023-05-28 14:36:46.000"
	assert ts.select('day', 'week') == 0 # Sunday

	d = types.ElapsedTime.of(day=1)
	assert d.format() == "1 00:00:00.000"

# All types are &int subclasses storing a single quantity in their &Unit.unit; every field
# is derived from that quantity when selected.

# [ Elements ]

# /CalendarInstant/
	# Millisecond precision point in time counted from the start of year zero.
# /ElapsedTime/
	# Millisecond precision duration.
# /PreciseElapsedTime/
	# Nanosecond precision duration.
"""
from . import core
from . import metric
from . import epoch
from . import system
from . import format as libformat

class Unit(int):
	"""
	# Base class of the time types. Instances are immutable quantities of &unit.
	"""
	__slots__ = ()

	#: Name of the unit of the stored quantity.
	unit = None

	#: Unit of the fractional second when formatted.
	resolution = None

	#: Default template used by &format.
	template = None

	#: Sizes of the selectable units expressed in &unit.
	sizes = None

	#: Calendar selections performed on the millisecond count.
	calendar = {
		('year', None): epoch.milliseconds_to_year,
		('month', 'year'): epoch.milliseconds_to_month,
		('day', 'month'): epoch.milliseconds_to_day_of_month,
		('day', 'year'): epoch.milliseconds_to_day_of_year,
		('day', 'week'): epoch.milliseconds_to_day_of_week,
		('date', None): epoch.milliseconds_to_date,
		('datetime', None): epoch.milliseconds_to_datetime,
	}

	def __new__(Class, quantity=0):
		if quantity < 0:
			raise core.NegativeQuantity(quantity, Class.unit)
		return super().__new__(Class, quantity)

	@classmethod
	def construct(Class, parts):
		"""
		# Create an instance from the sum of the unit-quantity pairs in &parts.
		"""
		sizes = Class.sizes
		return Class(sum(sizes[unit] * quantity for unit, quantity in parts))

	def select(self, part, of=None):
		"""
		# Select the &part of the instance that is contained by &of.

		# When &of is &None, the total quantity of whole &part units is returned:

		#!python
			assert ElapsedTime.of(hour=2, minute=3).select('minute') == 123
			assert ElapsedTime.of(hour=2, minute=3).select('minute', 'hour') == 3

		# The `year`, `date`, and `datetime` parts and the `(month, year)`, `(day, month)`,
		# `(day, year)`, and `(day, week)` selections interpret the quantity as elapsed
		# since the start of year zero.
		"""
		key = (part, of)
		if key in self.calendar:
			return self.calendar[key](self.select('millisecond'))

		sizes = self.sizes
		total = self // sizes[part]
		if of is None:
			return total
		return total % (sizes[of] // sizes[part])

	def format(self, template=None):
		"""
		# Render the instance using &template; defaults to the type's &template.
		"""
		if template is None:
			template = self.template
		return libformat.render(self.select, template, self.resolution)

	def __str__(self):
		return self.format()

	def __repr__(self):
		return "(%s@%r)" % (self.__class__.__name__, self.format())

class CalendarInstant(Unit):
	"""
	# A point in time with millisecond precision counted from the start of year zero on the
	# proleptic Gregorian calendar.
	"""
	__slots__ = ()

	unit = 'millisecond'
	resolution = 'millisecond'
	template = libformat.calendar_template
	sizes = metric.sizes(unit)

	@classmethod
	def of(Class, year=0, month=1, day=1, hour=0, minute=0, second=0, millisecond=0):
		"""
		# Create an instant from calendar fields. Excess field values overflow into
		# the larger units.
		"""
		return Class(epoch.fields_to_milliseconds(year, month, day, hour, minute, second, millisecond))

	@classmethod
	def from_unix_milliseconds(Class, milliseconds):
		"""
		# Create an instant from the milliseconds elapsed since the Unix epoch.
		"""
		return Class(epoch.from_unix(milliseconds))

	@classmethod
	def now(Class, clock=system.real):
		"""
		# Sample &clock, the system's real clock by default.
		"""
		return Class.from_unix_milliseconds(clock.milliseconds())

	def unix_milliseconds(self) -> int:
		"""
		# The milliseconds elapsed since the Unix epoch; negative before 1970.
		"""
		return epoch.to_unix(int(self))

	def elapse(self, measure):
		"""
		# The instant after &measure, an &ElapsedTime or &PreciseElapsedTime, has elapsed.
		# Nanoseconds below a millisecond are truncated.
		"""
		return self.__class__(self + measure.select('millisecond'))

	def measure(self, instant):
		"""
		# The &ElapsedTime from this instant to the later &instant.
		"""
		return ElapsedTime(instant - self)

class ElapsedTime(Unit):
	"""
	# A duration with millisecond precision.
	"""
	__slots__ = ()

	unit = 'millisecond'
	resolution = 'millisecond'
	template = libformat.duration_template
	sizes = metric.sizes(unit)

	@classmethod
	def of(Class, day=0, hour=0, minute=0, second=0, millisecond=0):
		return Class.construct((
			('day', day),
			('hour', hour),
			('minute', minute),
			('second', second),
			('millisecond', millisecond),
		))

class PreciseElapsedTime(Unit):
	"""
	# A duration with nanosecond precision.
	"""
	__slots__ = ()

	unit = 'nanosecond'
	resolution = 'nanosecond'
	template = libformat.duration_template
	sizes = metric.sizes(unit)

	@classmethod
	def of(Class,
			day=0, hour=0, minute=0, second=0,
			millisecond=0, microsecond=0, nanosecond=0
		):
		return Class.construct((
			('day', day),
			('hour', hour),
			('minute', minute),
			('second', second),
			('millisecond', millisecond),
			('microsecond', microsecond),
			('nanosecond', nanosecond),
		))
