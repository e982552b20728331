"""
# System clock access.

# The real clock is the only source of the current time used by horology. Functions
# and constructors needing the current time take a &Clock instance as the `clock` keyword,
# defaulting to &real, so that deterministic clocks can be substituted.
"""
import time
from . import core

class Clock(object):
	"""
	# Wall clock reading the nanoseconds elapsed since the Unix epoch from &read.

	# The clock is not monotonic; system time adjustments are reflected in the readings.
	"""
	__slots__ = ('read',)

	def __init__(self, read):
		self.read = read

	def nanoseconds(self) -> int:
		"""
		# Sample the clock.

		# [ Exceptions ]
		# /&core.ClockError/
			# The reading precedes the Unix epoch.
		"""
		ns = self.read()
		if ns < 0:
			raise core.ClockError(ns)
		return ns

	def milliseconds(self) -> int:
		"""
		# Sample the clock and truncate the reading to whole milliseconds.
		"""
		return self.nanoseconds() // 1000000

#: The system's real clock.
real = Clock(time.time_ns)

def unix_milliseconds(clock=real) -> int:
	"""
	# Whole milliseconds elapsed since the Unix epoch according to &clock.
	"""
	return clock.milliseconds()

def unix_nanoseconds(clock=real) -> int:
	"""
	# Nanoseconds elapsed since the Unix epoch according to &clock.
	"""
	return clock.nanoseconds()
