"""
# Elapsed time measurement over the wall clock.

#!python
	sw = clock.StopWatch.start()
	work()
	print(sw.elapsed().format())

	with clock.stopwatch() as snapshot:
		work()
	print(snapshot())

! NOTE:
	Readings are sampled from a &.system.Clock, which is not monotonic. When the clock
	steps behind the origin of a stopwatch, the elapsed time reads zero.
"""
import contextlib
import logging
from . import system
from . import types

log = logging.getLogger(__name__)

class StopWatch(object):
	"""
	# Measure the time elapsed since &origin, in nanoseconds since the Unix epoch.
	"""
	__slots__ = ('origin', 'clock')

	def __init__(self, origin, clock=system.real):
		self.origin = origin
		self.clock = clock

	@classmethod
	def start(Class, clock=system.real):
		"""
		# Create a stopwatch whose origin is the current reading of &clock.
		"""
		sw = Class(clock.nanoseconds(), clock=clock)
		log.debug("stopwatch started at %d", sw.origin)
		return sw

	def elapsed_nanoseconds(self) -> int:
		delta = self.clock.nanoseconds() - self.origin
		if delta < 0:
			log.warning("clock stepped %d nanoseconds behind the stopwatch origin", -delta)
			return 0
		return delta

	def elapsed(self, Type=types.PreciseElapsedTime):
		"""
		# Sample the clock and return the time elapsed since the origin.
		"""
		return Type(self.elapsed_nanoseconds())

	def elapsed_microseconds(self) -> int:
		return self.elapsed().select('microsecond')

	def elapsed_milliseconds(self) -> int:
		return self.elapsed().select('millisecond')

	def elapsed_seconds(self) -> int:
		return self.elapsed().select('second')

	def elapsed_minutes(self) -> int:
		return self.elapsed().select('minute')

	def elapsed_hours(self) -> int:
		return self.elapsed().select('hour')

	def elapsed_days(self) -> int:
		return self.elapsed().select('day')

@contextlib.contextmanager
def stopwatch(clock=system.real, Type=types.PreciseElapsedTime):
	"""
	# Measure the execution time of a block.

	# The yielded callable returns the time elapsed so far; once the block exits,
	# it returns the final measurement.
	"""
	sw = StopWatch.start(clock=clock)
	cell = []
	def inspect(sw=sw, cell=cell):
		if cell:
			return cell[0]
		return sw.elapsed(Type)

	try:
		yield inspect
	finally:
		cell.append(sw.elapsed(Type))
