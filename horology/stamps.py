"""
# Creation and modification tracking.
"""
import logging
from . import system
from . import types

log = logging.getLogger(__name__)

class TimeStamp(object):
	"""
	# Record of when something was created and last updated.

	# [ Properties ]
	# /created/
		# &types.CalendarInstant of the creation.
	# /updated/
		# &types.CalendarInstant of the latest &update.

	# Without a &created instant, the time stamp is created at the current reading of `clock`.
	"""
	__slots__ = ('created', 'updated')

	Instant = types.CalendarInstant

	def __init__(self, created=None, updated=None, clock=system.real):
		if created is None:
			created = self.Instant.now(clock=clock)
		self.created = self.Instant(created)
		self.updated = self.Instant(created if updated is None else updated)

	@classmethod
	def now(Class, clock=system.real):
		"""
		# Create a time stamp whose fields are the current time.
		"""
		return Class(Class.Instant.now(clock=clock))

	@classmethod
	def of(Class, instant):
		"""
		# Create a time stamp created and updated at &instant.
		"""
		return Class(instant)

	def update(self, clock=system.real):
		"""
		# Set &updated to the current time.
		"""
		self.updated = self.Instant.now(clock=clock)
		log.debug("time stamp updated at %d", self.updated)

	def _passed(self, instant, measure, clock):
		return instant.elapse(measure) < self.Instant.now(clock=clock)

	def elapsed_since_update(self, measure, clock=system.real) -> bool:
		"""
		# Whether more than &measure has elapsed since the last update.
		"""
		return self._passed(self.updated, measure, clock)

	def elapsed_since_created(self, measure, clock=system.real) -> bool:
		"""
		# Whether more than &measure has elapsed since the creation.
		"""
		return self._passed(self.created, measure, clock)

	def format_created(self) -> str:
		return self.created.format()

	def format_updated(self) -> str:
		return self.updated.format()

	def __eq__(self, ob):
		if not isinstance(ob, TimeStamp):
			return NotImplemented
		return (self.created, self.updated) == (ob.created, ob.updated)

	def __repr__(self):
		return "%s(%d, %d)" % (self.__class__.__name__, self.created, self.updated)
