"""
# Primary public module.

# Provides access to the time types, the collaborators built on them, and
# formatting shortcuts over raw integers.
"""
from . import system
from .types import CalendarInstant, ElapsedTime, PreciseElapsedTime
from .clock import StopWatch, stopwatch
from .stamps import TimeStamp
from .epoch import EPOCH_OFFSET
from .system import Clock
from . import format as libformat

__shortname__ = 'libhorology'

def now(clock=system.real) -> CalendarInstant:
	"""
	# Get the current point in time according to the system's real clock as a &CalendarInstant.
	"""
	return CalendarInstant.now(clock=clock)

def time_format(milliseconds, template=libformat.calendar_template) -> str:
	"""
	# Format the &milliseconds elapsed since the start of year zero.
	"""
	return CalendarInstant(milliseconds).format(template)

def unix_time_format(milliseconds, template=libformat.calendar_template) -> str:
	"""
	# Format the &milliseconds elapsed since the Unix epoch.
	"""
	return CalendarInstant.from_unix_milliseconds(milliseconds).format(template)

def precise_time_format(nanoseconds, template=libformat.duration_template) -> str:
	"""
	# Format a quantity of &nanoseconds with nanosecond resolution.
	"""
	return PreciseElapsedTime(nanoseconds).format(template)
