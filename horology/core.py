"""
# Exceptions raised by horology.

# Arithmetic and formatting are total; the only failures are constructors given a quantity
# below zero and a system clock reporting a time before the Unix epoch.
"""

class Error(Exception):
	"""
	# Base class for horology errors.
	"""

class NegativeQuantity(Error, ValueError):
	"""
	# Raised when a constructor would store a quantity below zero.

	# Calendar instants can not precede the start of year zero and durations are unsigned.
	# There is no partial construction; the caller is expected to validate inputs.

	# [ Properties ]
	# /quantity/
		# The rejected integer.
	# /unit/
		# The unit of &quantity.
	"""

	def __init__(self, quantity, unit):
		self.quantity = quantity
		self.unit = unit
		super().__init__(quantity, unit)

	def __str__(self):
		return "%d %ss is below zero" % (self.quantity, self.unit)

class ClockError(Error):
	"""
	# The system clock reported a point in time preceding the Unix epoch.
	"""

	def __init__(self, reading):
		self.reading = reading
		super().__init__(reading)

	def __str__(self):
		return "system clock read %d nanoseconds before the Unix epoch" % (-self.reading,)
