"""
# Test harness primitives. Provides &Test, &Contention, &Absurdity, and &Fate along with
# &gather and &execute for running a test module directly.

#!/pl/python
	def test_feature(test):
		test/featurelib.functionality() == expectation
		test/ValueError ^ (lambda: featurelib.functionality(-1))
		with test/KeyError as exc:
			featurelib.lookup('absent')

	if __name__ == '__main__':
		import sys; from horology.test import library as libtest
		libtest.execute(sys.modules[__name__])
"""
import sys
import operator
import functools
import contextlib
import traceback

class Absurdity(Exception):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
		'__lshift__': 'contains',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Contentions are objects used by &Test objects to provide assertions.
	# Contentions are made by the true division operator of &Test instances,
	# and the comparison operators are passed on to the object being examined.

	# True division, "/", is used as it has high operator precedence that allows assertion
	# expressions to be constructed using minimal syntax that lends to readable failure
	# conditions.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	def _contend(self, opname, operator, latter):
		if bool(operator(self.object, latter)) == self.inverse:
			raise self.test.Absurdity(opname, self.object, latter, inverse=self.inverse)

	__hash__ = None

	##
	# Special cases for context manager exception traps.

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		test, x = self.test, self.object
		y = self.storage = val
		if isinstance(y, test.Fate):
			# Don't trap test Fates.
			return

		if not isinstance(y, x):
			raise self.test.Absurdity("isinstance", x, y)
		return True # Inhibit the raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called::

		#!/pl/python
			test/Exception ^ (lambda: subject())

		# Reads: "Test that 'Exception' is raised by 'subject'".
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

for opname, op in (
	('__eq__', operator.eq),
	('__ne__', operator.ne),
	('__lt__', operator.lt),
	('__gt__', operator.gt),
	('__le__', operator.le),
	('__ge__', operator.ge),
	('__mod__', operator.is_),
	('__lshift__', operator.contains),
):
	setattr(Contention, opname, functools.partialmethod(Contention._contend, opname, op))
del opname, op

class Fate(BaseException):
	"""
	# The Fate of a test. &Test.seal uses &Fate exceptions to describe the result of a unit test.
	"""

	# Abstract and impact.
	descriptors = {
		'return': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
	}

	line = None

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype

	@property
	def impact(self):
		return self.descriptors[self.subtype][1]

	@property
	def negative(self):
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Test(object):
	"""
	# An object that manages an individual test and its execution.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /subject/
		# The callable that performs a series of checks, using the &Test instance, that
		# determines the &fate.
	# /fate/
		# The conclusion of the Test; an instance of &Fate.
	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
	"""
	__slots__ = ('identifier', 'subject', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not isinstance(*args):
			raise self.Absurdity("isinstance", *args)

	def seal(self):
		"""
		# Seal the fate of the Test by executing the subject with the Test
		# instance as the only parameter. Exceptions are trapped and assigned
		# to &fate.
		"""
		try:
			with self.exits:
				self.subject(self)
			self.fate = self.Fate(None, subtype='return')
		except self.Fate as fate:
			self.fate = fate
		except Exception as err:
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
			tb = traceback.extract_tb(err.__traceback__)
			if tb:
				self.fate.line = tb[-1].lineno

	def skip(self, condition):
		"""
		# Skip the test given that the provided &condition is &True.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')

def gather(module, prefix='test_'):
	"""
	# Collect the functions in &module whose name starts with &prefix in
	# the order of their definition.
	"""
	tests = [
		(name, getattr(module, name))
		for name in dir(module)
		if name.startswith(prefix) and callable(getattr(module, name))
	]
	tests.sort(key=lambda x: x[1].__code__.co_firstlineno)
	return tests

def execute(module, stream=sys.stderr):
	"""
	# Run the tests of &module and report their fates to &stream.
	# Exits with a non-zero status when any test failed.
	"""
	failures = 0
	for name, subject in gather(module):
		test = Test(name, subject)
		test.seal()
		abstract = test.fate.descriptors[test.fate.subtype][0]
		stream.write("%s: %s\n" % (name, abstract))
		if test.fate.negative:
			failures += 1
			cause = test.fate.__cause__
			stream.write("\tline %s: %r\n" % (test.fate.line, cause if cause is not None else test.fate.content))

	raise SystemExit(1 if failures else 0)
