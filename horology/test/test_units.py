from .. import earth
from .. import metric

def test_earth(test):
	test/(earth.seconds_in_minute * earth.minutes_in_hour * earth.hours_in_day) == 86400

def test_sizes(test):
	ns = metric.sizes()
	test/ns['nanosecond'] == 1
	test/ns['microsecond'] == 1000
	test/ns['second'] == 10 ** 9
	test/ns['day'] == 86400 * (10 ** 9)

	ms = metric.sizes('millisecond')
	test/('nanosecond' in ms) == False
	test/('microsecond' in ms) == False
	test/ms['millisecond'] == 1
	test/ms['hour'] == 3_600_000

def test_sizes_nest(test):
	"""
	# Each unit divides the next larger unit evenly.
	"""
	sizes = metric.sizes()
	ordered = sorted(sizes.items(), key=lambda x: x[1])
	for (unit, size), (outer, outer_size) in zip(ordered, ordered[1:]):
		test/(outer_size % size) == 0
		test/(outer_size > size) == True

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
