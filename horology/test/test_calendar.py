import operator
from .. import calendar as module

days = operator.itemgetter(1)
months = operator.itemgetter(0)

quarter = ('quarter', 1, (31, 28, 31))

def test_aggregate_leaf(test):
	agg = module.aggregate(quarter)
	test/agg[2] == ((0, 1, 2, 3), (0, 31, 59, 90))
	test/agg[3] == (3, 90)
	test/agg[4] == (3, 90)

def test_aggregate_nodes(test):
	agg = module.aggregate(('half', 2, (quarter, ('second', 1, (30, 31, 30)))))
	test/agg[3] == (6, 181)
	test/agg[4] == (12, 362)

def test_resolve_days(test):
	agg = module.aggregate(quarter)
	test/module.resolve((days, months), 0, agg) == (0, 0, 0, 1)
	test/module.resolve((days, months), 31, agg) == (0, 1, 0, 1)
	test/module.resolve((days, months), 89, agg) == (0, 2, 30, 1)
	# cycles are counted
	test/module.resolve((days, months), 90 + 32, agg) == (1, 1, 1, 1)

def test_resolve_months(test):
	agg = module.aggregate(('half', 1, (quarter, ('second', 1, (30, 31, 30)))))
	# Months to days; the span is the days in the month.
	test/module.resolve((months, days), 4, agg) == (0, 120, 0, 31)

if __name__ == '__main__':
	import sys; from . import library as libtest
	libtest.execute(sys.modules[__name__])
