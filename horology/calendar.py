"""
# Calendar cycle aggregation and address resolution.

# A cycle is described as nested nodes, `(title, repeat, sub)`, where &sub is either a
# sequence of month lengths (a leaf) or a sequence of nodes. &aggregate annotates the
# description with the months and days consumed by each node so that &resolve can
# descend to a leaf without scanning individual years.

# Used internally by &.gregorian.
"""
import itertools

def aggregate(node, accumulate=itertools.accumulate, chain=itertools.chain):
	"""
	# Recursively annotate &node with its totals.

	# Returns `(title, repeat, sub, (months, days), (repeat * months, repeat * days))`
	# where &sub is, for leaves, a pair of cumulative month and day tuples.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		days = tuple(accumulate(chain((0,), sub)))
		months = tuple(range(len(sub) + 1))
		inner = (months, days)
		once = (len(sub), days[-1])
	else:
		inner = tuple(aggregate(x) for x in sub)
		once = (
			sum(x[-1][0] for x in inner),
			sum(x[-1][1] for x in inner),
		)

	return (title, repeat, inner, once, (repeat * once[0], repeat * once[1]))

def resolve(selectors, address, calendar):
	"""
	# Find the output address of the input &address within &calendar.

	# &selectors is a pair of callables selecting the input and output fields of a
	# `(months, days)` pair; selecting days then months resolves a day count to
	# a month address, and the reverse resolves months to days.

	# Returns `(cycles, output, remainder, span)`:

	# /cycles/
		# The number of complete calendar cycles consumed by &address.
	# /output/
		# The output address of the leaf part containing the input address.
	# /remainder/
		# The input quantity not consumed; the day of the month.
	# /span/
		# The size of the final part in output units; the days in the month when
		# resolving months.
	"""
	select_in, select_out = selectors
	output = 0

	cycles, address = divmod(address, select_in(calendar[-1]))

	node = calendar
	while not isinstance(node[2][0][0], int):
		for sub in node[2]:
			total = select_in(sub[-1])
			if address < total:
				# Partially consumed; skip whole repetitions and descend.
				once = sub[-2]
				count, address = divmod(address, select_in(once))
				output += count * select_out(once)
				node = sub
				break

			address -= total
			output += select_out(sub[-1])
		else:
			raise RuntimeError("address exceeds the calendar cycle")

	inputs = select_in(node[2])
	outputs = select_out(node[2])
	for i in range(len(inputs) - 1):
		if inputs[i+1] > address:
			break

	return (cycles, output + outputs[i], address - inputs[i], outputs[i+1] - outputs[i])
