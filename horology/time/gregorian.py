"""
# Proleptic Gregorian calendar functions and data.

# Dates are addressed by the number of days since 0000-01-01, the first day of a
# Gregorian cycle; &epoch_day_from_date and &date_from_epoch_day translate to and
# from the 1970-01-01 datum used by the value types.

# The functions here are pure and locale independent. The day of month
# rules, &days_in_month, &clamp, and &add_months, are isolated from formatting so
# that they can be checked on their own.
"""
import bisect
import itertools
import operator
from . import core
from . import units

# Number of years in a Gregorian cycle; the leap year pattern repeats every 400 years.
years_in_cycle = 400
months_in_year = 12

# Month lengths of common and leap years.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:]

# The 400 year cycle as nested `(title, repeat, parts)` nodes whose leaves are
# month lengths. A century is 24 four year runs and a final run whose leap year
# is dropped, except for the first century of the cycle.
quadrennium = (
	('leap', 1, calendar_leap),
	('common', 3, calendar_year)
)

cycle = (
	'cycle', 1, (
		('leading-century', 25, quadrennium),
		('centuries', 3, (
			('century-start', 4, calendar_year),
			('quadrennia', 24, quadrennium),
		)),
	)
)

def aggregate(node, accumulate=itertools.accumulate, chain=itertools.chain):
	"""
	# Annotate &node with month and day totals.

	# The result is `(title, repeat, parts, once, total)` where `once` is the
	# `(months, days)` pair of a single repetition and `total` is multiplied by
	# `repeat`. Leaf parts become the running month and day offsets of the year.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		parts = (tuple(range(len(sub) + 1)), tuple(accumulate(chain((0,), sub))))
		once = (parts[0][-1], parts[1][-1])
	else:
		parts = tuple(map(aggregate, sub))
		once = (sum(x[-1][0] for x in parts), sum(x[-1][1] for x in parts))

	return (title, repeat, parts, once, (repeat * once[0], repeat * once[1]))

calendar = aggregate(cycle)

def _descend(node, measure, project, address):
	# (projected offset, unconsumed remainder, projected size) of &address in &node.
	parts = node[2]
	if isinstance(parts[0][0], int):
		inputs = measure(parts)
		outputs = project(parts)
		i = bisect.bisect_right(inputs, address) - 1
		return (outputs[i], address - inputs[i], outputs[i+1] - outputs[i])

	offset = 0
	for part in parts:
		span = measure(part[4])
		if address < span:
			repeats, address = divmod(address, measure(part[3]))
			inner, remainder, size = _descend(part, measure, project, address)
			return (offset + (repeats * project(part[3])) + inner, remainder, size)
		address -= span
		offset += project(part[4])

	raise RuntimeError("address exceeds the calendar cycle")

def resolve(selectors, address, calendar=calendar):
	"""
	# Translate &address, a count of months or days, within the calendar.

	# &selectors is the `(measure, project)` pair of item getters; `measure`
	# reads the quantity that &address counts and `project` the quantity returned.

	# Returns `(cycles, offset, remainder, size)`. With days projected onto months,
	# `remainder` is the zero based day of the month and `size` is the length of the month.
	"""
	measure, project = selectors
	cycles, address = divmod(address, measure(calendar[-1]))
	return (cycles,) + _descend(calendar, measure, project, address)

_by_months = (operator.itemgetter(0), operator.itemgetter(1))
_by_days = (operator.itemgetter(1), operator.itemgetter(0))

# Total number of months and days in a Gregorian cycle.
months_in_cycle = calendar[-1][0]
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	# Whether &y has a February 29; every fourth year except centuries not divisible by 400.
	"""
	return y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0)

def days_in_month(year, month):
	"""
	# The number of days in the &month, `1` through `12`, of &year.
	"""
	if month == 2 and year_is_leap(year):
		return 29
	return calendar_year[month-1]

def days_in_year(year):
	return 366 if year_is_leap(year) else 365

def days_from_date(date, resolve=resolve):
	"""
	# Convert a Gregorian date, `(year, month, day)`, to the number of days
	# since 0000-01-01.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, size = resolve(_by_months, (month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

def date_from_days(days, resolve=resolve):
	"""
	# Convert the number of days since 0000-01-01 into a Gregorian date, `(year, month, day)`.
	"""
	cycles, months, day, size = resolve(_by_days, days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

# Days between 0000-01-01 and 1970-01-01.
epoch_offset = days_from_date((1970, 1, 1))

def epoch_day_from_date(date):
	"""
	# Days since 1970-01-01 of the given `(year, month, day)`.
	"""
	return days_from_date(date) - epoch_offset

def date_from_epoch_day(epoch_day):
	"""
	# The `(year, month, day)` of the given days since 1970-01-01.
	"""
	return date_from_days(epoch_day + epoch_offset)

def day_of_week(epoch_day):
	"""
	# ISO day of week of the epoch day; Monday is `1`, Sunday is `7`.
	# 1970-01-01 was a Thursday.
	"""
	return ((epoch_day + 3) % 7) + 1

def day_of_year(date):
	year, month, day = date
	table = calendar_leap if year_is_leap(year) else calendar_year
	return sum(table[:month-1]) + day

def validate(year, month, day):
	"""
	# Raise &core.RangeError if the date does not exist.
	"""
	units.check('year', year)
	units.check('month_of_year', month)
	units.check('day_of_month', day, 1, days_in_month(year, month))
	return (year, month, day)

def clamp(year, month, day):
	"""
	# Reduce &day to the last day of the month when it exceeds the month's length.
	"""
	return (year, month, min(day, days_in_month(year, month)))

def add_months(date, months):
	"""
	# Move the date by the given number of &months keeping the day of month.
	# The day is clamped to the length of the target month:

	#!syntax/python
		assert add_months((2024, 1, 31), 1) == (2024, 2, 29)
	"""
	year, month, day = date
	year, moy = divmod((year * months_in_year) + (month - 1) + months, months_in_year)
	return clamp(year, moy + 1, day)

def months_between(start, stop):
	"""
	# The number of whole months from &start to &stop, truncated toward zero.
	# Both dates are `(year, month, day)` tuples optionally followed by further
	# fields that decide completeness of the final month.
	"""
	packed = ((stop[0] - start[0]) * months_in_year) + (stop[1] - start[1])
	if packed > 0 and stop[2:] < start[2:]:
		packed -= 1
	elif packed < 0 and stop[2:] > start[2:]:
		packed += 1
	return packed
