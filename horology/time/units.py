"""
# Identifiers of the units and fields accepted by the value types.

# Units are named by their singular English name, `'day'`, `'hour'`; &identify
# normalizes the common variations, `'DAYS'` and `'hours'`, to that form.
# Fields are the names accepted by the `get` methods of &.types.

# [ Elements ]
# /exact/
	# Nanoseconds in each unit of fixed length. Days are exactly 86400 seconds.
# /calendrical/
	# Months in each unit whose length depends on the calendar.
# /ranges/
	# Inclusive domains of the fields with fixed bounds.
"""
from . import core

nanos_per_second = 1000000000
seconds_per_day = 86400
nanos_per_day = nanos_per_second * seconds_per_day

exact = {
	'nanosecond': 1,
	'microsecond': 1000,
	'millisecond': 1000000,
	'second': nanos_per_second,
	'minute': 60 * nanos_per_second,
	'hour': 3600 * nanos_per_second,
	'day': nanos_per_day,
	'week': 7 * nanos_per_day,
}

calendrical = {
	'month': 1,
	'year': 12,
}

# Units measured in days; wall clock units for zoned arithmetic.
dated = {
	'day': 1,
	'week': 7,
}

# Units shorter than a day.
timed = frozenset(k for k in exact if k not in dated)

names = tuple(exact) + tuple(calendrical)

abbreviations = {
	'nano': 'nanosecond',
	'micro': 'microsecond',
	'milli': 'millisecond',
}

def identify(unit, names=frozenset(names)):
	"""
	# Normalize the unit identifier &unit to its singular, lower case name.

	#!syntax/python
		assert identify('DAYS') == 'day'
		assert identify('nanos') == 'nanosecond'
	"""
	u = unit.lower()
	if u not in names and u.endswith('s'):
		u = u[:-1]
	u = abbreviations.get(u, u)
	if u not in names:
		raise core.UnsupportedUnitError(unit, None)
	return u

year_limit = 999999999
offset_limit = 18 * 60

ranges = {
	'year': (-year_limit, year_limit),
	'month_of_year': (1, 12),
	'day_of_month': (1, 31),
	'day_of_week': (1, 7),
	'day_of_year': (1, 366),
	'hour_of_day': (0, 23),
	'minute_of_hour': (0, 59),
	'second_of_minute': (0, 59),
	'nano_of_second': (0, nanos_per_second - 1),
	'nano_of_day': (0, nanos_per_day - 1),
	'second_of_day': (0, seconds_per_day - 1),
	'offset_minutes': (-offset_limit, offset_limit),
	# 1970-01-01T00:00:00Z relative bounds of the supported years.
	'instant_seconds': (-31557014167219200, 31556889864403199),
}

fields = frozenset(ranges) | {
	'epoch_day',
	'offset_seconds',
	'micro_of_second',
	'milli_of_second',
}

def check(field, value, minimum=None, maximum=None, ranges=ranges):
	"""
	# Raise &core.RangeError if &value is outside of the domain of &field.
	# &minimum and &maximum override the bounds listed in &ranges.
	"""
	if minimum is None:
		minimum, maximum = ranges[field]

	if value.__class__ is not int:
		if isinstance(value, bool) or not isinstance(value, int):
			raise TypeError("%s must be an integer, not %s" %(field, type(value).__name__))

	if not (minimum <= value <= maximum):
		raise core.RangeError(field, value, minimum, maximum)
	return value

def truncate(n, d):
	"""
	# Integer division of &n by &d rounding toward zero.
	"""
	q = abs(n) // d
	return -q if n < 0 else q
