"""
# Elapsed amounts between two values.

#!syntax/python
	start = types.Instant.parse("2007-12-03T04:15:30Z")
	d = duration.between(start, start.plus(7, 'day'))
	assert d.to_days() == 7
	assert duration.count(types.LocalDate.of(2024, 1, 31), types.LocalDate.of(2024, 2, 29), 'month') == 0

# &between measures the exact time with days of 86400 seconds. Instants and
# zoned date-times are measured on the timeline and may be mixed. The civil
# types are measured as if their fields were UTC and must be of the same type;
# a &types.LocalDate is measured from the start of its day.

# &count measures complete calendar units; months and years follow the calendar.
"""
from . import core
from . import units
from . import types
from . import gregorian

def _timeline(value):
	if isinstance(value, types.Instant):
		return value
	elif isinstance(value, types.ZonedDateTime):
		return value.to_instant()
	return None

def _civil_nanos(value):
	# Nanoseconds of the civil value with its fields read as UTC.
	if isinstance(value, types.LocalDateTime):
		return value.to_instant(types.utc).to_epoch_nanos()
	elif isinstance(value, types.LocalDate):
		return value.to_epoch_day() * units.nanos_per_day
	elif isinstance(value, types.LocalTime):
		return value.to_nano_of_day()
	return None

def _mismatch(start, stop):
	return TypeError("cannot measure from %s to %s" %(type(start).__name__, type(stop).__name__))

def nanoseconds(start, stop) -> int:
	"""
	# The exact number of nanoseconds from &start to &stop.
	"""
	a = _timeline(start)
	b = _timeline(stop)
	if a is not None and b is not None:
		return b.to_epoch_nanos() - a.to_epoch_nanos()
	if a is not None or b is not None or type(start) is not type(stop):
		raise _mismatch(start, stop)

	x = _civil_nanos(start)
	if x is None:
		raise _mismatch(start, stop)
	return _civil_nanos(stop) - x

def between(start, stop) -> types.Duration:
	"""
	# The &types.Duration of &stop minus &start; negative when &stop precedes &start.
	"""
	return types.Duration.of_nanos(nanoseconds(start, stop))

def _local_key(value):
	# Fields deciding whether the final month is complete.
	if isinstance(value, types.LocalDateTime):
		return (value.year, value.month, value.day, value.time.to_nano_of_day())
	return (value.year, value.month, value.day)

def count(start, stop, unit) -> int:
	"""
	# The number of complete &unit from &start to &stop truncated toward zero.

	# The &stop of a zoned count is converted into the zone of &start; calendar
	# units are then counted on the local date-times and time units on the timeline.
	"""
	u = units.identify(unit)
	subject = type(start).__name__

	if isinstance(start, types.ZonedDateTime):
		end = _timeline(stop)
		if end is None:
			raise _mismatch(start, stop)
		if u in units.timed:
			return units.truncate(nanoseconds(start, stop), units.exact[u])
		return count(start.local, end.at_zone(start.zone).local, u)

	if isinstance(start, types.Instant):
		if u not in units.timed and u != 'day':
			raise core.UnsupportedUnitError(u, subject)
		return units.truncate(nanoseconds(start, stop), units.exact[u])

	if type(start) is not type(stop) or _civil_nanos(start) is None:
		raise _mismatch(start, stop)

	if isinstance(start, types.LocalTime):
		if u not in units.timed:
			raise core.UnsupportedUnitError(u, subject)
		return units.truncate(nanoseconds(start, stop), units.exact[u])

	if isinstance(start, types.LocalDate) and u in units.timed:
		raise core.UnsupportedUnitError(u, subject)

	if u in units.calendrical:
		months = gregorian.months_between(_local_key(start), _local_key(stop))
		return units.truncate(months, units.calendrical[u])

	return units.truncate(nanoseconds(start, stop), units.exact[u])
