"""
# Format and parse the ISO-8601 text forms of dates and times.

# Primarily this module exposes two functions: &parser and the `format_*` family.
# The functions work with plain integer fields so that &.types can use them
# without a cyclic import.

# While formatting can usually occur without error, parsing can raise a variety of
# errors. Parsing occurs in three stages, each with its own &core.ParseError subclass:

# /parse/
	# Match the grammar; &core.ParseError.
# /structure/
	# Convert the matched strings into integers; &core.StructureError.
# /integrity/
	# Validate the integers against their domains; &core.IntegrityError.

# Exceptions raised by a stage are chained as the `__cause__` of the error.

#!syntax/python
	parse = format.parser('datetime')
	fields = parse("2007-12-03T04:15:30")
	assert fields['day'] == 3
"""
import re
import functools

from . import core
from . import units
from . import gregorian

date_model = r'(?P<year>[+-]\d{4,9}|\d{4})-(?P<month>\d{2})-(?P<day>\d{2})'
time_model = r'(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?'
offset_model = r'(?P<offset>Z|[+-]\d{2}:\d{2})'
region_model = r'(?:\[(?P<zone>[^\[\]]+)\])?'

models = {
	'date': date_model,
	'time': time_model,
	'datetime': date_model + '[Tt]' + time_model,
	'instant': date_model + '[Tt]' + time_model + offset_model,
	'zoned': date_model + '[Tt]' + time_model + offset_model + region_model,
}

expressions = {
	k: re.compile(v, re.ASCII)
	for k, v in models.items()
}

def parse_model(fmt, text):
	if not isinstance(text, str):
		raise TypeError("text must be a str, not " + type(text).__name__)

	m = expressions[fmt].fullmatch(text)
	if m is None:
		raise core.ParseError(text, format=fmt, reason="text does not match " + fmt)
	return m.groupdict()

def offset_minutes(text):
	"""
	# Convert the offset text, `Z`, `+HH:MM`, into minutes east of UTC.
	"""
	if text in ('Z', 'z'):
		return 0

	sign = -1 if text[0] == '-' else 1
	hours, minutes = text[1:].split(':')
	return sign * ((int(hours) * 60) + int(minutes))

def fraction_nanoseconds(text):
	"""
	# Convert the decimal fraction digits into nanoseconds.
	"""
	return int(text.ljust(9, '0'))

def transform(struct):
	fields = {}
	for k, v in struct.items():
		if v is None or k == 'zone':
			fields[k] = v
		elif k == 'offset':
			fields[k] = offset_minutes(v)
		elif k == 'fraction':
			fields[k] = fraction_nanoseconds(v)
		else:
			fields[k] = int(v)

	if 'hour' in fields:
		if fields['second'] is None:
			fields['second'] = 0
		if fields['fraction'] is None:
			fields['fraction'] = 0
	return fields

def validate(fields, check=units.check):
	if 'year' in fields:
		gregorian.validate(fields['year'], fields['month'], fields['day'])
	if 'hour' in fields:
		check('hour_of_day', fields['hour'])
		check('minute_of_hour', fields['minute'])
		check('second_of_minute', fields['second'])
	if fields.get('offset') is not None:
		check('offset_minutes', fields['offset'])
	return fields

def _parse(fun, format):
	def EXCEPTION(src, fun=fun, format=format):
		try:
			return fun(format, src)
		except core.ParseError:
			raise
		except Exception as e:
			raise core.ParseError(src, format=format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _structure(fun, format):
	def EXCEPTION(src, struct):
		try:
			return fun(struct)
		except core.StructureError:
			raise
		except Exception as e:
			raise core.StructureError(src, format=format) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

def _integrity(fun, format):
	def EXCEPTION(src, fields):
		try:
			return fun(fields)
		except core.IntegrityError:
			raise
		except Exception as e:
			raise core.IntegrityError(src, format=format, reason=str(e)) from e
	functools.update_wrapper(EXCEPTION, fun)
	return EXCEPTION

@core.cachedcalls(None)
def parser(fmt):
	"""
	# Given a format identifier, `'date'`, `'time'`, `'datetime'`, `'instant'`, or `'zoned'`,
	# return the function that parses the text into a dictionary of integer fields.
	"""
	if fmt not in models:
		raise LookupError("unknown format: " + repr(fmt))

	def parser_composition(
		text,
		integ=_integrity(validate, fmt),
		struct=_structure(transform, fmt),
		parse=_parse(parse_model, fmt),
	):
		return integ(text, struct(text, parse(text)))
	return parser_composition

def format_year(year):
	if year < 0:
		sign = '-'
	elif year > 9999:
		sign = '+'
	else:
		sign = ''
	return sign + str(abs(year)).rjust(4, '0')

def format_date(year, month, day):
	"""
	# `YYYY-MM-DD`; years beyond four digits carry a sign.
	"""
	return "%s-%02d-%02d" %(format_year(year), month, day)

def format_fraction(nanosecond):
	"""
	# Decimal digits of the &nanosecond in groups of three.
	"""
	if nanosecond % 1000000 == 0:
		return "%03d" %(nanosecond // 1000000,)
	elif nanosecond % 1000 == 0:
		return "%06d" %(nanosecond // 1000,)
	else:
		return "%09d" %(nanosecond,)

def format_time(hour, minute, second, nanosecond, seconds=False):
	"""
	# `HH:MM`, `HH:MM:SS`, or `HH:MM:SS.fff`.
	# The seconds are omitted when zero unless &seconds is &True.
	"""
	s = "%02d:%02d" %(hour, minute)
	if second or nanosecond or seconds:
		s += ":%02d" %(second,)
		if nanosecond:
			s += '.' + format_fraction(nanosecond)
	return s

def format_offset(minutes):
	"""
	# `Z` for UTC; otherwise, `+HH:MM` or `-HH:MM`.
	"""
	if minutes == 0:
		return 'Z'
	sign = '-' if minutes < 0 else '+'
	return "%s%02d:%02d" %((sign,) + divmod(abs(minutes), 60))

def format_duration(seconds, nanosecond):
	"""
	# ISO-8601 duration text, `PT8H6M12.345S`, of a span given as
	# floored seconds and a positive nanosecond adjustment.

	# Negative spans carry the sign on every component: `PT-1H-30M`.
	"""
	total = (seconds * units.nanos_per_second) + nanosecond
	if total == 0:
		return 'PT0S'

	sign = '-' if total < 0 else ''
	secs, ns = divmod(abs(total), units.nanos_per_second)
	hours, secs = divmod(secs, 3600)
	minutes, secs = divmod(secs, 60)

	parts = ['PT']
	if hours:
		parts.append("%s%dH" %(sign, hours))
	if minutes:
		parts.append("%s%dM" %(sign, minutes))
	if secs or ns or len(parts) == 1:
		s = "%s%d" %(sign, secs)
		if ns:
			s += '.' + ("%09d" %(ns,)).rstrip('0')
		parts.append(s + 'S')
	return ''.join(parts)
