"""
# Pattern based formatting and parsing.

#!syntax/python
	f = pattern.Formatter("dd/MM/yyyy HH:mm:ss", zone)
	f.format(types.Instant.parse("2007-12-03T10:15:30Z"))
	ldt = f.parse("03/12/2007 10:15:30")

# [ Letters ]
# /`y`/
	# Year; `yy` is the two digit year based at 2000.
# /`M`/
	# Month of year.
# /`d`/
	# Day of month.
# /`H`/
	# Hour of day.
# /`m`/
	# Minute of hour.
# /`s`/
	# Second of minute.
# /`S`/
	# Fraction of second; the number of letters is the number of digits.

# The number of letters is the padded width. When parsing, a single letter
# accepts one or more digits and wider runs require exactly that many; years
# require at least that many. Text between single quotes is literal and `''`
# is a single quote. Any other ASCII letter is reserved.

# [ Zones ]

# Zone-naive values are formatted as stored; the formatter's zone is ignored.
# Instants and zoned date-times are projected into the formatter's zone, and an
# instant cannot be formatted without one.
"""
from . import core
from . import types

letters = {
	'y': 'year',
	'M': 'month',
	'd': 'day',
	'H': 'hour',
	'm': 'minute',
	's': 'second',
	'S': 'fraction',
}

# Fields read by &format.
readers = {
	'year': 'year',
	'month': 'month_of_year',
	'day': 'day_of_month',
	'hour': 'hour_of_day',
	'minute': 'minute_of_hour',
	'second': 'second_of_minute',
	'fraction': 'nano_of_second',
}

widths = {
	'year': 9,
	'month': 2,
	'day': 2,
	'hour': 2,
	'minute': 2,
	'second': 2,
	'fraction': 9,
}

date_fields = frozenset(('year', 'month', 'day'))
time_fields = frozenset(('hour', 'minute', 'second', 'fraction'))

# Base of two digit years.
century = 2000

@core.struct()
class Directive(object):
	"""
	# A field reference in a &Pattern.
	"""
	letter: (str)
	field: (str)
	width: (int)

	@property
	def reduced(self) -> bool:
		"""
		# Whether the directive is the two digit year.
		"""
		return self.field == 'year' and self.width == 2

	@property
	def minimum(self) -> int:
		return self.width

	@property
	def variable(self) -> bool:
		"""
		# Whether the number of parsed digits is unbounded.
		"""
		return self.width == 1 or (self.field == 'year' and not self.reduced)

@core.struct()
class Pattern(object):
	"""
	# A compiled pattern: literal strings and &Directive instances.
	"""
	source: (str)
	items: (tuple)

	@property
	def fields(self):
		return frozenset(x.field for x in self.items if isinstance(x, Directive))

	def __str__(self):
		return self.source

	def format(self, value, zone=None) -> str:
		return format(value, self, zone)

	def parse(self, text:str):
		return parse(text, self)

def _letter_run(source, i):
	c = source[i]
	j = i
	while j < len(source) and source[j] == c:
		j += 1
	return j

def _quoted(source, i):
	# Returns the literal text and the index following the closing quote.
	j = i + 1
	buf = []
	while True:
		if j >= len(source):
			raise core.PatternError(source, i, "unterminated quote")
		if source[j] == "'":
			if source[j+1:j+2] == "'":
				buf.append("'")
				j += 2
				continue
			return ''.join(buf), j + 1
		buf.append(source[j])
		j += 1

@core.cachedcalls(64)
def compile(source:str) -> Pattern:
	"""
	# Compile the pattern &source; &core.PatternError when invalid.
	"""
	if not isinstance(source, str):
		raise TypeError("pattern must be a str, not " + type(source).__name__)

	items = []
	def literal(text):
		if items and isinstance(items[-1], str):
			items[-1] += text
		elif text:
			items.append(text)

	i = 0
	while i < len(source):
		c = source[i]
		if c == "'":
			if source[i+1:i+2] == "'":
				literal("'")
				i += 2
			else:
				text, i = _quoted(source, i)
				literal(text)
		elif c.isascii() and c.isalpha():
			if c not in letters:
				raise core.PatternError(source, i, "unknown pattern letter %r" %(c,))
			field = letters[c]
			j = _letter_run(source, i)
			width = j - i
			if width > widths[field]:
				raise core.PatternError(source, i, "too many pattern letters %r" %(c,))
			items.append(Directive(c, field, width))
			i = j
		else:
			literal(c)
			i += 1

	return Pattern(source, tuple(items))

def _project(value, zone):
	# Instants and zoned values are converted into the target zone.
	if isinstance(value, types.Instant):
		if zone is not None:
			return value.at_zone(zone)
	elif isinstance(value, types.ZonedDateTime):
		if zone is not None:
			return value.with_zone_same_instant(zone)
	return value

def _render(directive, value):
	if directive.field == 'fraction':
		return ("%09d" %(value,))[:directive.width]
	if directive.reduced:
		return "%02d" %(value % 100,)

	digits = str(abs(value)).rjust(directive.width, '0')
	if value < 0:
		return '-' + digits
	return digits

def format(value, pattern, zone=None) -> str:
	"""
	# Format &value using the &pattern, a string or a compiled &Pattern.

	# &core.UnsupportedFieldError is raised when the pattern refers to a field
	# that the value does not have; an &types.Instant has no fields without a &zone.
	"""
	if isinstance(pattern, str):
		pattern = compile(pattern)

	subject = _project(value, zone)
	out = []
	for item in pattern.items:
		if isinstance(item, str):
			out.append(item)
		else:
			out.append(_render(item, subject.get(readers[item.field])))
	return ''.join(out)

def _digits(text, start, limit):
	# Index following the ASCII digits at &start, at most &limit of them.
	i = start
	end = min(len(text), start + limit)
	while i < end and '0' <= text[i] <= '9':
		i += 1
	return i

def _reserved(items, index):
	# Digits required by the fixed width directives adjacent to &index.
	total = 0
	for item in items[index+1:]:
		if not isinstance(item, Directive) or item.variable:
			break
		total += item.width
	return total

def scan(text:str, pattern:Pattern):
	"""
	# Parse &text into a dictionary of the fields referenced by &pattern.
	"""
	if not isinstance(text, str):
		raise TypeError("text must be a str, not " + type(text).__name__)

	fields = {}
	pos = 0
	for index, item in enumerate(pattern.items):
		if isinstance(item, str):
			if not text.startswith(item, pos):
				raise core.ParseError(text, pattern.source, pos, "expected %r" %(item,))
			pos += len(item)
			continue

		start = pos
		sign = 1
		if item.field == 'year' and not item.reduced and text[pos:pos+1] in ('-', '+'):
			sign = -1 if text[pos] == '-' else 1
			pos += 1

		if item.variable:
			# Digits beyond the width of the field are left unparsed.
			last = _digits(text, pos, widths[item.field])
			end = max(pos + item.minimum, last - _reserved(pattern.items, index))
			end = min(end, last)
		else:
			end = _digits(text, pos, item.width)

		if end - pos < item.minimum:
			raise core.ParseError(text, pattern.source, start, "expected %d digits for %s" %(item.minimum, item.field))

		digits = text[pos:end]
		if item.field == 'fraction':
			v = int(digits.ljust(9, '0'))
		else:
			v = sign * int(digits)
			if item.reduced:
				v += century

		if item.field in fields and fields[item.field] != v:
			raise core.ParseError(text, pattern.source, start, "conflicting values for " + item.field)
		fields[item.field] = v
		pos = end

	if pos != len(text):
		raise core.ParseError(text, pattern.source, pos, "unparsed text remains")
	return fields

def build(text, pattern, fields):
	"""
	# Construct the civil value described by the parsed &fields.
	"""
	present = set(fields)
	date = present & date_fields
	time = present & time_fields

	if date and date != date_fields:
		missing = ', '.join(sorted(date_fields - date))
		raise core.ParseError(text, pattern.source, reason="incomplete date; missing " + missing)
	if time and 'hour' not in time:
		raise core.ParseError(text, pattern.source, reason="incomplete time; missing hour")
	if not date and not time:
		raise core.ParseError(text, pattern.source, reason="no date or time fields")

	try:
		d = t = None
		if date:
			d = types.LocalDate(fields['year'], fields['month'], fields['day'])
		if time:
			t = types.LocalTime(
				fields['hour'],
				fields.get('minute', 0),
				fields.get('second', 0),
				fields.get('fraction', 0),
			)
	except core.RangeError as err:
		raise core.ParseError(text, pattern.source, reason=str(err)) from err

	if d is not None and t is not None:
		return types.LocalDateTime(d, t)
	return d if d is not None else t

def parse(text:str, pattern):
	"""
	# Parse &text with &pattern, a string or a compiled &Pattern.

	# The result is a &types.LocalDate, &types.LocalTime, or &types.LocalDateTime
	# depending on the fields present in the pattern. Parsing is strict; a day
	# beyond the end of the month is an error rather than being adjusted.
	"""
	if isinstance(pattern, str):
		pattern = compile(pattern)
	return build(text, pattern, scan(text, pattern))

class Formatter(object):
	"""
	# A compiled &Pattern with an optional target zone.

	# [ Properties ]
	# /pattern/
		# The compiled &Pattern.
	# /zone/
		# The zone that instants and zoned values are projected into; &None when absent.
	"""
	__slots__ = ('pattern', 'zone')

	def __init__(self, pattern, zone=None):
		self.pattern = compile(pattern) if isinstance(pattern, str) else pattern
		self.zone = zone

	def __repr__(self):
		if self.zone is None:
			return "%s(%r)" %(self.__class__.__name__, self.pattern.source)
		return "%s(%r, %r)" %(self.__class__.__name__, self.pattern.source, self.zone)

	def __eq__(self, operand):
		if not isinstance(operand, Formatter):
			return NotImplemented
		return (self.pattern, self.zone) == (operand.pattern, operand.zone)

	def __hash__(self):
		return hash((self.pattern, self.zone))

	def with_zone(self, zone):
		"""
		# A formatter with the same pattern and the given &zone.
		"""
		return self.__class__(self.pattern, zone)

	def format(self, value) -> str:
		return format(value, self.pattern, self.zone)

	def parse(self, text, Type=None):
		"""
		# Parse &text. When &Type is given, the value is resolved into that type;
		# &types.ZonedDateTime and &types.Instant require the formatter's zone.
		"""
		value = parse(text, self.pattern)
		if Type is None or isinstance(value, Type):
			return value

		def mismatch(reason):
			return core.ParseError(text, self.pattern.source, reason=reason)

		if Type is types.LocalDate:
			if isinstance(value, types.LocalDateTime):
				return value.date
			raise mismatch("text does not describe a date")
		elif Type is types.LocalTime:
			if isinstance(value, types.LocalDateTime):
				return value.time
			raise mismatch("text does not describe a time")
		elif Type in (types.ZonedDateTime, types.Instant):
			if not isinstance(value, types.LocalDateTime):
				raise mismatch("text does not describe a date and time")
			if self.zone is None:
				raise mismatch("no zone available to resolve the local date-time")
			zdt = types.ZonedDateTime.of(value, self.zone)
			return zdt if Type is types.ZonedDateTime else zdt.to_instant()
		elif Type is types.LocalDateTime:
			raise mismatch("text does not describe a date and time")

		raise TypeError("cannot parse into " + getattr(Type, '__name__', repr(Type)))
