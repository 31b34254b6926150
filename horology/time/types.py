"""
# Immutable date and time value types.

#!syntax/python
	d = types.LocalDate.of(2007, 12, 3)
	dt = d.at_time(10, 15, 30)
	assert str(dt.plus(1, 'week')) == "2007-12-10T10:15:30"

	i = types.Instant.parse("2007-12-03T10:15:30Z")
	assert i.to_epoch_milli() == 1196676930000

# The civil types, &LocalDate, &LocalTime, and &LocalDateTime, carry no offset and
# are never shifted by a zone. &Instant is a point on the UTC timeline, and
# &ZonedDateTime joins the civil fields with the &Offset chosen by its zone.

# Values compare structurally and values of different types are never equal.
# &ZonedDateTime is ordered by its instant.

# [ Elements ]
# /Offset/
	# Whole minute displacement from UTC.
# /LocalTime/
	# Time of day with nanosecond precision.
# /LocalDate/
	# Proleptic Gregorian date.
# /LocalDateTime/
	# Date and time of day without an offset.
# /Instant/
	# Seconds and nanoseconds since 1970-01-01T00:00:00Z.
# /ZonedDateTime/
	# Local date-time, offset, and the zone that selected the offset.
# /Duration/
	# Signed, exact amount of time.
"""
import functools
import operator

from . import core
from . import units
from . import format
from . import gregorian

# Application order of &Temporal.elapse; calendar units first.
unit_order = ('year', 'month', 'week', 'day', 'hour', 'minute', 'second', 'millisecond', 'microsecond', 'nanosecond')

def _integer(name, value):
	if isinstance(value, bool) or not isinstance(value, int):
		raise TypeError("%s must be an integer, not %s" %(name, type(value).__name__))
	return value

def _iso(Class, fmt, text, build):
	"""
	# Parse the ISO-8601 &text and construct the value from the fields.
	# Range failures of the construction are reported as &core.IntegrityError.
	"""
	fields = format.parser(fmt)(text)
	try:
		return build(fields)
	except core.RangeError as err:
		raise core.IntegrityError(text, format=fmt, reason=str(err)) from err

class Temporal(object):
	"""
	# Operations common to the value types that support field access and arithmetic.
	# Subclasses implement `plus` and assign the `_fields` mapping.
	"""
	__slots__ = ()

	_fields = {}

	def get(self, field):
		"""
		# Retrieve the value of the named &field; see &.units.fields.
		"""
		try:
			read = self._fields[field]
		except KeyError:
			raise core.UnsupportedFieldError(field, self.__class__.__name__) from None
		return read(self)

	def supports(self, field):
		return field in self._fields

	def format(self, formatter) -> str:
		"""
		# Render the value with &formatter; the inverse of `parse(text, formatter)`.
		"""
		return formatter.format(self)

	def minus(self, amount, unit):
		return self.plus(-_integer('amount', amount), unit)

	def elapse(self, **parts):
		"""
		# Add the given units to the value. Calendar units are applied first:

		#!syntax/python
			ldt.elapse(months=1, hours=2)
		"""
		seq = sorted(
			((units.identify(k), v) for k, v in parts.items()),
			key=(lambda x: unit_order.index(x[0]))
		)
		r = self
		for unit, amount in seq:
			r = r.plus(amount, unit)
		return r

	def rollback(self, **parts):
		"""
		# Subtract the given units from the value.
		"""
		return self.elapse(**{k: -_integer(k, v) for k, v in parts.items()})

	def until(self, end, unit):
		"""
		# The number of complete &unit between the value and &end.
		"""
		from . import duration
		return duration.count(self, end, unit)

	def plus_years(self, years):
		return self.plus(years, 'year')

	def plus_months(self, months):
		return self.plus(months, 'month')

	def plus_weeks(self, weeks):
		return self.plus(weeks, 'week')

	def plus_days(self, days):
		return self.plus(days, 'day')

	def plus_hours(self, hours):
		return self.plus(hours, 'hour')

	def plus_minutes(self, minutes):
		return self.plus(minutes, 'minute')

	def plus_seconds(self, seconds):
		return self.plus(seconds, 'second')

	def plus_nanos(self, nanos):
		return self.plus(nanos, 'nanosecond')

	def minus_years(self, years):
		return self.minus(years, 'year')

	def minus_months(self, months):
		return self.minus(months, 'month')

	def minus_weeks(self, weeks):
		return self.minus(weeks, 'week')

	def minus_days(self, days):
		return self.minus(days, 'day')

	def minus_hours(self, hours):
		return self.minus(hours, 'hour')

	def minus_minutes(self, minutes):
		return self.minus(minutes, 'minute')

	def minus_seconds(self, seconds):
		return self.minus(seconds, 'second')

	def minus_nanos(self, nanos):
		return self.minus(nanos, 'nanosecond')

@core.struct(order=True)
class Offset(object):
	"""
	# Displacement from UTC in seconds restricted to whole minutes within `-18:00` and `+18:00`.
	"""
	seconds: (int)

	def __post_init__(self):
		_integer('seconds', self.seconds)
		if self.seconds % 60:
			raise core.RangeError('offset_seconds', self.seconds)
		limit = units.offset_limit * 60
		units.check('offset_seconds', self.seconds, -limit, limit)

	@classmethod
	def of(Class, text:str):
		"""
		# Construct from the offset text: `Z`, `+h`, `+hh`, `+hhmm`, or `+hh:mm`.
		"""
		if not isinstance(text, str):
			raise TypeError("offset text must be a str, not " + type(text).__name__)
		if text in ('Z', 'z'):
			return Class(0)

		sign = text[:1]
		body = text[1:]
		if sign not in ('+', '-') or not body.isascii():
			raise core.ParseError(text, format='offset', reason="offset must begin with a sign")

		if len(body) == 5 and body[2] == ':':
			body = body[:2] + body[3:]

		if not body.isdigit() or len(body) not in (1, 2, 4):
			raise core.ParseError(text, format='offset', reason="invalid offset form")

		hours = int(body[:2])
		minutes = int(body[2:] or 0)
		units.check('minute_of_hour', minutes)

		if sign == '-':
			return Class.of_hours_minutes(-hours, -minutes)
		return Class.of_hours_minutes(hours, minutes)

	@classmethod
	def of_hours(Class, hours:int):
		return Class.of_hours_minutes(hours, 0)

	@classmethod
	def of_hours_minutes(Class, hours:int, minutes:int):
		"""
		# Construct from &hours and &minutes; both must have the same sign.
		"""
		_integer('hours', hours)
		_integer('minutes', minutes)
		units.check('offset_minutes', minutes, -59, 59)
		if (hours > 0 and minutes < 0) or (hours < 0 and minutes > 0):
			raise core.RangeError('offset_minutes', minutes)
		units.check('offset_hours', hours, -18, 18)
		return Class((hours * 3600) + (minutes * 60))

	@classmethod
	def of_seconds(Class, seconds:int):
		return Class(seconds)

	@property
	def minutes(self) -> int:
		return self.seconds // 60

	@property
	def identifier(self) -> str:
		return format.format_offset(self.minutes)

	def __str__(self):
		return format.format_offset(self.minutes)

	def __repr__(self):
		return "(time.offset@'%s')" %(str(self),)

@core.struct(order=True)
class LocalTime(Temporal):
	"""
	# Time of day without a date or an offset.
	# Arithmetic wraps around midnight.
	"""
	hour: (int)
	minute: (int) = 0
	second: (int) = 0
	nanosecond: (int) = 0

	def __post_init__(self, check=units.check):
		check('hour_of_day', self.hour)
		check('minute_of_hour', self.minute)
		check('second_of_minute', self.second)
		check('nano_of_second', self.nanosecond)

	@classmethod
	def of(Class, hour, minute=0, second=0, nanosecond=0):
		return Class(hour, minute, second, nanosecond)

	@classmethod
	def of_nano_of_day(Class, nanos:int):
		units.check('nano_of_day', nanos)
		seconds, ns = divmod(nanos, units.nanos_per_second)
		return Class.of_second_of_day(seconds, ns)

	@classmethod
	def of_second_of_day(Class, seconds:int, nanosecond:int=0):
		units.check('second_of_day', seconds)
		hour, seconds = divmod(seconds, 3600)
		minute, second = divmod(seconds, 60)
		return Class(hour, minute, second, nanosecond)

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse `HH:MM[:SS[.fraction]]`, or the text described by &formatter.
		"""
		if formatter is not None:
			return formatter.parse(text, Class)
		return _iso(Class, 'time', text, (
			lambda f: Class(f['hour'], f['minute'], f['second'], f['fraction'])
		))

	@classmethod
	def now(Class, clock, zone=None):
		return LocalDateTime.now(clock, zone).time

	@classmethod
	def of_instant(Class, instant, zone):
		return LocalDateTime.of_instant(instant, zone).time

	def to_second_of_day(self) -> int:
		return (self.hour * 3600) + (self.minute * 60) + self.second

	def to_nano_of_day(self) -> int:
		return (self.to_second_of_day() * units.nanos_per_second) + self.nanosecond

	def plus(self, amount, unit):
		u = units.identify(unit)
		if u not in units.timed:
			raise core.UnsupportedUnitError(u, self.__class__.__name__)
		if not _integer('amount', amount):
			return self

		n = self.to_nano_of_day() + (amount * units.exact[u])
		return self.__class__.of_nano_of_day(n % units.nanos_per_day)

	def at_date(self, date):
		return LocalDateTime(date, self)

	def __str__(self):
		return format.format_time(self.hour, self.minute, self.second, self.nanosecond)

	def __repr__(self):
		return "(time.time@'%s')" %(str(self),)

@core.struct(order=True)
class LocalDate(Temporal):
	"""
	# Date in the proleptic Gregorian calendar.
	"""
	year: (int)
	month: (int)
	day: (int)

	def __post_init__(self):
		gregorian.validate(self.year, self.month, self.day)

	@classmethod
	def of(Class, year, month, day):
		return Class(year, month, day)

	@classmethod
	def of_epoch_day(Class, days:int):
		return Class(*gregorian.date_from_epoch_day(_integer('epoch_day', days)))

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse `YYYY-MM-DD`, or the text described by &formatter.
		"""
		if formatter is not None:
			return formatter.parse(text, Class)
		return _iso(Class, 'date', text, (
			lambda f: Class(f['year'], f['month'], f['day'])
		))

	@classmethod
	def now(Class, clock, zone=None):
		return LocalDateTime.now(clock, zone).date

	@classmethod
	def of_instant(Class, instant, zone):
		return LocalDateTime.of_instant(instant, zone).date

	def to_epoch_day(self) -> int:
		return gregorian.epoch_day_from_date((self.year, self.month, self.day))

	def is_leap_year(self) -> bool:
		return gregorian.year_is_leap(self.year)

	def length_of_month(self) -> int:
		return gregorian.days_in_month(self.year, self.month)

	def length_of_year(self) -> int:
		return gregorian.days_in_year(self.year)

	@property
	def day_of_week(self) -> int:
		"""
		# ISO day of week; Monday is `1`.
		"""
		return gregorian.day_of_week(self.to_epoch_day())

	@property
	def day_of_year(self) -> int:
		return gregorian.day_of_year((self.year, self.month, self.day))

	def plus(self, amount, unit):
		u = units.identify(unit)
		_integer('amount', amount)
		if not amount:
			return self

		if u in units.calendrical:
			moved = gregorian.add_months((self.year, self.month, self.day), amount * units.calendrical[u])
			return self.__class__(*moved)
		elif u in units.dated:
			return self.__class__.of_epoch_day(self.to_epoch_day() + (amount * units.dated[u]))
		else:
			raise core.UnsupportedUnitError(u, self.__class__.__name__)

	def at_start_of_day(self, zone=None):
		"""
		# Midnight of the date. When &zone is given, the &ZonedDateTime
		# of the first valid local time of the date.
		"""
		ldt = LocalDateTime(self, midnight)
		if zone is not None:
			return ZonedDateTime.of(ldt, zone)
		return ldt

	def at_time(self, hour, minute=0, second=0, nanosecond=0):
		"""
		# Combine the date with a &LocalTime or the time fields.
		"""
		if isinstance(hour, LocalTime):
			return LocalDateTime(self, hour)
		return LocalDateTime(self, LocalTime(hour, minute, second, nanosecond))

	def __str__(self):
		return format.format_date(self.year, self.month, self.day)

	def __repr__(self):
		return "(time.date@'%s')" %(str(self),)

midnight = LocalTime(0)

@core.struct(order=True)
class LocalDateTime(Temporal):
	"""
	# A &LocalDate and &LocalTime pair without an offset.
	"""
	date: (LocalDate)
	time: (LocalTime)

	def __post_init__(self):
		if not isinstance(self.date, LocalDate):
			raise TypeError("date must be a LocalDate, not " + type(self.date).__name__)
		if not isinstance(self.time, LocalTime):
			raise TypeError("time must be a LocalTime, not " + type(self.time).__name__)

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, nanosecond=0):
		return Class(LocalDate(year, month, day), LocalTime(hour, minute, second, nanosecond))

	@classmethod
	def combine(Class, date, time):
		return Class(date, time)

	@classmethod
	def of_epoch_second(Class, seconds:int, nanosecond:int, offset:Offset):
		"""
		# The local date-time of the instant designated by &seconds and &nanosecond
		# as seen from &offset.
		"""
		days, sod = divmod(seconds + offset.seconds, units.seconds_per_day)
		return Class(LocalDate.of_epoch_day(days), LocalTime.of_second_of_day(sod, nanosecond))

	@classmethod
	def of_instant(Class, instant, zone):
		offset = zone.offset_at(instant)
		return Class.of_epoch_second(instant.seconds, instant.nanosecond, offset)

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse `YYYY-MM-DDTHH:MM[:SS[.fraction]]`, or the text described by &formatter.
		"""
		if formatter is not None:
			return formatter.parse(text, Class)
		return _iso(Class, 'datetime', text, _local_from_fields)

	@classmethod
	def now(Class, clock, zone=None):
		"""
		# Sample &clock and derive the local fields with the offset of &zone,
		# or the clock's zone. The offset is discarded.
		"""
		if zone is None:
			zone = clock.zone()
		return Class.of_instant(clock.instant(), zone)

	def to_epoch_second(self, offset:Offset) -> int:
		days = self.date.to_epoch_day()
		return (days * units.seconds_per_day) + self.time.to_second_of_day() - offset.seconds

	def to_instant(self, offset:Offset):
		return Instant(self.to_epoch_second(offset), self.time.nanosecond)

	def to_local_date(self) -> LocalDate:
		return self.date

	def to_local_time(self) -> LocalTime:
		return self.time

	@property
	def year(self):
		return self.date.year

	@property
	def month(self):
		return self.date.month

	@property
	def day(self):
		return self.date.day

	@property
	def hour(self):
		return self.time.hour

	@property
	def minute(self):
		return self.time.minute

	@property
	def second(self):
		return self.time.second

	@property
	def nanosecond(self):
		return self.time.nanosecond

	def plus(self, amount, unit):
		u = units.identify(unit)
		_integer('amount', amount)
		if not amount:
			return self

		if u not in units.timed:
			return self.__class__(self.date.plus(amount, u), self.time)

		n = self.time.to_nano_of_day() + (amount * units.exact[u])
		days, nod = divmod(n, units.nanos_per_day)
		return self.__class__(self.date.plus(days, 'day'), LocalTime.of_nano_of_day(nod))

	def at_zone(self, zone, preferred=None):
		return ZonedDateTime.of(self, zone, preferred)

	def __str__(self):
		return str(self.date) + 'T' + str(self.time)

	def __repr__(self):
		return "(time.datetime@'%s')" %(str(self),)

def _local_from_fields(f):
	return LocalDateTime(
		LocalDate(f['year'], f['month'], f['day']),
		LocalTime(f['hour'], f['minute'], f['second'], f['fraction']),
	)

@core.struct(order=True)
class Instant(Temporal):
	"""
	# Point on the UTC timeline: seconds since 1970-01-01T00:00:00Z and
	# a nanosecond adjustment.
	"""
	seconds: (int)
	nanosecond: (int) = 0

	def __post_init__(self):
		units.check('instant_seconds', self.seconds)
		units.check('nano_of_second', self.nanosecond)

	@classmethod
	def of_epoch_second(Class, seconds:int, adjustment:int=0):
		s, ns = divmod(_integer('adjustment', adjustment), units.nanos_per_second)
		return Class(_integer('seconds', seconds) + s, ns)

	@classmethod
	def of_epoch_milli(Class, millis:int):
		s, ms = divmod(_integer('millis', millis), 1000)
		return Class(s, ms * 1000000)

	@classmethod
	def of_epoch_nanos(Class, nanos:int):
		return Class(*divmod(_integer('nanos', nanos), units.nanos_per_second))

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse `YYYY-MM-DDTHH:MM:SS[.fraction]` followed by `Z` or an offset,
		# or the text described by &formatter.
		"""
		if formatter is not None:
			return formatter.parse(text, Class)
		return _iso(Class, 'instant', text, (
			lambda f: _local_from_fields(f).to_instant(Offset(f['offset'] * 60))
		))

	@classmethod
	def now(Class, clock):
		return clock.instant()

	def to_epoch_milli(self) -> int:
		return (self.seconds * 1000) + (self.nanosecond // 1000000)

	def to_epoch_nanos(self) -> int:
		return (self.seconds * units.nanos_per_second) + self.nanosecond

	def plus(self, amount, unit):
		"""
		# Advance the instant; units up to `'day'` are supported.
		"""
		u = units.identify(unit)
		if u not in units.exact or u == 'week':
			raise core.UnsupportedUnitError(u, self.__class__.__name__)
		if not _integer('amount', amount):
			return self
		return self.__class__.of_epoch_nanos(self.to_epoch_nanos() + (amount * units.exact[u]))

	def at_zone(self, zone):
		return ZonedDateTime.of_instant(self, zone)

	def __str__(self):
		local = LocalDateTime.of_epoch_second(self.seconds, self.nanosecond, utc)
		t = local.time
		return str(local.date) + 'T' + format.format_time(t.hour, t.minute, t.second, t.nanosecond, seconds=True) + 'Z'

	def __repr__(self):
		return "(time.instant@'%s')" %(str(self),)

utc = Offset(0)

@functools.total_ordering
@core.struct()
class ZonedDateTime(Temporal):
	"""
	# A &LocalDateTime with the &Offset selected by its &zone.

	# Construction verifies that the zone observes &offset at the designated
	# instant; &of applies the gap and overlap policy of the zone to choose it.
	"""
	local: (LocalDateTime)
	offset: (Offset)
	zone: (object)

	def __post_init__(self):
		if not isinstance(self.local, LocalDateTime):
			raise TypeError("local must be a LocalDateTime, not " + type(self.local).__name__)
		observed = self.zone.offset_at(self.to_instant())
		if observed != self.offset:
			raise core.RangeError('offset_seconds', self.offset.seconds)

	@classmethod
	def of(Class, local, zone, preferred=None):
		"""
		# Resolve &local in &zone. In an overlap, &preferred is kept when valid.
		"""
		resolved, offset = zone.resolve(local, preferred)
		return Class(resolved, offset, zone)

	@classmethod
	def combine(Class, date, time, zone):
		return Class.of(LocalDateTime(date, time), zone)

	@classmethod
	def of_instant(Class, instant, zone):
		offset = zone.offset_at(instant)
		local = LocalDateTime.of_epoch_second(instant.seconds, instant.nanosecond, offset)
		return Class(local, offset, zone)

	@classmethod
	def parse(Class, text, formatter=None, registry=None):
		"""
		# Parse `YYYY-MM-DDTHH:MM[:SS[.fraction]]`, an offset, and an optional
		# bracketed zone identifier resolved by &registry.

		# Without a &registry, only fixed offset and universal identifiers are available.
		"""
		if formatter is not None:
			return formatter.parse(text, Class)

		fields = format.parser('zoned')(text)
		try:
			local = _local_from_fields(fields)
			offset = Offset(fields['offset'] * 60)
		except core.RangeError as err:
			raise core.IntegrityError(text, format='zoned', reason=str(err)) from err

		from . import views
		identifier = fields['zone']
		if identifier is None:
			return Class(local, offset, views.FixedZone(offset))

		if registry is None:
			from . import libzone
			registry = libzone.Registry()

		try:
			zone = registry.resolve(identifier)
		except core.UnknownZoneError as err:
			raise core.ParseError(text, format='zoned', reason=str(err)) from err

		return Class.of_instant(local.to_instant(offset), zone)

	@classmethod
	def now(Class, clock, zone=None):
		if zone is None:
			zone = clock.zone()
		return Class.of_instant(clock.instant(), zone)

	def to_instant(self) -> Instant:
		return self.local.to_instant(self.offset)

	def to_epoch_second(self) -> int:
		return self.local.to_epoch_second(self.offset)

	def to_local_date_time(self) -> LocalDateTime:
		return self.local

	def to_local_date(self) -> LocalDate:
		return self.local.date

	def to_local_time(self) -> LocalTime:
		return self.local.time

	@property
	def year(self):
		return self.local.date.year

	@property
	def month(self):
		return self.local.date.month

	@property
	def day(self):
		return self.local.date.day

	@property
	def hour(self):
		return self.local.time.hour

	@property
	def minute(self):
		return self.local.time.minute

	@property
	def second(self):
		return self.local.time.second

	@property
	def nanosecond(self):
		return self.local.time.nanosecond

	def plus(self, amount, unit):
		"""
		# Calendar units, days and larger, keep the wall clock and resolve the
		# offset again; time units advance the instant.
		"""
		u = units.identify(unit)
		if not _integer('amount', amount):
			return self

		if u in units.timed:
			return self.__class__.of_instant(self.to_instant().plus(amount, u), self.zone)
		return self.__class__.of(self.local.plus(amount, u), self.zone, self.offset)

	def with_zone_same_instant(self, zone):
		return self.__class__.of_instant(self.to_instant(), zone)

	def with_zone_same_local(self, zone):
		return self.__class__.of(self.local, zone, self.offset)

	def _key(self):
		return (self.to_instant(), self.local, self.zone.identifier)

	def __lt__(self, operand):
		if not isinstance(operand, ZonedDateTime):
			return NotImplemented
		return self._key() < operand._key()

	def __str__(self):
		s = str(self.local) + str(self.offset)
		if self.zone.identifier != str(self.offset):
			s += '[' + self.zone.identifier + ']'
		return s

	def __repr__(self):
		return "(time.zoned@'%s')" %(str(self),)

@core.struct(order=True)
class Duration(object):
	"""
	# Exact amount of time stored as floored seconds and a positive
	# nanosecond adjustment. Days are exactly 86400 seconds.

	# The `to_*` projections truncate toward zero.
	"""
	seconds: (int)
	nanosecond: (int) = 0

	def __post_init__(self):
		_integer('seconds', self.seconds)
		units.check('nano_of_second', self.nanosecond)

	@classmethod
	def of(Class, **parts):
		"""
		# Construct from exact units:

		#!syntax/python
			d = Duration.of(hours=1, minutes=30)
		"""
		total = 0
		for unit, amount in parts.items():
			u = units.identify(unit)
			if u not in units.exact:
				raise core.UnsupportedUnitError(u, Class.__name__)
			total += _integer(unit, amount) * units.exact[u]
		return Class.of_nanos(total)

	@classmethod
	def of_nanos(Class, nanos:int):
		return Class(*divmod(_integer('nanos', nanos), units.nanos_per_second))

	@classmethod
	def of_seconds(Class, seconds:int, adjustment:int=0):
		return Class.of_nanos((_integer('seconds', seconds) * units.nanos_per_second) + adjustment)

	@classmethod
	def of_millis(Class, millis:int):
		return Class.of_nanos(_integer('millis', millis) * 1000000)

	@classmethod
	def of_minutes(Class, minutes:int):
		return Class.of(minute=minutes)

	@classmethod
	def of_hours(Class, hours:int):
		return Class.of(hour=hours)

	@classmethod
	def of_days(Class, days:int):
		return Class.of(day=days)

	@classmethod
	def between(Class, start, stop):
		from . import duration
		return duration.between(start, stop)

	def to_nanos(self) -> int:
		return (self.seconds * units.nanos_per_second) + self.nanosecond

	def to_millis(self) -> int:
		return units.truncate(self.to_nanos(), 1000000)

	def to_seconds(self) -> int:
		return units.truncate(self.to_nanos(), units.nanos_per_second)

	def to_minutes(self) -> int:
		return units.truncate(self.to_nanos(), units.exact['minute'])

	def to_hours(self) -> int:
		return units.truncate(self.to_nanos(), units.exact['hour'])

	def to_days(self) -> int:
		return units.truncate(self.to_nanos(), units.nanos_per_day)

	def is_zero(self) -> bool:
		return self.seconds == 0 and self.nanosecond == 0

	def is_negative(self) -> bool:
		return self.seconds < 0

	def plus(self, amount, unit=None):
		"""
		# Add a &Duration, or &amount of the exact &unit.
		"""
		if unit is None:
			if not isinstance(amount, Duration):
				raise TypeError("unit is required unless amount is a Duration")
			return self.__class__.of_nanos(self.to_nanos() + amount.to_nanos())
		return self.plus(self.__class__.of(**{unit: amount}))

	def minus(self, amount, unit=None):
		if unit is None:
			if not isinstance(amount, Duration):
				raise TypeError("unit is required unless amount is a Duration")
			return self.plus(amount.negated())
		return self.plus(-_integer('amount', amount), unit)

	def multiplied_by(self, factor:int):
		return self.__class__.of_nanos(self.to_nanos() * _integer('factor', factor))

	def negated(self):
		return self.__class__.of_nanos(-self.to_nanos())

	def abs(self):
		return self.negated() if self.is_negative() else self

	def __neg__(self):
		return self.negated()

	def __abs__(self):
		return self.abs()

	def __add__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return self.plus(operand)

	def __sub__(self, operand):
		if not isinstance(operand, Duration):
			return NotImplemented
		return self.minus(operand)

	def __str__(self):
		return format.format_duration(self.seconds, self.nanosecond)

	def __repr__(self):
		return "(time.duration@'%s')" %(str(self),)

zero = Duration(0)

def _timed_readers(path):
	get = operator.attrgetter(path) if path else (lambda x: x)
	return {
		'hour_of_day': (lambda x: get(x).hour),
		'minute_of_hour': (lambda x: get(x).minute),
		'second_of_minute': (lambda x: get(x).second),
		'nano_of_second': (lambda x: get(x).nanosecond),
		'micro_of_second': (lambda x: get(x).nanosecond // 1000),
		'milli_of_second': (lambda x: get(x).nanosecond // 1000000),
		'nano_of_day': (lambda x: get(x).to_nano_of_day()),
		'second_of_day': (lambda x: get(x).to_second_of_day()),
	}

def _dated_readers(path):
	get = operator.attrgetter(path) if path else (lambda x: x)
	return {
		'year': (lambda x: get(x).year),
		'month_of_year': (lambda x: get(x).month),
		'day_of_month': (lambda x: get(x).day),
		'day_of_week': (lambda x: get(x).day_of_week),
		'day_of_year': (lambda x: get(x).day_of_year),
		'epoch_day': (lambda x: get(x).to_epoch_day()),
	}

LocalTime._fields = _timed_readers(None)
LocalDate._fields = _dated_readers(None)
LocalDateTime._fields = dict(_dated_readers('date'), **_timed_readers('time'))
ZonedDateTime._fields = dict(
	_dated_readers('local.date'),
	**_timed_readers('local.time'),
	offset_seconds=(lambda x: x.offset.seconds),
	instant_seconds=(lambda x: x.to_epoch_second()),
)
Instant._fields = {
	'instant_seconds': operator.attrgetter('seconds'),
	'nano_of_second': operator.attrgetter('nanosecond'),
	'micro_of_second': (lambda x: x.nanosecond // 1000),
	'milli_of_second': (lambda x: x.nanosecond // 1000000),
}
