"""
# POSIX TZ rule strings as found in the footer of TZif version 2 and later files.

#!syntax/python
	r = posix.Rule.parse("EST5EDT,M3.2.0,M11.1.0")
	assert r.period_for(1196676930).abbreviation == 'EST'

# The offsets in the rule text are west of UTC and are inverted here; `EST5`
# is `-05:00`. Daylight time defaults to one hour ahead of standard time and
# the transition dates default to `M3.2.0,M11.1.0` at `02:00` local time.

# [ Date Forms ]
# /`Jn`/
	# Day of year, `1` through `365`, ignoring February 29.
# /`n`/
	# Zero based day of year, `0` through `365`, counting February 29.
# /`Mm.w.d`/
	# Day `d`, Sunday being `0`, of week `w` of month `m`; week `5` is the last.
"""
import re

from . import core
from . import units
from . import gregorian
from . import types
from . import views

name_model = r'(?:<([A-Za-z0-9+-]+)>|([A-Za-z]{3,}))'
offset_model = r'([+-]?\d{1,3}(?::\d{1,2}){0,2})'
expression = re.compile(
	name_model + offset_model +
	'(?:' + name_model + offset_model + '?' + '(?:,([^,]+),([^,]+))?' + ')?',
	re.ASCII,
)
date_expression = re.compile(r'(?:J(\d{1,3})|(\d{1,3})|M(\d{1,2})\.(\d)\.(\d))(?:/' + offset_model + ')?', re.ASCII)

default_time = 2 * 3600
default_dates = ('M3.2.0', 'M11.1.0')

def hms(text):
	"""
	# Convert `[+-]h[:mm[:ss]]` into seconds.
	"""
	sign = -1 if text[:1] == '-' else 1
	parts = [int(x) for x in text.lstrip('+-').split(':')]
	parts.extend([0] * (3 - len(parts)))
	h, m, s = parts
	return sign * ((h * 3600) + (m * 60) + s)

@core.struct()
class DateRule(object):
	"""
	# Transition date and local time of a &Rule.

	# [ Properties ]
	# /form/
		# One of `'J'`, `'n'`, or `'M'`.
	# /fields/
		# The numbers of the form: `(day,)` or `(month, week, weekday)`.
	# /time/
		# Seconds after local midnight; may be negative or exceed a day.
	"""
	form: (str)
	fields: (tuple)
	time: (int) = default_time

	@classmethod
	def parse(Class, text):
		m = date_expression.fullmatch(text)
		if m is None:
			raise ValueError("invalid transition date: " + repr(text))

		julian, zero, month, week, weekday, time = m.groups()
		t = default_time if time is None else hms(time)
		if julian is not None:
			day = int(julian)
			units.check('day_of_year', day, 1, 365)
			return Class('J', (day,), t)
		elif zero is not None:
			day = int(zero)
			units.check('day_of_year', day, 0, 365)
			return Class('n', (day,), t)
		else:
			month = units.check('month_of_year', int(month))
			week = units.check('week_of_month', int(week), 1, 5)
			weekday = units.check('day_of_week', int(weekday), 0, 6)
			return Class('M', (month, week, weekday), t)

	def epoch_day(self, year) -> int:
		"""
		# The days since 1970-01-01 of the transition date in &year.
		"""
		jan1 = gregorian.epoch_day_from_date((year, 1, 1))

		if self.form == 'J':
			day, = self.fields
			if day >= 60 and gregorian.year_is_leap(year):
				day += 1
			return jan1 + day - 1
		elif self.form == 'n':
			day, = self.fields
			return jan1 + day

		month, week, weekday = self.fields
		first = gregorian.epoch_day_from_date((year, month, 1))
		# ISO weekday, Monday 1 through Sunday 7, to Sunday 0.
		first_weekday = gregorian.day_of_week(first) % 7
		day = 1 + ((weekday - first_weekday) % 7) + ((week - 1) * 7)
		if day > gregorian.days_in_month(year, month):
			day -= 7
		return first + day - 1

	def local_seconds(self, year) -> int:
		"""
		# Local seconds since the epoch of the transition in &year.
		"""
		return (self.epoch_day(year) * units.seconds_per_day) + self.time

@core.struct()
class Rule(object):
	"""
	# A standard period and, optionally, a daylight period with its start and end dates.
	"""
	source: (str)
	standard: (views.Period)
	daylight: (object) = None
	start: (object) = None
	end: (object) = None

	@classmethod
	def parse(Class, text):
		"""
		# Parse the POSIX TZ string &text; &core.ParseError when malformed.
		"""
		m = expression.fullmatch(text)
		if m is None:
			raise core.ParseError(text, format='posix', reason="malformed TZ rule")

		sq, sn, soffset, dq, dn, doffset, start, end = m.groups()
		try:
			standard_seconds = -hms(soffset)
			standard = views.Period(views.round_offset(standard_seconds), sq or sn, False)

			if dq is None and dn is None:
				return Class(text, standard)

			if doffset is None:
				daylight_seconds = standard_seconds + 3600
			else:
				daylight_seconds = -hms(doffset)
			daylight = views.Period(views.round_offset(daylight_seconds), dq or dn, True)

			if start is None:
				start, end = default_dates
			return Class(text, standard, daylight, DateRule.parse(start), DateRule.parse(end))
		except (ValueError, core.RangeError) as err:
			raise core.ParseError(text, format='posix', reason=str(err)) from err

	def transitions(self, year):
		"""
		# The transitions of &year as `(seconds, period)` pairs ordered by time.
		"""
		if self.daylight is None:
			return []

		# Daylight begins in standard time and ends in daylight time.
		begins = self.start.local_seconds(year) - self.standard.offset.seconds
		ends = self.end.local_seconds(year) - self.daylight.offset.seconds
		return sorted([(begins, self.daylight), (ends, self.standard)], key=(lambda x: x[0]))

	def period_for(self, seconds) -> views.Period:
		"""
		# The &views.Period observed at the given seconds since the epoch.
		"""
		if self.daylight is None:
			return self.standard

		local = seconds + self.standard.offset.seconds
		year = gregorian.date_from_epoch_day(local // units.seconds_per_day)[0]

		begins = self.start.local_seconds(year) - self.standard.offset.seconds
		ends = self.end.local_seconds(year) - self.daylight.offset.seconds

		if begins < ends:
			# Northern; daylight time within the year.
			dst = begins <= seconds < ends
		else:
			# Southern; daylight time spans the new year.
			dst = not (ends <= seconds < begins)

		return self.daylight if dst else self.standard

	def __str__(self):
		return self.source
