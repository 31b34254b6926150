"""
# Date and time values under the proleptic Gregorian calendar.

# &.types provides the immutable values: offsets, local dates and times,
# instants, zoned date-times, and durations. Zone rules are resolved by
# the registries of &.libzone from the host's TZif database, and &.pattern
# formats and parses text with patterns such as `dd/MM/yyyy HH:mm:ss`.

# The surface functionality is provided by &.library:

#!syntax/python
	from horology.time import library as libtime
	ld = libtime.LocalDate.parse("2007-12-03")
	assert str(ld.plus(1, 'week')) == "2007-12-10"

# [ Zone-naive and Zone-aware Values ]

# &.types.LocalDate, &.types.LocalTime, and &.types.LocalDateTime describe
# what a calendar and wall clock display; formatting them never applies a zone.
# &.types.Instant and &.types.ZonedDateTime designate a point on the timeline
# and are projected into a formatter's zone.
"""
