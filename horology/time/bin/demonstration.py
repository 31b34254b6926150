"""
# Print a tour of the value types contrasting zone-naive and zone-aware values
# under formatters with and without zones.

# The region `America/New_York` is read from the host's zone database.
"""
import sys

from .. import core
from .. import types
from .. import pattern
from .. import duration
from .. import library

rule = '-' * 89

def zones(write, registry, clock):
	zone1 = registry.resolve("+02:00")
	zone2 = registry.resolve("UTC")
	zone3 = registry.resolve("America/New_York")
	zone4 = clock.zone()

	write(rule)
	write("ZoneId 1: %s" %(zone1,))
	write("ZoneId 2: %s" %(zone2,))
	write("ZoneId 3: %s" %(zone3,))
	write("ZoneId 4: %s" %(zone4,))
	write("")
	write("ZoneId 1 normalized: %s -> ZoneOffset" %(zone1.normalized(),))
	write("ZoneId 2 normalized: %s -> ZoneOffset" %(zone2.normalized(),))
	write("ZoneId 3 normalized: %s -> ZoneId" %(zone3.normalized(),))
	write("ZoneId 4 normalized: %s -> ZoneId" %(zone4.normalized(),))
	write(rule)
	write("")
	return zone1, zone2, zone3, zone4

def offsets(write, clock, zone4):
	write(rule)
	write("ZoneOffset 1: %s" %(types.Offset.of("+02:00"),))
	write("ZoneOffset 2: %s" %(types.Offset.of("Z"),))
	write("ZoneOffset 3: %s" %(types.Offset.of_hours(-5),))
	write("ZoneOffset 4: %s" %(zone4.offset_at(clock.instant()),))
	write(rule)
	write("")

def demonstrate(write, registry, clock):
	zone1, zone2, zone3, zone4 = zones(write, registry, clock)
	offsets(write, clock, zone4)
	utc = zone2.normalized()

	dtf1 = pattern.Formatter("HH:mm:ss", zone2)
	dtf2 = pattern.Formatter("dd/MM/yyyy")
	dtf3 = pattern.Formatter("dd/MM/yyyy", zone2)
	dtf4 = pattern.Formatter("dd/MM/yyyy HH:mm:ss")
	dtf5 = dtf4.with_zone(zone2)
	dtf6 = dtf4.with_zone(zone3)
	dtf7 = dtf4.with_zone(zone4)
	dtf8 = dtf4.with_zone(utc)
	sample = types.Instant.parse("2007-12-03T04:15:30Z")

	write(rule)
	lt = [
		types.LocalTime.now(clock),
		types.LocalTime.now(clock, zone3),
		types.LocalTime.of(4, 15, 30),
		types.LocalTime.parse("04:15:30"),
		types.LocalDateTime.parse("2007-12-03T04:15:30").to_local_time(),
		types.LocalDateTime.parse("03/12/2007 04:15:30", dtf4).to_local_time(),
		types.LocalTime.of_instant(sample, zone3),
	]
	for i, x in enumerate(lt, 1):
		write("LocalTime %d: %s" %(i, x))
	write("")
	write("Formatter: HH:mm:ss (UTC)")
	write("LocalTime will not be adjusted even using a formatter with timezone.")
	write("LocalTime 7: " + dtf1.format(lt[6]))
	write("LocalTime 7: " + lt[6].format(dtf1))
	write(rule)
	write("")

	write(rule)
	ld = [
		types.LocalDate.now(clock),
		types.LocalDate.now(clock, zone3),
		types.LocalDate.of(2007, 12, 3),
		types.LocalDate.parse("2007-12-03"),
		types.LocalDate.parse("03/12/2007", dtf2),
		types.LocalDateTime.parse("2007-12-03T04:15:30").to_local_date(),
		types.LocalDateTime.parse("03/12/2007 04:15:30", dtf4).to_local_date(),
		types.LocalDate.of_instant(sample, zone3),
	]
	for i, x in enumerate(ld, 1):
		write("LocalDate %d: %s" %(i, x))
	write("")
	write("Formatter: dd/MM/yyyy (UTC)")
	write("LocalDate will not be adjusted even using a formatter with timezone.")
	write("LocalDate 8: " + dtf3.format(ld[7]))
	write("LocalDate 8: " + ld[7].format(dtf3))
	write(rule)
	write("")

	write(rule)
	ldt = [
		types.LocalDateTime.now(clock),
		types.LocalDateTime.now(clock, zone3),
		types.LocalDateTime.of(2007, 12, 3, 4, 15, 30),
		types.LocalDateTime.parse("2007-12-03T04:15:30"),
		types.LocalDateTime.parse("03/12/2007 04:15:30", dtf4),
		types.LocalDateTime.of_instant(sample, zone3),
	]
	for i, x in enumerate(ldt, 1):
		write("LocalDateTime %d: %s" %(i, x))
	write("")
	write("Formatter: dd/MM/yyyy HH:mm:ss (UTC)")
	write("LocalDateTime will not be adjusted even using a formatter with timezone.")
	write("LocalDateTime 6: " + dtf5.format(ldt[5]))
	write("LocalDateTime 6: " + ldt[5].format(dtf5))
	write(rule)
	write("")

	write(rule)
	instants = [
		types.Instant.now(clock),
		types.Instant.now(clock.with_zone(utc)),
		types.Instant.of_epoch_milli(clock.instant().to_epoch_milli()),
		types.Instant.parse("2007-12-03T04:15:30Z"),
		types.ZonedDateTime.parse("2007-12-03T04:15:30Z").to_instant(),
	]
	for i, x in enumerate(instants, 1):
		write("Instant %d: %s (UTC)" %(i, x))
	write("")
	write("Formatter: dd/MM/yyyy HH:mm:ss (UTC) -> (America/New_York) -> (Local Time Zone)")
	write("Instant will be adjusted to the formatter time zone.")
	write("Instant 5: " + dtf5.format(instants[4]) + " (UTC)")
	write("Instant 5: " + dtf6.format(instants[4]) + " (America/New_York)")
	write("Instant 5: " + dtf7.format(instants[4]) + " (Local Time Zone)")
	write(rule)
	write("")

	write(rule)
	zdt = [
		types.ZonedDateTime.now(clock),
		types.ZonedDateTime.now(clock, zone2),
		types.ZonedDateTime.now(clock.with_zone(utc)),
		types.ZonedDateTime.combine(ld[2], lt[2], zone2),
		types.ZonedDateTime.of(ldt[2], zone2),
		types.ZonedDateTime.parse("2007-12-03T04:15:30Z"),
		types.ZonedDateTime.parse("03/12/2007 04:15:30", dtf5),
	]
	for i, x in enumerate(zdt, 1):
		write("ZonedDateTime %d: %s" %(i, x))
	write("")
	write("Formatter: dd/MM/yyyy HH:mm:ss (UTC) -> (America/New_York) -> (Local Time Zone)")
	write("ZonedDateTime will be adjusted to the formatter time zone.")
	write("ZonedDateTime 7: " + dtf5.format(zdt[6]) + " (UTC)")
	write("ZonedDateTime 7: " + dtf6.format(zdt[6]) + " (America/New_York)")
	write("ZonedDateTime 7: " + dtf7.format(zdt[6]) + " (Local Time Zone)")
	write("ZonedDateTime 7: " + dtf8.format(zdt[6]) + " (UTC)")
	write(rule)
	write("")

	fields(write, zone2)
	arithmetic(write)

def fields(write, zone2):
	lt = types.LocalTime.parse("04:15:30")
	ld = types.LocalDate.parse("2007-12-03")
	ldt = types.LocalDateTime.parse("2007-12-03T04:15:30")
	instant = types.Instant.parse("2007-12-03T04:15:30Z")
	zdt = types.ZonedDateTime.parse("2007-12-03T04:15:30Z")

	write(rule)
	write("LocalTime: %s" %(lt,))
	write("LocalDate: %s" %(ld,))
	write("LocalDateTime: %s" %(ldt,))
	write("Instant: %s" %(instant,))
	write("ZonedDateTime: %s" %(zdt,))

	for label, field, civil in [
		('day', 'day_of_month', (('LocalDate', ld), ('LocalDateTime', ldt))),
		('month', 'month_of_year', (('LocalDate', ld), ('LocalDateTime', ldt))),
		('year', 'year', (('LocalDate', ld), ('LocalDateTime', ldt))),
		('hour', 'hour_of_day', (('LocalTime', lt), ('LocalDateTime', ldt))),
		('minute', 'minute_of_hour', (('LocalTime', lt), ('LocalDateTime', ldt))),
		('second', 'second_of_minute', (('LocalTime', lt), ('LocalDateTime', ldt))),
	]:
		write("")
		for name, value in civil:
			write("%s %s: %d" %(name, label, value.get(field)))
		write("Instant %s: %d" %(label, instant.at_zone(zone2).get(field)))
		write("ZonedDateTime %s: %d" %(label, zdt.get(field)))
	write(rule)
	write("")

def arithmetic(write):
	lt = types.LocalTime.parse("04:15:30")
	ld = types.LocalDate.parse("2007-12-03")
	ldt = types.LocalDateTime.parse("2007-12-03T04:15:30")
	instant = types.Instant.parse("2007-12-03T04:15:30Z")
	zdt = types.ZonedDateTime.parse("2007-12-03T04:15:30Z")
	separator = '-' * 38

	write(rule)
	write("LocalTime: %s" %(lt,))
	lt_ago = lt.minus_hours(2)
	lt_later = lt.plus_hours(2)
	write("2 hours ago: %s" %(lt_ago,))
	write("2 hours later: %s" %(lt_later,))
	write(separator)

	write("LocalDate: %s" %(ld,))
	ld_past = ld.minus_weeks(1)
	ld_next = ld.plus_weeks(1)
	write("Past week: %s" %(ld_past,))
	write("Next week: %s" %(ld_next,))
	write(separator)

	write("LocalDateTime: %s" %(ldt,))
	ldt_past = ldt.minus_weeks(1)
	ldt_next = ldt.plus_weeks(1)
	write("Past week: %s" %(ldt_past,))
	write("Next week: %s" %(ldt_next,))
	write(separator)

	write("Instant: %s" %(instant,))
	i_past = instant.minus(7, 'day')
	i_next = instant.plus(7, 'day')
	write("Past week: %s" %(i_past,))
	write("Next week: %s" %(i_next,))
	write(separator)

	write("ZonedDateTime: %s" %(zdt,))
	z_past = zdt.minus(1, 'week')
	z_next = zdt.plus(1, 'week')
	write("Past week: %s" %(z_past,))
	write("Next week: %s" %(z_next,))
	write(rule)

	write("LocalTime:")
	write("%s -> %s = %d hours" %(lt_ago, lt_later, duration.between(lt_ago, lt_later).to_hours()))
	write("")
	write("LocalDate:")
	d = duration.between(ld_past.at_start_of_day(), ld_next.at_start_of_day())
	write("%s -> %s = %d days" %(ld_past, ld_next, d.to_days()))
	write("")
	write("LocalDateTime:")
	write("%s -> %s = %d days" %(ldt_past, ldt_next, duration.between(ldt_past, ldt_next).to_days()))
	write("")
	write("Instant:")
	write("%s -> %s = %d days" %(i_past, i_next, duration.between(i_past, i_next).to_days()))
	write("")
	write("ZonedDateTime:")
	write("%s -> %s = %d days" %(z_past, z_next, duration.between(z_past, z_next).to_days()))
	write(rule)

def main(registry=library.registry, clock=library.clock, out=sys.stdout):
	def write(line):
		out.write(line + "\n")

	try:
		demonstrate(write, registry, clock)
	except core.UnknownZoneError as err:
		sys.stderr.write("demonstration: %s\n" %(err,))
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(main())
