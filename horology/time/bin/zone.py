"""
# Print the transitions of a zone, or the system's zone, between two years.

#!syntax/sh
	python3 -m horology.time.bin.zone America/New_York 2007 2009
"""
import sys

from .. import core
from .. import types
from .. import views
from .. import library

def print_zone_transitions(zone, first, last, write=sys.stdout.write):
	start = types.LocalDateTime.of(first, 1, 1).to_instant(types.utc)
	stop = types.LocalDateTime.of(last + 1, 1, 1).to_instant(types.utc)

	write("%s\n" %(zone.identifier,))
	if not isinstance(zone, views.RegionZone):
		write("%s: %s\n" %(start, zone.offset_at(start)))
		return

	write("%s: %s\n" %(start, zone.period_at(start)))
	for instant, period in zone.slice(start, stop):
		local = types.ZonedDateTime.of_instant(instant, zone)
		write("%s: %s (%s)\n" %(instant, period, local))

def main(argv, registry=library.registry, clock=library.clock, out=sys.stdout):
	identifier = argv[1] if len(argv) > 1 else None
	year = types.LocalDate.now(clock, views.FixedZone(types.utc)).year
	try:
		first = int(argv[2]) if len(argv) > 2 else year
		last = int(argv[3]) if len(argv) > 3 else first
	except ValueError:
		sys.stderr.write("zone: years must be integers\n")
		return 1

	try:
		zone = registry.system() if identifier is None else registry.resolve(identifier)
	except core.UnknownZoneError as err:
		sys.stderr.write("zone: %s\n" %(err,))
		return 1

	print_zone_transitions(zone, first, last, write=out.write)
	return 0

if __name__ == '__main__':
	sys.exit(main(sys.argv))
