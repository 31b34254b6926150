"""
# Primary public module.

# Provides access to the value types, a registry of the host's zone database,
# and a clock reading the system's real time.

#!syntax/python
	from horology.time import library as libtime
	ny = libtime.zone("America/New_York")
	f = libtime.formatter("dd/MM/yyyy HH:mm:ss", ny)
	f.format(libtime.now().to_instant())

# The &registry and &clock are conveniences; the value types accept any
# registry or clock explicitly.
"""
from . import libzone
from . import sysclock
from . import pattern
from . import duration

from .types import Offset, LocalTime, LocalDate, LocalDateTime, Instant, ZonedDateTime, Duration
from .constants import *
from .core import Error, RangeError, ParseError, PatternError, UnknownZoneError, UnsupportedFieldError, UnsupportedUnitError
from .pattern import Formatter
from .duration import between

# Registry of the host's zone database.
registry = libzone.Registry.database()

# Clock reading the system's real time and the host's zone.
clock = sysclock.SystemClock(registry)

def zone(identifier:str=None, registry=registry):
	"""
	# Resolve the zone &identifier, or the system's zone when &None.
	"""
	if identifier is None:
		return registry.system()
	return registry.resolve(identifier)

def now(zone=None, clock=clock) -> ZonedDateTime:
	"""
	# The current &ZonedDateTime in &zone or the system's zone.
	"""
	return ZonedDateTime.now(clock, zone)

def today(zone=None, clock=clock) -> LocalDate:
	return LocalDate.now(clock, zone)

def formatter(text:str, zone=None, registry=registry) -> Formatter:
	"""
	# Compile the pattern &text into a &Formatter. &zone may be
	# a zone or an identifier resolved by &registry.
	"""
	if isinstance(zone, str):
		zone = registry.resolve(zone)
	return Formatter(text, zone)
