"""
# Clocks giving the current instant and the zone used to localize it.

# &SystemClock reads the system's real clock and asks its registry for the
# host's zone; &FixedClock always answers the same instant and zone.
"""
import time

from . import types

def _real_clock_read(time_ns=time.time_ns):
	return time_ns()

def now(Instant=types.Instant) -> types.Instant:
	"""
	# Get the current point in time according to the system's real clock as a &types.Instant.
	"""
	return Instant.of_epoch_nanos(_real_clock_read())

class SystemClock(object):
	"""
	# Clock reading the system's real time.

	# [ Properties ]
	# /registry/
		# The &.libzone.Registry providing the system zone.
	"""

	def __init__(self, registry, zone=None, read=_real_clock_read):
		self.registry = registry
		self._zone = zone
		self._read = read

	def __repr__(self):
		return "%s(%r, zone=%r)" %(self.__class__.__name__, self.registry, self._zone)

	def instant(self) -> types.Instant:
		return types.Instant.of_epoch_nanos(self._read())

	def zone(self):
		"""
		# The zone given to the constructor or the registry's system zone.
		"""
		if self._zone is not None:
			return self._zone
		return self.registry.system()

	def with_zone(self, zone):
		return self.__class__(self.registry, zone, self._read)

class FixedClock(object):
	"""
	# Clock that always reports the same instant.
	"""

	def __init__(self, instant, zone):
		self._instant = instant
		self._zone = zone

	def __repr__(self):
		return "%s(%r, %r)" %(self.__class__.__name__, self._instant, self._zone)

	def instant(self) -> types.Instant:
		return self._instant

	def zone(self):
		return self._zone

	def with_zone(self, zone):
		return self.__class__(self._instant, zone)

	def elapse(self, **parts):
		"""
		# A clock whose instant is advanced by the given units.
		"""
		return self.__class__(self._instant.elapse(**parts), self._zone)
