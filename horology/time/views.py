"""
# Zone rules mapping instants to offsets and local date-times to instants.

# &Zone is the base of the rule objects held by &.types.ZonedDateTime:
# &FixedZone observes a single offset, &PrefixedZone is a universal prefix,
# `UTC`, `GMT`, or `UT`, qualified by an offset, and &RegionZone consults a sequence
# of transitions read from a TZif file followed by its POSIX rule.

#!syntax/python
	z = registry.resolve("America/New_York")
	offset = z.offset_at(types.Instant.parse("2007-12-03T10:15:30Z"))
	assert str(offset) == "-05:00"

# [ Local Time Resolution ]

# A local date-time falling in a gap, when clocks are advanced, does not exist;
# &Zone.resolve moves it forward by the length of the gap and uses the later offset.
# A local date-time falling in an overlap, when clocks are set back, exists twice;
# the earlier offset is chosen unless the preferred offset is one of the two.
"""
import bisect

from . import core
from . import units
from . import types

@core.struct()
class Period(object):
	"""
	# An offset observed by a region and its abbreviation.
	"""
	offset: (types.Offset)
	abbreviation: (str) = ''
	dst: (bool) = False

	def __str__(self):
		return '%s%s' %(self.abbreviation, self.offset)

def round_offset(seconds):
	"""
	# Round the offset &seconds to whole minutes. Local mean time offsets recorded
	# in TZif data are commonly given to the second.
	"""
	return types.Offset(((seconds + 30) // 60) * 60)

class Zone(object):
	"""
	# Base class of the zone rules.

	# [ Properties ]
	# /identifier/
		# The identifier the zone was resolved with.
	"""
	identifier = None
	fixed = False

	def offset_for(self, seconds) -> types.Offset:
		"""
		# The offset observed at the given seconds since the epoch.
		"""
		raise NotImplementedError("offset_for")

	def offset_at(self, instant) -> types.Offset:
		"""
		# The offset observed at the &instant.
		"""
		return self.offset_for(instant.seconds)

	def valid_offsets(self, local):
		"""
		# The offsets for which &local designates an instant in the zone;
		# empty in a gap and two offsets in an overlap, earlier offset first.
		"""
		epoch = local.to_epoch_second(types.utc)
		early = self.offset_for(epoch - units.seconds_per_day)
		late = self.offset_for(epoch + units.seconds_per_day)

		candidates = (early,) if early == late else (early, late)
		return [
			x for x in candidates
			if self.offset_for(epoch - x.seconds) == x
		]

	def resolve(self, local, preferred=None):
		"""
		# Choose the offset of &local returning the pair `(local, offset)`.
		# The local date-time is only changed when it falls in a gap.
		"""
		valid = self.valid_offsets(local)
		if valid:
			if preferred is not None and preferred in valid:
				return (local, preferred)
			return (local, valid[0])

		epoch = local.to_epoch_second(types.utc)
		early = self.offset_for(epoch - units.seconds_per_day)
		late = self.offset_for(epoch + units.seconds_per_day)
		gap = late.seconds - early.seconds
		return (local.plus(gap, 'second'), late)

	def normalized(self):
		"""
		# The &FixedZone of the zone's offset when it observes a single offset;
		# otherwise, the zone itself.
		"""
		return self

	def __eq__(self, operand):
		if not isinstance(operand, Zone):
			return NotImplemented
		return self.identifier == operand.identifier

	def __hash__(self):
		return hash(self.identifier)

	def __str__(self):
		return self.identifier

	def __repr__(self):
		return "(time.zone@'%s')" %(self.identifier,)

class FixedZone(Zone):
	"""
	# Zone observing a single offset. The identifier is the offset's text.
	"""
	fixed = True

	def __init__(self, offset):
		self.offset = offset
		self.identifier = str(offset)

	def offset_for(self, seconds):
		return self.offset

	def valid_offsets(self, local):
		return [self.offset]

	def resolve(self, local, preferred=None):
		return (local, self.offset)

class PrefixedZone(FixedZone):
	"""
	# A universal prefix, `UTC`, `GMT`, or `UT`, optionally qualified by an offset.
	"""
	prefixes = ('UTC', 'GMT', 'UT')

	def __init__(self, prefix, offset=types.utc):
		self.prefix = prefix
		self.offset = offset
		if offset.seconds == 0:
			self.identifier = prefix
		else:
			self.identifier = prefix + str(offset)

	def normalized(self):
		return FixedZone(self.offset)

class RegionZone(Zone):
	"""
	# An ordered sequence of transition times whose ranges correspond to
	# a particular &Period.

	# [ Properties ]
	# /transitions/
		# Sorted seconds since the epoch at which the corresponding period begins.
	# /periods/
		# The &Period entered at each transition.
	# /default/
		# The &Period observed before the first transition.
	# /rule/
		# The &.posix.Rule observed after the last transition, if any.
	"""

	def __init__(self, identifier, transitions, periods, default, rule=None):
		self.identifier = identifier
		self.transitions = tuple(transitions)
		self.periods = tuple(periods)
		self.default = default
		self.rule = rule

	def __repr__(self):
		return "(time.zone@'%s'[%d])" %(self.identifier, len(self.transitions))

	@property
	def fixed(self):
		if self.transitions:
			return False
		return self.rule is None or self.rule.daylight is None

	def find(self, seconds, search=bisect.bisect_right):
		"""
		# Get the &Period observed at the given seconds since the epoch.
		"""
		idx = search(self.transitions, seconds) - 1
		if idx < 0:
			if not self.transitions and self.rule is not None:
				return self.rule.period_for(seconds)
			return self.default

		if idx == len(self.transitions) - 1 and self.rule is not None:
			if seconds > self.transitions[-1]:
				return self.rule.period_for(seconds)
		return self.periods[idx]

	def offset_for(self, seconds):
		return self.find(seconds).offset

	def period_at(self, instant):
		return self.find(instant.seconds)

	def slice(self, start, stop, search=bisect.bisect_left):
		"""
		# Get the transitions and periods entered in the range of instants
		# from &start up to, but not including, &stop.

		# Transitions past the last recorded one are generated by the &rule.
		"""
		first = search(self.transitions, start.seconds)
		last = search(self.transitions, stop.seconds)
		for seconds, period in zip(self.transitions[first:last], self.periods[first:last]):
			yield (types.Instant(seconds), period)

		if self.rule is None or self.rule.daylight is None:
			return

		floor = start.seconds
		if self.transitions:
			floor = max(floor, self.transitions[-1] + 1)

		first_year = types.LocalDateTime.of_epoch_second(floor, 0, types.utc).year - 1
		last_year = types.LocalDateTime.of_epoch_second(stop.seconds, 0, types.utc).year + 1
		for year in range(first_year, last_year + 1):
			for seconds, period in self.rule.transitions(year):
				if floor <= seconds < stop.seconds:
					yield (types.Instant(seconds), period)

	def normalized(self):
		if self.fixed:
			if self.rule is not None:
				return FixedZone(self.rule.standard.offset)
			return FixedZone(self.default.offset)
		return self

	@classmethod
	def from_tzif_data(Class, identifier, data, parse_rule=None):
		"""
		# Construct a zone from the &.tzif.zonedata tuple, &data.
		"""
		periods = [
			Period(round_offset(x.offset), x.abbreviation, x.dst)
			for x in data.types
		]

		transitions = []
		entered = []
		for seconds, index in data.transitions:
			p = periods[index]
			if entered and entered[-1] == p:
				# Collapse transitions that do not change the period.
				continue
			transitions.append(seconds)
			entered.append(p)

		rule = None
		if data.footer:
			if parse_rule is None:
				from .posix import Rule
				parse_rule = Rule.parse
			rule = parse_rule(data.footer)

		return Class(identifier, transitions, entered, periods[0], rule)
