"""
# Exception classes and the record constructor shared by the &.time modules.

# Every exception raised by the package is an instance of &Error. The parsing
# exceptions follow the stages of &.format: a &ParseError is raised when the text
# does not fit the grammar, a &StructureError when the fields could not be
# converted, and an &IntegrityError when the converted fields are out of range.
# The lower level exception is always available as the `__cause__`.
"""
import functools
import dataclasses

# Immutable, slotted dataclass constructor used by the value types.
struct = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)
cachedcalls = functools.lru_cache

class Error(Exception):
	"""
	# Base class of the exceptions raised by &.time.
	"""

class RangeError(Error, ValueError):
	"""
	# A field was given a value outside of its domain.

	# [ Properties ]
	# /field/
		# The name of the field; see &.units.fields.
	# /value/
		# The rejected value.
	# /minimum/
		# The smallest valid value, inclusive. &None when not applicable.
	# /maximum/
		# The largest valid value, inclusive. &None when not applicable.
	"""

	def __init__(self, field, value, minimum=None, maximum=None):
		self.field = field
		self.value = value
		self.minimum = minimum
		self.maximum = maximum

	def __str__(self):
		if self.minimum is None:
			return "invalid value for %s: %r" %(self.field, self.value)
		return "invalid value for %s (valid values %r - %r): %r" %(
			self.field, self.minimum, self.maximum, self.value
		)

class ParseError(Error, ValueError):
	"""
	# The text could not be parsed.

	# [ Properties ]
	# /source/
		# The text that was given to the parser.
	# /format/
		# Identifier of the format or the pattern source used to parse.
	# /position/
		# Index of the character where parsing failed, if known.
	# /reason/
		# Short description of the failure.
	"""

	def __init__(self, source, format=None, position=None, reason=None):
		self.source = source
		self.format = format
		self.position = position
		self.reason = reason

	def __str__(self):
		s = "text %r could not be parsed" %(self.source,)
		if self.format is not None:
			s += " as " + str(self.format)
		if self.position is not None:
			s += " at index %d" %(self.position,)
		if self.reason:
			s += ": " + self.reason
		return s

class StructureError(ParseError):
	"""
	# The parsed fields could not be converted into their structured form.
	"""

class IntegrityError(ParseError):
	"""
	# The structured fields describe an invalid date or time.
	"""

class PatternError(Error, ValueError):
	"""
	# A format pattern could not be compiled.
	"""

	def __init__(self, pattern, position=None, reason=None):
		self.pattern = pattern
		self.position = position
		self.reason = reason

	def __str__(self):
		s = "invalid pattern %r" %(self.pattern,)
		if self.position is not None:
			s += " at index %d" %(self.position,)
		if self.reason:
			s += ": " + self.reason
		return s

class UnknownZoneError(Error, LookupError):
	"""
	# The zone identifier is neither a fixed offset nor a known region.
	"""

	def __init__(self, identifier, reason=None):
		self.identifier = identifier
		self.reason = reason

	def __str__(self):
		s = "unknown time zone identifier: %r" %(self.identifier,)
		if self.reason:
			s += " (" + self.reason + ")"
		return s

class ZoneDataError(Error):
	"""
	# Zone information file could not be decoded.
	"""

	def __init__(self, path, reason):
		self.path = path
		self.reason = reason

	def __str__(self):
		return "invalid zone data in %r: %s" %(self.path, self.reason)

class UnsupportedFieldError(Error, ValueError):
	"""
	# The field is not available on the type that was queried.
	"""

	def __init__(self, field, subject):
		self.field = field
		self.subject = subject

	def __str__(self):
		return "unsupported field for %s: %s" %(self.subject, self.field)

class UnsupportedUnitError(Error, ValueError):
	"""
	# The unit cannot be applied to the type. A &subject of &None
	# designates a unit name that is not known at all.
	"""

	def __init__(self, unit, subject):
		self.unit = unit
		self.subject = subject

	def __str__(self):
		if self.subject is None:
			return "unknown time unit: %r" %(self.unit,)
		return "unsupported unit for %s: %s" %(self.subject, self.unit)
