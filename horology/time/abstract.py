"""
# Protocols of the objects consumed by the value types.

# Primarily, this module exists to document the interfaces to &Clock and &Rules.
# The redundant method declarations are intentional.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# Source of the current instant and the zone used to localize it.
	"""

	@abstractmethod
	def instant(self):
		"""
		# The current &.types.Instant.
		"""

	@abstractmethod
	def zone(self):
		"""
		# The zone rules used when none are given to `now`.
		"""

@typing.runtime_checkable
class Rules(typing.Protocol):
	"""
	# Zone rules as consumed by &.types.ZonedDateTime.
	"""

	identifier: str

	@abstractmethod
	def offset_at(self, instant):
		"""
		# The &.types.Offset observed at the &instant.
		"""

	@abstractmethod
	def resolve(self, local, preferred=None):
		"""
		# Choose the offset of the local date-time returning `(local, offset)`.
		"""

	@abstractmethod
	def normalized(self):
		"""
		# The fixed offset zone when the rules observe a single offset.
		"""
