"""
# Various constants.

# [ Elements ]
# /epoch/
	# &types.Instant of 1970-01-01T00:00:00Z.
# /epoch_date/
	# &types.LocalDate of 1970-01-01.
# /utc/
	# The zero &types.Offset.
# /minimum_offset/
	# The offset `-18:00`.
# /maximum_offset/
	# The offset `+18:00`.
# /midnight/
	# &types.LocalTime at the start of the day.
# /noon/
	# &types.LocalTime at the middle of the day.
# /zero/
	# Zero &types.Duration.
"""
from . import types
from . import units

epoch = types.Instant(0)
epoch_date = types.LocalDate(1970, 1, 1)
utc = types.utc
minimum_offset = types.Offset(-units.offset_limit * 60)
maximum_offset = types.Offset(units.offset_limit * 60)
midnight = types.midnight
noon = types.LocalTime(12)
zero = types.zero
