"""
# Read TZif, time zone information, files (zic output).

# Version 1 files are read from their 32-bit block. Version 2 and later files
# skip the 32-bit block and read the 64-bit block along with the POSIX TZ rule
# footer that applies after the last transition. Leap second records are
# skipped; the value types do not observe leap seconds.

# See tzfile(5) and RFC 8536 for the layout.

# [ Elements ]
# /tzdir/
	# The default location of the zone database; overridden by the `TZDIR` environment variable.
# /tzdefault/
	# The file describing the system's zone.
# /tzenviron/
	# The environment variable selecting the system's zone.
"""
import os
import os.path
import struct
import collections

from . import core

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

header_fields = (
	'magic',
	'version',
	'isutcnt',  # The number of UT/local indicators stored in the file.
	'isstdcnt', # The number of standard/wall indicators stored in the file.
	'leapcnt',  # The number of leap seconds for which data is stored in the file.
	'timecnt',  # The number of transition times for which data is stored in the file.
	'typecnt',  # The number of local time types for which data is stored in the file (must not be zero).
	'charcnt',  # The number of characters of time zone abbreviation strings stored in the file.
)
tzif_header = collections.namedtuple('tzif_header', header_fields)
header_struct = struct.Struct("!4sc15x6l")
ttinfo_struct = struct.Struct("!lBB")

# Local time type; offset in seconds east of UTC.
ttinfo = collections.namedtuple('ttinfo', ('offset', 'dst', 'abbreviation'))

zonedata = collections.namedtuple('zonedata', (
	'version',
	'transitions', # Pairs of seconds since the epoch and the index of the entered type.
	'types',
	'footer',
))

def read_header(data, offset, path):
	if len(data) < offset + header_struct.size:
		raise core.ZoneDataError(path, "truncated header")

	h = tzif_header(*header_struct.unpack_from(data, offset))
	if h.magic != magic:
		raise core.ZoneDataError(path, "missing TZif magic")

	if h.typecnt == 0:
		raise core.ZoneDataError(path, "no local time types")
	if h.charcnt == 0:
		raise core.ZoneDataError(path, "no abbreviation characters")
	if min(h[2:]) < 0:
		raise core.ZoneDataError(path, "negative count in header")
	return h

def version_number(h):
	if h.version == b'\x00':
		return 1
	elif h.version in (b'2', b'3', b'4'):
		return int(h.version)
	raise ValueError("unknown TZif version: %r" %(h.version,))

def block_size(h, timesize):
	"""
	# The number of bytes in the data block following the header &h.
	"""
	return (
		(h.timecnt * timesize) +
		h.timecnt +
		(h.typecnt * ttinfo_struct.size) +
		h.charcnt +
		(h.leapcnt * (timesize + 4)) +
		h.isstdcnt +
		h.isutcnt
	)

def read_block(data, offset, h, timesize, path):
	"""
	# Unpack the transitions and local time types of a data block.
	"""
	end = offset + block_size(h, timesize)
	if len(data) < end:
		raise core.ZoneDataError(path, "truncated data block")

	fmt = "!%d%s" %(h.timecnt, 'q' if timesize == 8 else 'l')
	times = struct.unpack_from(fmt, data, offset)
	offset += h.timecnt * timesize

	# unsigned char's
	indexes = tuple(data[offset:offset+h.timecnt])
	offset += h.timecnt
	if indexes and max(indexes) >= h.typecnt:
		raise core.ZoneDataError(path, "transition refers to an unknown local time type")

	infos = [
		ttinfo_struct.unpack_from(data, offset + (i * ttinfo_struct.size))
		for i in range(h.typecnt)
	]
	offset += h.typecnt * ttinfo_struct.size

	##
	# Resolve the abbreviation index. Append a NUL terminator to the
	# string to guarantee that find() will not return -1.
	abbr = bytes(data[offset:offset+h.charcnt]) + b'\0'
	types = []
	for gmtoff, isdst, abbrind in infos:
		if abbrind >= h.charcnt:
			raise core.ZoneDataError(path, "abbreviation index out of range")
		name = abbr[abbrind:abbr.find(b'\0', abbrind)]
		types.append(ttinfo(gmtoff, bool(isdst), name.decode('ascii', 'replace')))

	return tuple(zip(times, indexes)), tuple(types), end

def read_footer(data, offset, path):
	if data[offset:offset+1] != b'\n':
		raise core.ZoneDataError(path, "missing footer")

	end = data.find(b'\n', offset + 1)
	if end == -1:
		raise core.ZoneDataError(path, "unterminated footer")
	return bytes(data[offset+1:end]).decode('ascii') or None

def parse(data, path=None):
	"""
	# Given TZif data, identify the version and unpack the timezone information.
	# Returns &None when &data is not TZif data.
	"""
	if bytes(data[:4]) != magic:
		# not a TZif file
		return None

	h = read_header(data, 0, path)
	try:
		version = version_number(h)
	except ValueError as err:
		raise core.ZoneDataError(path, str(err)) from err

	offset = header_struct.size
	if version == 1:
		transitions, types, end = read_block(data, offset, h, 4, path)
		return zonedata(version, transitions, types, None)

	# Skip the 32-bit block in favor of the 64-bit one.
	offset += block_size(h, 4)
	h = read_header(data, offset, path)
	offset += header_struct.size

	transitions, types, end = read_block(data, offset, h, 8, path)
	footer = read_footer(data, end, path)
	return zonedata(version, transitions, types, footer)

def system_timezone_file(identifier, tzdir=tzdir, _join=os.path.join):
	return _join(tzdir, *identifier.split('/'))

def get_timezone_data(filepath):
	"""
	# Get the structured timezone data out of the specified file.
	"""
	with open(filepath, 'rb') as f:
		return parse(f.read(), filepath)

def is_tzif(filepath):
	"""
	# Whether the file at &filepath starts with the TZif magic.
	"""
	try:
		with open(filepath, 'rb') as f:
			return f.read(4) == magic
	except (IsADirectoryError, PermissionError):
		return False
