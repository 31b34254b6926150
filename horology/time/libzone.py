"""
# Zone identifier resolution.

# &Registry maps identifiers to &.views.Zone instances. Fixed offsets, `+02:00`,
# and the universal prefixes, `UTC`, `GMT+2`, are resolved without data;
# region identifiers, `America/New_York`, are looked up in the in-memory regions
# and then read from the TZif database directory.

#!syntax/python
	registry = libzone.Registry.database()
	z = registry.resolve("America/New_York")
	local = registry.system()

# Files are read once per identifier per registry.
"""
import os
import os.path
import re

from . import core
from . import types
from . import views
from . import tzif

# Components of region identifiers; excludes parent directory references.
identifier_expression = re.compile(r'[A-Za-z0-9_+-][A-Za-z0-9._+-]*(?:/[A-Za-z0-9_+-][A-Za-z0-9._+-]*)*', re.ASCII)

def fixed(text):
	"""
	# Resolve the offset identifier &text to a &views.FixedZone.
	"""
	return views.FixedZone(types.Offset.of(text))

def prefixed(text):
	"""
	# Resolve `UTC`, `GMT`, and `UT` alone or followed by an offset.
	# Returns &None when &text does not begin with a universal prefix.
	"""
	for prefix in views.PrefixedZone.prefixes:
		if text == prefix:
			return views.PrefixedZone(prefix)
		if text.startswith(prefix) and text[len(prefix):len(prefix)+1] in ('+', '-'):
			return views.PrefixedZone(prefix, types.Offset.of(text[len(prefix):]))
	return None

class Registry(object):
	"""
	# Resolver of zone identifiers.

	# [ Properties ]
	# /regions/
		# Mapping of region identifiers to prepared zones consulted before the &directory.
	# /directory/
		# The TZif database directory; &None when no files should be read.
	# /default/
		# Identifier or zone returned by &system; overrides the environment.
	# /environ/
		# The environment consulted by &system.
	# /localtime/
		# The file describing the host's zone.
	"""

	def __init__(self, regions=(), directory=None, default=None, environ=None, localtime=tzif.tzdefault):
		self.regions = dict(regions)
		self.directory = directory
		self.default = default
		self.environ = os.environ if environ is None else environ
		self.localtime = localtime
		self._load = core.cachedcalls(None)(self._read)

	def __repr__(self):
		return "%s(directory=%r, regions=%d)" %(self.__class__.__name__, self.directory, len(self.regions))

	@classmethod
	def database(Class, environ=None):
		"""
		# Construct a registry reading the host's zone database; `TZDIR`
		# overrides the default directory.
		"""
		env = os.environ if environ is None else environ
		return Class(directory=env.get(tzif.tzdirenviron) or tzif.tzdir, environ=env)

	def _read(self, identifier, path):
		try:
			data = tzif.get_timezone_data(path)
		except OSError as err:
			raise core.UnknownZoneError(identifier, "zone file could not be read") from err
		except core.ZoneDataError as err:
			raise core.UnknownZoneError(identifier, "zone file is corrupt") from err

		if data is None:
			raise core.UnknownZoneError(identifier, "not a zone information file")

		try:
			return views.RegionZone.from_tzif_data(identifier, data)
		except core.ParseError as err:
			raise core.UnknownZoneError(identifier, "zone rule is corrupt") from err

	def region(self, identifier):
		"""
		# Resolve a region identifier ignoring fixed offsets and prefixes.
		"""
		if identifier in self.regions:
			return self.regions[identifier]

		if self.directory is None:
			raise core.UnknownZoneError(identifier)

		if identifier_expression.fullmatch(identifier) is None:
			raise core.UnknownZoneError(identifier, "invalid region identifier")

		path = tzif.system_timezone_file(identifier, self.directory)
		if not os.path.isfile(path):
			raise core.UnknownZoneError(identifier)

		return self._load(identifier, path)

	def resolve(self, identifier:str) -> views.Zone:
		"""
		# Resolve the &identifier to a &views.Zone.
		# &core.UnknownZoneError is raised when the identifier is not known or
		# its data is invalid; the underlying error is the `__cause__`.
		"""
		if not isinstance(identifier, str):
			raise TypeError("zone identifier must be a str, not " + type(identifier).__name__)

		if identifier[:1] in ('+', '-') or identifier in ('Z', 'z'):
			try:
				return fixed(identifier)
			except (core.ParseError, core.RangeError) as err:
				raise core.UnknownZoneError(identifier, "invalid offset") from err

		try:
			z = prefixed(identifier)
		except (core.ParseError, core.RangeError) as err:
			raise core.UnknownZoneError(identifier, "invalid offset") from err
		if z is not None:
			return z

		return self.region(identifier)

	def identifiers(self):
		"""
		# The region identifiers available to the registry.
		"""
		ids = set(self.regions)
		if self.directory is not None and os.path.isdir(self.directory):
			prefix = len(self.directory.rstrip('/')) + 1
			for dirpath, dirnames, filenames in os.walk(self.directory):
				for x in filenames:
					path = os.path.join(dirpath, x)
					name = path[prefix:].replace(os.sep, '/')
					if identifier_expression.fullmatch(name) and tzif.is_tzif(path):
						ids.add(name)
		return sorted(ids)

	def _local_identifier(self, path):
		# Derive the identifier from the database path that the file links to.
		target = os.path.realpath(path)
		if self.directory is not None:
			root = os.path.realpath(self.directory) + os.sep
			if target.startswith(root):
				return target[len(root):].replace(os.sep, '/')

		parts = target.split(os.sep)
		if 'zoneinfo' in parts:
			return '/'.join(parts[len(parts) - parts[::-1].index('zoneinfo'):])
		return None

	def system(self) -> views.Zone:
		"""
		# The host's zone: &default when given, the `TZ` environment variable,
		# the zone described by &localtime, or `UTC`.
		"""
		if self.default is not None:
			if isinstance(self.default, views.Zone):
				return self.default
			return self.resolve(self.default)

		tz = self.environ.get(tzif.tzenviron)
		if tz:
			return self.environment(tz)

		if self.localtime is not None and os.path.isfile(self.localtime):
			identifier = self._local_identifier(self.localtime)
			if identifier:
				try:
					return self.resolve(identifier)
				except core.UnknownZoneError:
					# Link into a database other than the registry's.
					pass
			return self._load(identifier or 'localtime', self.localtime)

		return views.PrefixedZone('UTC')

	def environment(self, tz):
		"""
		# Resolve the `TZ` environment variable value, &tz: an optional leading colon
		# followed by an identifier, an absolute path, or a POSIX rule.
		"""
		from . import posix
		identifier = tz[1:] if tz.startswith(':') else tz

		if os.path.isabs(identifier):
			return self._load(self._local_identifier(identifier) or identifier, identifier)

		try:
			return self.resolve(identifier)
		except core.UnknownZoneError as err:
			try:
				rule = posix.Rule.parse(identifier)
			except core.ParseError:
				raise err
			return views.RegionZone(identifier, (), (), rule.standard, rule)
