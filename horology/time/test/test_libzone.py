"""
"""
import os
import os.path
import tempfile

from .. import core
from .. import types
from .. import views
from .. import tzif
from .. import libzone
from . import samples

december = types.Instant.parse("2007-12-03T10:15:30Z")
july = types.Instant.parse("2007-07-04T12:00:00Z")

def database(test):
	"""
	# Temporary zone database with `America/New_York` and some noise.
	"""
	d = test.exits.enter_context(tempfile.TemporaryDirectory())
	os.makedirs(os.path.join(d, 'America'))
	with open(os.path.join(d, 'America', 'New_York'), 'wb') as f:
		f.write(samples.tzif())
	with open(os.path.join(d, 'zone.tab'), 'w') as f:
		f.write("# comments\n")
	return d

def write(path, data):
	with open(path, 'wb') as f:
		f.write(data)
	return path

def test_fixed(test):
	test/libzone.fixed("+02:00") == views.FixedZone(types.Offset.of_hours(2))
	test/libzone.fixed("Z").identifier == "Z"

	with test/core.ParseError:
		libzone.fixed("02:00")

def test_prefixed(test):
	test/libzone.prefixed("UTC").identifier == "UTC"
	test/libzone.prefixed("GMT+2").identifier == "GMT+02:00"
	test/libzone.prefixed("UT-05:00").offset == types.Offset.of_hours(-5)
	test/libzone.prefixed("UTC+0").identifier == "UTC"
	test/libzone.prefixed("America/New_York") == None
	test/libzone.prefixed("UTCX") == None

def test_resolve_offsets(test):
	r = libzone.Registry()
	test/r.resolve("+02:00").identifier == "+02:00"
	test/r.resolve("-05").offset == types.Offset.of_hours(-5)
	test/r.resolve("Z").identifier == "Z"
	test.isinstance(r.resolve("UTC"), views.PrefixedZone)
	test/r.resolve("GMT+2").identifier == "GMT+02:00"

	for x in ("+25:00", "+02:00:00", "UTC+x", "GMT+19"):
		with test/core.UnknownZoneError as exc:
			r.resolve(x)
		test/exc().identifier == x

	with test/TypeError:
		r.resolve(None)

def test_resolve_regions(test):
	r = samples.registry()
	z = r.resolve('Test/Eastern')
	test/z.identifier == 'Test/Eastern'
	test/r.resolve('Test/Eastern') % z
	test/r.region('Test/Eastern') % z

	with test/core.UnknownZoneError as exc:
		r.resolve('Test/Western')
	test/exc().identifier == 'Test/Western'
	test.isinstance(exc(), LookupError)

def test_resolve_database(test):
	d = database(test)
	r = libzone.Registry(directory=d)

	z = r.resolve('America/New_York')
	test.isinstance(z, views.RegionZone)
	test/z.identifier == 'America/New_York'
	test/z.offset_at(december) == types.Offset.of_hours(-5)
	test/z.offset_at(july) == types.Offset.of_hours(-4)

	# Files are read once.
	test/r.resolve('America/New_York') % z

	for x in ('America/Nowhere', 'America', '../America/New_York', 'America/../America/New_York', '/America/New_York'):
		with test/core.UnknownZoneError:
			r.resolve(x)

def test_resolve_corrupt(test):
	d = database(test)
	write(os.path.join(d, 'Truncated'), samples.tzif()[:60])
	write(os.path.join(d, 'Badrule'), samples.tzif(footer='garbage'))
	r = libzone.Registry(directory=d)

	with test/core.UnknownZoneError as exc:
		r.resolve('Truncated')
	test.isinstance(exc().__cause__, core.ZoneDataError)

	with test/core.UnknownZoneError as exc:
		r.resolve('Badrule')
	test.isinstance(exc().__cause__, core.ParseError)

	with test/core.UnknownZoneError as exc:
		r.resolve('zone.tab')
	test/exc().reason == "not a zone information file"

def test_identifiers(test):
	d = database(test)
	r = libzone.Registry(regions={'Test/Eastern': samples.eastern()}, directory=d)
	test/r.identifiers() == ['America/New_York', 'Test/Eastern']
	test/libzone.Registry().identifiers() == []

def test_database(test):
	d = database(test)
	test/libzone.Registry.database(environ={'TZDIR': d}).directory == d
	test/libzone.Registry.database(environ={}).directory == tzif.tzdir
	test/libzone.Registry.database(environ={'TZDIR': ''}).directory == tzif.tzdir

def test_system_default(test):
	r = samples.registry(default='Test/Eastern', environ={'TZ': 'UTC'})
	test/r.system().identifier == 'Test/Eastern'

	z = views.FixedZone(types.Offset.of_hours(2))
	test/samples.registry(default=z).system() % z

def test_system_environment(test):
	d = database(test)
	r = libzone.Registry(directory=d, environ={'TZ': 'America/New_York'}, localtime=None)
	test/r.system().identifier == 'America/New_York'

	r = libzone.Registry(directory=d, environ={'TZ': ':America/New_York'}, localtime=None)
	test/r.system().identifier == 'America/New_York'

	r = libzone.Registry(directory=d, environ={'TZ': '+02:00'}, localtime=None)
	test/r.system().identifier == '+02:00'

	path = os.path.join(d, 'America', 'New_York')
	r = libzone.Registry(directory=d, environ={'TZ': path}, localtime=None)
	test/r.system().identifier == 'America/New_York'

def test_system_posix_rule(test):
	r = libzone.Registry(environ={'TZ': samples.eastern_rule}, localtime=None)
	z = r.system()
	test/z.identifier == samples.eastern_rule
	test/z.offset_at(december) == types.Offset.of_hours(-5)
	test/z.offset_at(july) == types.Offset.of_hours(-4)

	r = libzone.Registry(environ={'TZ': 'Not/AZone'}, localtime=None)
	with test/core.UnknownZoneError:
		r.system()

def test_system_localtime(test):
	d = database(test)
	t = test.exits.enter_context(tempfile.TemporaryDirectory())

	link = os.path.join(t, 'localtime')
	os.symlink(os.path.join(d, 'America', 'New_York'), link)
	r = libzone.Registry(directory=d, environ={}, localtime=link)
	test/r.system().identifier == 'America/New_York'

	# A copy outside of any database.
	copy = write(os.path.join(t, 'copy'), samples.tzif())
	r = libzone.Registry(directory=d, environ={}, localtime=copy)
	z = r.system()
	test/z.identifier == 'localtime'
	test/z.offset_at(december) == types.Offset.of_hours(-5)

	# A link into some other zoneinfo directory.
	other = os.path.join(t, 'zoneinfo', 'Test')
	os.makedirs(other)
	write(os.path.join(other, 'Eastern'), samples.tzif())
	os.symlink(os.path.join(other, 'Eastern'), os.path.join(t, 'linked'))
	r = libzone.Registry(directory=d, environ={}, localtime=os.path.join(t, 'linked'))
	test/r.system().identifier == 'Test/Eastern'

def test_system_fallback(test):
	r = libzone.Registry(environ={}, localtime=None)
	z = r.system()
	test/z.identifier == 'UTC'
	test/z.offset == types.utc

	r = libzone.Registry(environ={'TZ': ''}, localtime='/nonexistent/localtime')
	test/r.system().identifier == 'UTC'

if __name__ == '__main__':
	import sys; from ...test import core as libtest
	libtest.execute(sys.modules[__name__])
