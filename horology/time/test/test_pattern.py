"""
"""
from .. import core
from .. import types
from .. import views
from .. import pattern
from . import samples

D = pattern.Directive

def test_compile(test):
	p = pattern.compile("dd/MM/yyyy")
	test/p.items == (D('d', 'day', 2), '/', D('M', 'month', 2), '/', D('y', 'year', 4))
	test/p.fields == {'day', 'month', 'year'}
	test/str(p) == "dd/MM/yyyy"
	test/pattern.compile("dd/MM/yyyy") % p

	test/pattern.compile("HH'h'mm").items == (D('H', 'hour', 2), 'h', D('m', 'minute', 2))
	test/pattern.compile("''HH").items == ("'", D('H', 'hour', 2))
	test/pattern.compile("'o''clock'").items == ("o'clock",)
	test/pattern.compile("H 'at' d").items == (D('H', 'hour', 1), ' at ', D('d', 'day', 1))
	test/pattern.compile("").items == ()

def test_compile_errors(test):
	with test/core.PatternError as exc:
		pattern.compile("dd/MM/yyyy Q")
	test/exc().position == 11

	with test/core.PatternError as exc:
		pattern.compile("HH 'oclock")
	test/exc().position == 3

	with test/core.PatternError:
		pattern.compile("HHH")
	with test/core.PatternError:
		pattern.compile("y" * 10)
	with test/core.PatternError:
		pattern.compile("SSSSSSSSSS")
	with test/TypeError:
		pattern.compile(None)

def test_directive(test):
	test/D('y', 'year', 2).reduced == True
	test/D('y', 'year', 2).variable == False
	test/D('y', 'year', 4).variable == True
	test/D('d', 'day', 1).variable == True
	test/D('d', 'day', 2).variable == False
	test/D('S', 'fraction', 3).minimum == 3

def test_format_civil(test):
	d = types.LocalDate(2007, 12, 3)
	test/pattern.format(d, "dd/MM/yyyy") == "03/12/2007"
	test/pattern.format(d, "d/M/y") == "3/12/2007"
	test/pattern.format(d, "yy") == "07"
	test/pattern.format(d, "'Day' d 'of' MM") == "Day 3 of 12"
	test/pattern.format(types.LocalDate(-1, 1, 1), "yyyy-MM-dd") == "-0001-01-01"
	test/pattern.format(types.LocalDate(12345, 1, 1), "yyyy") == "12345"

	t = types.LocalTime(4, 15, 30, 123456789)
	test/pattern.format(t, "HH:mm:ss") == "04:15:30"
	test/pattern.format(t, "H:m:s.SSS") == "4:15:30.123"
	test/pattern.format(t, "SSSSSSSSS") == "123456789"

	ldt = types.LocalDateTime.of(2007, 12, 3, 4, 15, 30)
	test/pattern.format(ldt, "dd/MM/yyyy HH:mm:ss") == "03/12/2007 04:15:30"

def test_format_zone_ignored(test):
	z = samples.eastern()
	d = types.LocalDate(2007, 12, 3)
	test/pattern.format(d, "dd/MM/yyyy", z) == "03/12/2007"
	ldt = types.LocalDateTime.of(2007, 12, 3, 4, 15, 30)
	test/pattern.format(ldt, "HH:mm", z) == "04:15"

def test_format_projection(test):
	z = samples.eastern()
	i = types.Instant.parse("2007-12-03T04:15:30Z")
	test/pattern.format(i, "dd/MM/yyyy HH:mm:ss", z) == "02/12/2007 23:15:30"
	test/pattern.format(i, "dd/MM/yyyy HH:mm:ss", views.FixedZone(types.utc)) == "03/12/2007 04:15:30"

	zdt = i.at_zone(views.PrefixedZone('UTC'))
	test/pattern.format(zdt, "HH:mm") == "04:15"
	test/pattern.format(zdt, "HH:mm", z) == "23:15"

def test_format_unsupported(test):
	i = types.Instant.parse("2007-12-03T04:15:30Z")
	with test/core.UnsupportedFieldError:
		pattern.format(i, "dd/MM/yyyy")
	with test/core.UnsupportedFieldError:
		pattern.format(types.LocalDate(2007, 12, 3), "HH")
	with test/core.UnsupportedFieldError:
		pattern.format(types.LocalTime(4), "yyyy")

def test_pattern_methods(test):
	p = pattern.compile("dd/MM/yyyy")
	d = p.parse("03/12/2007")
	test/d == types.LocalDate(2007, 12, 3)
	test/p.format(d) == "03/12/2007"
	test/p.format(d, views.FixedZone(types.Offset.of_hours(2))) == "03/12/2007"

def test_parse(test):
	test/pattern.parse("03/12/2007", "dd/MM/yyyy") == types.LocalDate(2007, 12, 3)
	test/pattern.parse("3/12/2007", "d/M/yyyy") == types.LocalDate(2007, 12, 3)
	test/pattern.parse("20071203", "yyyyMMdd") == types.LocalDate(2007, 12, 3)
	test/pattern.parse("07-12-03", "yy-MM-dd") == types.LocalDate(2007, 12, 3)
	test/pattern.parse("-0001-01-01", "yyyy-MM-dd") == types.LocalDate(-1, 1, 1)
	test/pattern.parse("10:15", "HH:mm") == types.LocalTime(10, 15)
	test/pattern.parse("04:15:30.5", "HH:mm:ss.S") == types.LocalTime(4, 15, 30, 500000000)
	test/pattern.parse("041530123", "HHmmssSSS") == types.LocalTime(4, 15, 30, 123000000)
	test/pattern.parse("03/12/2007 04:15:30", "dd/MM/yyyy HH:mm:ss") == types.LocalDateTime.of(2007, 12, 3, 4, 15, 30)
	# Repeated fields must agree.
	test/pattern.parse("2007-12-03 (2007)", "yyyy-MM-dd (yyyy)") == types.LocalDate(2007, 12, 3)

def test_parse_errors(test):
	with test/core.ParseError as exc:
		pattern.parse("31/02/2007", "dd/MM/yyyy")
	test.isinstance(exc().__cause__, core.RangeError)

	with test/core.ParseError as exc:
		pattern.parse("3/12/2007", "dd/MM/yyyy")
	test/exc().position == 0

	with test/core.ParseError as exc:
		pattern.parse("03/12/2007x", "dd/MM/yyyy")
	test/exc().position == 10

	with test/core.ParseError as exc:
		pattern.parse("03-12-2007", "dd/MM/yyyy")
	test/exc().position == 2
	test/exc().format == "dd/MM/yyyy"

	with test/core.ParseError:
		pattern.parse("12/2007", "MM/yyyy")
	with test/core.ParseError:
		pattern.parse("15:30", "mm:ss")
	with test/core.ParseError:
		pattern.parse("x", "'x'")
	with test/core.ParseError:
		pattern.parse("2007 2008 12 03", "yyyy yyyy MM dd")
	with test/core.ParseError:
		pattern.parse("24:00", "HH:mm")

	# Fractions beyond nanosecond precision are rejected.
	test/pattern.parse("04:15:30.123456789", "HH:mm:ss.S") == types.LocalTime(4, 15, 30, 123456789)
	with test/core.ParseError as exc:
		pattern.parse("04:15:30.1234567891", "HH:mm:ss.S")
	test/exc().position == 18
	with test/TypeError:
		pattern.parse(None, "HH:mm")

def test_formatter(test):
	z = samples.eastern()
	f = pattern.Formatter("dd/MM/yyyy HH:mm:ss")
	test/repr(f) == "Formatter('dd/MM/yyyy HH:mm:ss')"
	test/f.zone == None
	test/f == pattern.Formatter("dd/MM/yyyy HH:mm:ss")
	test/hash(f) == hash(pattern.Formatter("dd/MM/yyyy HH:mm:ss"))

	fz = f.with_zone(z)
	test/fz.zone % z
	test/fz.pattern % f.pattern
	test/fz != f
	test/repr(fz) == "Formatter('dd/MM/yyyy HH:mm:ss', (time.zone@'Test/Eastern'[5]))"

	i = types.Instant.parse("2007-12-03T10:15:30Z")
	test/fz.format(i) == "03/12/2007 05:15:30"
	with test/core.UnsupportedFieldError:
		f.format(i)

def test_formatter_parse(test):
	z = samples.eastern()
	f = pattern.Formatter("dd/MM/yyyy HH:mm:ss", z)
	text = "03/12/2007 05:15:30"

	test/f.parse(text) == types.LocalDateTime.of(2007, 12, 3, 5, 15, 30)
	test/f.parse(text, types.LocalDate) == types.LocalDate(2007, 12, 3)
	test/f.parse(text, types.LocalTime) == types.LocalTime(5, 15, 30)

	zdt = f.parse(text, types.ZonedDateTime)
	test/zdt.offset == types.Offset.of_hours(-5)
	test/zdt.zone % z
	test/f.parse(text, types.Instant) == types.Instant.parse("2007-12-03T10:15:30Z")

	test/types.LocalDateTime.parse(text, f) == types.LocalDateTime.of(2007, 12, 3, 5, 15, 30)
	test/types.Instant.parse(text, f) == types.Instant.parse("2007-12-03T10:15:30Z")
	test/types.ZonedDateTime.parse(text, f) == zdt

	with test/core.ParseError:
		f.with_zone(None).parse(text, types.ZonedDateTime)
	with test/core.ParseError:
		pattern.Formatter("dd/MM/yyyy", z).parse("03/12/2007", types.Instant)
	with test/core.ParseError:
		pattern.Formatter("dd/MM/yyyy").parse("03/12/2007", types.LocalTime)
	with test/core.ParseError:
		pattern.Formatter("HH:mm").parse("10:15", types.LocalDate)
	with test/core.ParseError:
		pattern.Formatter("dd/MM/yyyy").parse("03/12/2007", types.LocalDateTime)
	with test/TypeError:
		f.parse(text, str)

def test_formatter_gap(test):
	# Parsed local date-times are resolved with the zone's gap policy.
	z = samples.eastern()
	f = pattern.Formatter("yyyy-MM-dd HH:mm", z)
	zdt = f.parse("2007-03-11 02:30", types.ZonedDateTime)
	test/str(zdt) == "2007-03-11T03:30-04:00[Test/Eastern]"

if __name__ == '__main__':
	import sys; from ...test import core as libtest
	libtest.execute(sys.modules[__name__])
