"""
"""
from .. import core
from .. import format

def test_parser_date(test):
	p = format.parser('date')
	test/p("2007-12-03") == {'year': 2007, 'month': 12, 'day': 3}
	test/p("+12345-01-01")['year'] == 12345
	test/p("-0001-12-31")['year'] == -1

def test_parser_time(test):
	p = format.parser('time')
	f = p("04:15")
	test/f['hour'] == 4
	test/f['minute'] == 15
	test/f['second'] == 0
	test/f['fraction'] == 0

	f = p("04:15:30.5")
	test/f['second'] == 30
	test/f['fraction'] == 500000000

	test/p("23:59:59,123456789")['fraction'] == 123456789

def test_parser_instant(test):
	p = format.parser('instant')
	f = p("2007-12-03T04:15:30Z")
	test/f['offset'] == 0
	test/f['hour'] == 4

	test/p("2007-12-03T04:15:30+01:30")['offset'] == 90
	test/p("2007-12-03t04:15:30-05:00")['offset'] == -300

def test_parser_zoned(test):
	p = format.parser('zoned')
	f = p("2007-12-03T04:15:30-05:00[America/New_York]")
	test/f['zone'] == 'America/New_York'
	test/f['offset'] == -300
	test/p("2007-12-03T04:15:30Z")['zone'] == None

def test_parser_unknown(test):
	with test/LookupError:
		format.parser('week')

def test_parse_error(test):
	p = format.parser('date')
	with test/core.ParseError as exc:
		p("2007-12-3")
	test/exc().source == "2007-12-3"
	test/exc().format == 'date'
	test.isinstance(exc(), ValueError)

	with test/core.ParseError:
		format.parser('datetime')("2007-12-03 04:15:30")

	with test/core.ParseError as exc:
		format.parser('time')(b'04:15')
	test.isinstance(exc().__cause__, TypeError)

def test_integrity_error(test):
	p = format.parser('date')
	with test/core.IntegrityError as exc:
		p("2007-02-30")
	test.isinstance(exc().__cause__, core.RangeError)
	test/exc().__cause__.field == 'day_of_month'

	with test/core.IntegrityError as exc:
		format.parser('time')("24:00")
	test/exc().__cause__.field == 'hour_of_day'

	with test/core.IntegrityError as exc:
		format.parser('instant')("2007-12-03T04:15:30+19:00")
	test/exc().__cause__.field == 'offset_minutes'

def test_format_year(test):
	test/format.format_year(2007) == "2007"
	test/format.format_year(7) == "0007"
	test/format.format_year(-1) == "-0001"
	test/format.format_year(12345) == "+12345"

def test_format_time(test):
	test/format.format_time(4, 15, 0, 0) == "04:15"
	test/format.format_time(4, 15, 0, 0, True) == "04:15:00"
	test/format.format_time(4, 15, 30, 0) == "04:15:30"
	test/format.format_time(4, 15, 30, 500000000) == "04:15:30.500"
	test/format.format_time(4, 15, 30, 1000) == "04:15:30.000001"
	test/format.format_time(4, 15, 30, 1) == "04:15:30.000000001"
	test/format.format_time(4, 15, 0, 1000000) == "04:15:00.001"

def test_format_offset(test):
	test/format.format_offset(0) == "Z"
	test/format.format_offset(120) == "+02:00"
	test/format.format_offset(-300) == "-05:00"
	test/format.format_offset(-30) == "-00:30"
	test/format.format_offset(1080) == "+18:00"

def test_format_duration(test):
	test/format.format_duration(0, 0) == "PT0S"
	test/format.format_duration(5400, 0) == "PT1H30M"
	test/format.format_duration(-5400, 0) == "PT-1H-30M"
	test/format.format_duration(-1, 500000000) == "PT-0.5S"
	test/format.format_duration(29166, 345000000) == "PT8H6M6.345S"
	test/format.format_duration(7 * 86400, 0) == "PT168H"
	test/format.format_duration(60, 0) == "PT1M"

if __name__ == '__main__':
	import sys; from ...test import core as libtest
	libtest.execute(sys.modules[__name__])
