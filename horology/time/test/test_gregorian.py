"""
"""
import itertools
from .. import core
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(1704)
	test/True == gregorian.year_is_leap(0)
	test/True == gregorian.year_is_leap(-4)
	test/False == gregorian.year_is_leap(-1)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1600, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_days_in_month(test):
	test/29 == gregorian.days_in_month(2024, 2)
	test/28 == gregorian.days_in_month(2023, 2)
	test/28 == gregorian.days_in_month(1900, 2)
	test/29 == gregorian.days_in_month(2000, 2)
	test/31 == gregorian.days_in_month(2007, 12)
	test/30 == gregorian.days_in_month(2007, 4)
	test/366 == gregorian.days_in_year(2024)
	test/365 == gregorian.days_in_year(2023)

def test_cycle_totals(test):
	test/4800 == gregorian.months_in_cycle
	test/146097 == gregorian.days_in_cycle

	# Day 59 of year 0, a leap year, is February 29.
	test/(0, 1, 28, 29) == gregorian.resolve(gregorian._by_days, 59)
	test/(0, 397, 0, 28) == gregorian.resolve(gregorian._by_months, 14)
	test/(1, 0, 0, 31) == gregorian.resolve(gregorian._by_days, 146097)
	test/(-1, 4799, 30, 31) == gregorian.resolve(gregorian._by_days, -1)

def test_epoch_offset(test):
	test/719528 == gregorian.epoch_offset
	test/0 == gregorian.days_from_date((0, 1, 1))
	test/(0, 1, 2) == gregorian.date_from_days(1)

def test_date_from_epoch_day(test):
	test/(1970, 1, 1) == gregorian.date_from_epoch_day(0)
	test/(1969, 12, 31) == gregorian.date_from_epoch_day(-1)
	test/(2007, 12, 3) == gregorian.date_from_epoch_day(13850)
	test/(2000, 3, 1) == gregorian.date_from_epoch_day(11017)
	test/(2000, 2, 29) == gregorian.date_from_epoch_day(11016)
	test/13850 == gregorian.epoch_day_from_date((2007, 12, 3))

def test_epoch_day_scan(test):
	"""
	# Sequential days produce sequential dates across a complete cycle.
	"""
	prior = gregorian.date_from_epoch_day(-gregorian.days_in_cycle - 1)
	for day in range(-gregorian.days_in_cycle, gregorian.days_in_cycle, 89):
		date = gregorian.date_from_epoch_day(day)
		test/day == gregorian.epoch_day_from_date(date)
		test/date > prior
		prior = date

	for day in range(-800, 800):
		test/day == gregorian.epoch_day_from_date(gregorian.date_from_epoch_day(day))

def test_negative_years(test):
	test/(-1, 12, 31) == gregorian.date_from_epoch_day(gregorian.epoch_day_from_date((-1, 12, 31)))
	test/(0, 2, 29) == gregorian.date_from_epoch_day(gregorian.epoch_day_from_date((0, 2, 29)))
	test/1 == gregorian.epoch_day_from_date((0, 1, 1)) - gregorian.epoch_day_from_date((-1, 12, 31))

def test_day_of_week(test):
	test/4 == gregorian.day_of_week(0) # Thursday
	test/1 == gregorian.day_of_week(gregorian.epoch_day_from_date((2007, 12, 3)))
	test/6 == gregorian.day_of_week(gregorian.epoch_day_from_date((2000, 1, 1)))
	test/3 == gregorian.day_of_week(-1)

def test_day_of_year(test):
	test/61 == gregorian.day_of_year((2024, 3, 1))
	test/60 == gregorian.day_of_year((2023, 3, 1))
	test/365 == gregorian.day_of_year((2023, 12, 31))
	test/337 == gregorian.day_of_year((2007, 12, 3))

def test_validate(test):
	test/(2024, 2, 29) == gregorian.validate(2024, 2, 29)
	with test/core.RangeError as exc:
		gregorian.validate(2023, 2, 29)
	test/exc().field == 'day_of_month'
	test/exc().maximum == 28

	with test/core.RangeError as exc:
		gregorian.validate(2023, 13, 1)
	test/exc().field == 'month_of_year'

	with test/core.RangeError:
		gregorian.validate(2023, 1, 0)

def test_add_months(test):
	test/(2024, 2, 29) == gregorian.add_months((2024, 1, 31), 1)
	test/(2023, 2, 28) == gregorian.add_months((2023, 1, 31), 1)
	test/(2024, 2, 29) == gregorian.add_months((2024, 3, 31), -1)
	test/(2008, 1, 3) == gregorian.add_months((2007, 12, 3), 1)
	test/(2005, 12, 15) == gregorian.add_months((2007, 1, 15), -13)
	test/(2025, 2, 28) == gregorian.add_months((2024, 2, 29), 12)
	test/(-1, 12, 1) == gregorian.add_months((0, 1, 1), -1)

def test_months_between(test):
	test/0 == gregorian.months_between((2024, 1, 31), (2024, 2, 29))
	test/2 == gregorian.months_between((2024, 1, 31), (2024, 3, 31))
	test/-2 == gregorian.months_between((2024, 3, 31), (2024, 1, 31))
	test/-1 == gregorian.months_between((2024, 3, 15), (2024, 1, 20))
	test/0 == gregorian.months_between((2007, 12, 3, 10), (2008, 1, 3, 9))
	test/1 == gregorian.months_between((2007, 12, 3, 10), (2008, 1, 3, 10))

if __name__ == '__main__':
	import sys; from ...test import core as libtest
	libtest.execute(sys.modules[__name__])
