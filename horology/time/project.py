identity = 'horology.time'
name = 'horology'
abstract = 'Immutable civil and zoned date-time values for the proleptic Gregorian calendar.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
