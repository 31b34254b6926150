"""
# Date and time primitives for the proleptic Gregorian calendar.

# The functionality is provided by &.time; &.test holds the harness that the
# project's tests are written against.
"""
