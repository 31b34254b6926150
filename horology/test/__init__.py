"""
# Contention based test harness used by the &horology packages.
"""
