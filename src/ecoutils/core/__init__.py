"""
Core domain models, geodetic conversions and Brazilian formatters.

Everything here is pure: no I/O, no shared mutable state, independent of the
document database, the AI flows and the UI that consume it.
"""
