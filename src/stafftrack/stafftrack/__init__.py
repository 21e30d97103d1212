"""StaffTrack package.

Tracks staff events (absences, cover duties, training) and their impact score.
Organized by feature modules (staff, event_types, logs, stats, reports, ...)
with a thin Flask controller layer over pure mutation/aggregation functions
and a whole-document JSON store.
"""
