"""Application monitor package.

The package turns a flat collection of job-application records into the views
a client monitor displays:
- `models.py` defines the record schema the monitor reads (read-only).
- `dates.py` normalizes heterogeneous date values into one canonical instant.
- `status.py` decides whether a record is a currently active application.
- `indexer.py` groups records by client and counts statuses.
- `pipeline.py` composes the above into ordered, date-bounded views.
- `sources/` contains record suppliers.
"""
