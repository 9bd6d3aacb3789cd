"""classroll package.

Desktop attendance manager for sections and students, organized by feature
modules (users, sections, students, attendance, dashboard, ...) with a thin
request/response bridge over service/repository layers backed by SQLite.
"""

__version__ = "1.0.0"
