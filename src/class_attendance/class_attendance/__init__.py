"""Class Attendance package.

Feature modules (students, attendance, reports) sit on top of an embedded
SQLite store, with a thin Flask controller layer and service/repository layers.
"""
