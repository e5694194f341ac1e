"""Class Journal package.

Electronic attendance journal for academic groups: students, hourly
attendance facts and the daily/period views derived from them. Organized by
feature modules (students, attendance, users, ...) with a thin Flask
controller layer over service/repository layers.
"""
