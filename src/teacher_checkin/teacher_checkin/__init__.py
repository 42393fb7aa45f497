"""Teacher Check-in Tracker package.

Organized by feature modules (schedule, attendance, reports, roster) with a
thin Flask controller layer on top of plain service/repository layers.
"""
