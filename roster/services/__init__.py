"""
Use cases for the roster application.

The session orchestrates a StudentRepository and a RosterView; it never
touches the roster file or the console directly.
"""
