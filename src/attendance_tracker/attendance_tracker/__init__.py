"""Attendance Tracker package.

Student attendance admin organized by feature modules (students, signing,
links, notifications) with a thin Flask controller layer over service and
repository layers.
"""
