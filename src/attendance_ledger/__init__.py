"""Attendance Ledger package.

Participants register once and mark their own attendance per calendar day;
a single configured administrator may override any record and evict
participants. Organized by feature modules (identity, participants,
attendance, ledger) with a thin Flask controller layer on top of
service/repository layers.
"""
