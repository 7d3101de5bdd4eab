"""Realtime infrastructure (Socket.IO).

Holds the connection registry, event routing and fan-out shared by every
realtime feature of the site.
"""
