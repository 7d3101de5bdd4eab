"""Outbound realtime payload builders.

These modules build the payload of each server-to-client event. They must not
define Socket.IO server instances or connection handlers.
"""
