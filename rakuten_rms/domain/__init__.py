"""
Domain layer for the RMS order client.

Holds the sparse condition objects callers fill in, the code sets RMS
accepts, and the date/time value codecs.
"""
