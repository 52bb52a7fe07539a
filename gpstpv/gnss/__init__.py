"""GNSS module for streaming NMEA sentences from gpsd into a TPV record."""

from gpstpv.gnss.reader import NMEAReader

__all__ = ["NMEAReader"]
