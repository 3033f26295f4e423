"""
connect_four.data - Serialized game states

This package holds the wire schema shared with other engines and the
conversions between its naming conventions.
"""

from connect_four.data.wire import WireFormat, decode, dumps, encode, loads, translate

__all__ = ['WireFormat', 'encode', 'decode', 'dumps', 'loads', 'translate']
