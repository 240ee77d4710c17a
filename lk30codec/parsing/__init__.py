"""
This package contains the binary codecs for the LK30 sensor's
application-layer payloads.

Sub-packages handle each direction:

- ``uplink``: Sensor report decoding.
- ``commands``: Downlink command construction.
"""
