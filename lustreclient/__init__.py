"""
FSx for Lustre client installer.

Detects the host distribution and kernel, resolves a supported repository
revision from the compatibility table, installs and verifies the Lustre
client, and optionally checks reachability of an FSx file system.
"""

VERSION = "1.0.0"
__version__ = VERSION
