"""Batch orchestration.

Drives conversion over a directory:
1. Discover ``.kml`` inputs
2. Convert each to ``.json`` (stale output replaced)
3. Summarise processed files and failures
"""
