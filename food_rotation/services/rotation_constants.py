"""
Rotation Constants

The rotation window and the summary lookback are separate values on
purpose: the summary window is one day narrower than the rotation window.
"""

# A food is available again this many days after it was last eaten
ROTATION_DAYS = 4

# Summary covers entries dated on or after today minus this many days
SUMMARY_LOOKBACK_DAYS = 3

# Largest id the storage layer can hold (signed 64-bit INTEGER)
MAX_ROW_ID = 2**63 - 1
