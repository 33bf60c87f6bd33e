"""
GetCitedBy - AI visibility scoring and NAP consistency checks for Swiss local businesses
"""

__version__ = "1.0.0"
