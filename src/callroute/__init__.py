"""
callroute - Telephony account selection and emergency routing helpers

Chooses which calling account to use or display, synthesizes a fallback
emergency account, and consults an external authority about emergency
numbers for an upstream call manager.
"""

__version__ = "1.0.0"
__author__ = "callroute Development Team"
