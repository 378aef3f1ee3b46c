"""
Services for callroute
"""
