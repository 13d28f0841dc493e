"""
modules package — algorithmic components of tripgeo.
"""
