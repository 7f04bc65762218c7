"""
Implementation package for reglex, see the reglex package for the
public interface.
"""
