"""
Implementation of fluentzpl, see fluentzpl for the public interface.
"""
