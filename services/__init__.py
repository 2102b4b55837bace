"""
Hashing services for digestkit: the algorithm dispatcher, sessions and their errors.
"""
