"""
Shared constants, enumerations, and helper utilities.

Centralizes default link geometry, numeric tolerances, the kinematics type
enumeration, and small stateless helpers used across the rrr_kins package.
"""
